# skilllink/schemas/__init__.py

# Auth schemas
from .auth import Token, TokenData, LoginRequest, TeachModeUpdate, ActiveUpdate, RoleUpdate

# User schemas
from .user import PublicUser, UserProfile, AdminUserView, UpdateProfileRequest

# Skill schemas
from .skill import Skill, UserSkill, AddSkillRequest

# Request board / acceptance schemas
from .request import (
    RequestCreate,
    RequestUpdate,
    RequestView,
    AcceptedRequestView,
    AcceptedStatus,
    ScheduleMeetingRequest,
)

# Session schemas
from .session import SessionCreate, SessionView

__all__ = [
    "Token",
    "TokenData",
    "LoginRequest",
    "TeachModeUpdate",
    "ActiveUpdate",
    "RoleUpdate",
    "PublicUser",
    "UserProfile",
    "AdminUserView",
    "UpdateProfileRequest",
    "Skill",
    "UserSkill",
    "AddSkillRequest",
    "RequestCreate",
    "RequestUpdate",
    "RequestView",
    "AcceptedRequestView",
    "AcceptedStatus",
    "ScheduleMeetingRequest",
    "SessionCreate",
    "SessionView",
]
