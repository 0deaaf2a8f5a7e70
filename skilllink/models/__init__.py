# skilllink/models/__init__.py
# Import models in dependency order
from .user import User, Role
from .skill import Skill, UserSkill, SkillLevel
from .request import Request, AcceptedRequest, RequestStatus, AcceptanceStatus, MeetingType
from .session import Session, SessionStatus

__all__ = [
    "User",
    "Role",
    "Skill",
    "UserSkill",
    "SkillLevel",
    "Request",
    "AcceptedRequest",
    "RequestStatus",
    "AcceptanceStatus",
    "MeetingType",
    "Session",
    "SessionStatus",
]
