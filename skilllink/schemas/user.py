from datetime import datetime
from typing import Optional

from skilllink.schemas.base import CamelModel


# ======================
# USER DISPLAY SCHEMAS
# ======================

class PublicUser(CamelModel):
    """User fields safe to expose to any caller."""
    user_id: int
    full_name: str
    email: str
    role: str
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_picture: Optional[str] = None
    ready_to_teach: bool = False
    created_at: Optional[datetime] = None


class UserProfile(PublicUser):
    is_active: bool
    email_verified: bool


class AdminUserView(CamelModel):
    user_id: int
    full_name: str
    email: str
    role: str
    created_at: Optional[datetime] = None
    is_active: bool
    blocked_by_admin: bool = False
    ready_to_teach: bool


# ======================
# PROFILE UPDATE
# ======================

class UpdateProfileRequest(CamelModel):
    full_name: str
    bio: Optional[str] = None
    location: Optional[str] = None


def to_public_user(user) -> PublicUser:
    return PublicUser(
        user_id=user.id,
        full_name=user.full_name,
        email=user.email,
        role=user.role,
        bio=user.bio,
        location=user.location,
        profile_picture=user.profile_picture,
        ready_to_teach=bool(user.ready_to_teach),
        created_at=user.created_at,
    )


def to_user_profile(user) -> UserProfile:
    return UserProfile(
        **to_public_user(user).model_dump(),
        is_active=bool(user.is_active),
        email_verified=bool(user.email_verified),
    )


def to_admin_view(user) -> AdminUserView:
    return AdminUserView(
        user_id=user.id,
        full_name=user.full_name,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
        is_active=bool(user.is_active),
        blocked_by_admin=bool(user.blocked_by_admin),
        ready_to_teach=bool(user.ready_to_teach),
    )
