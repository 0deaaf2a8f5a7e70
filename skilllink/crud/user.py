import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud.filters import LIKE_ESCAPE, like_contains
from skilllink.config import settings
from skilllink.errors import BadRequestError, ConflictError, ForbiddenError
from skilllink.utils.security import generate_verification_token, get_password_hash

logger = logging.getLogger(__name__)

DISPOSABLE_DOMAINS = {
    "mailinator.com",
    "tempmail.com",
    "10minutemail.com",
    "guerrillamail.com",
    "trashmail.com",
    "yopmail.com",
    "getnada.com",
}


def _utcnow() -> datetime:
    # Stored naive; TIMESTAMP columns do not keep tzinfo on every backend.
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_disposable_email(email: str) -> bool:
    parts = email.split("@")
    if len(parts) != 2:
        return True
    return parts[1].strip().lower() in DISPOSABLE_DOMAINS


def get_user(db: Session, user_id: int) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.email == email.strip().lower()).first()


def create_user(
    db: Session,
    *,
    full_name: str,
    email: str,
    password: str,
    role: Optional[str] = None,
    profile_picture: Optional[str] = None,
) -> models.User:
    """Insert a new, unverified account with a fresh verification token."""
    full_name = (full_name or "").strip()
    email = (email or "").strip().lower()
    if not full_name or not email or not password:
        raise BadRequestError("Full name, email, and password are required.")

    requested_role = (role or "").strip() or models.Role.LEARNER.value
    if requested_role not in {models.Role.LEARNER.value, models.Role.TUTOR.value}:
        raise BadRequestError("Role must be one of: Learner, Tutor")

    if is_disposable_email(email):
        raise ConflictError("Disposable or temporary emails are not allowed.")

    if get_user_by_email(db, email):
        raise ConflictError("Email already exists.")

    user = models.User(
        full_name=full_name,
        email=email,
        password_hash=get_password_hash(password),
        role=requested_role,
        profile_picture=profile_picture,
        is_active=True,
        ready_to_teach=requested_role == models.Role.TUTOR.value,
        email_verified=False,
        email_verification_token=generate_verification_token(),
        email_verification_expires=_utcnow() + timedelta(hours=settings.EMAIL_VERIFICATION_HOURS),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user %s (%s)", user.id, user.role)
    return user


def verify_email_token(db: Session, token: str) -> bool:
    user = db.query(models.User).filter(
        models.User.email_verification_token == token,
        models.User.email_verified.is_(False),
    ).first()
    if not user:
        return False

    expires = user.email_verification_expires
    if expires is None or expires < _utcnow():
        return False

    user.email_verified = True
    user.email_verification_token = None
    user.email_verification_expires = None
    db.commit()
    logger.info("Verified email for user %s", user.id)
    return True


def update_profile(
    db: Session,
    user: models.User,
    *,
    full_name: str,
    bio: Optional[str],
    location: Optional[str],
) -> models.User:
    full_name = (full_name or "").strip()
    if not full_name:
        raise BadRequestError("Full name is required.")
    user.full_name = full_name
    user.bio = bio
    user.location = location
    db.commit()
    db.refresh(user)
    return user


def set_teach_mode(db: Session, user: models.User, ready_to_teach: bool) -> models.User:
    user.ready_to_teach = ready_to_teach
    # Admins keep their role; everyone else flips between Tutor and Learner.
    if not user.is_admin:
        user.role = models.Role.TUTOR.value if ready_to_teach else models.Role.LEARNER.value
    db.commit()
    db.refresh(user)
    return user


def set_active(db: Session, user: models.User, is_active: bool, *, by_admin: bool = False) -> models.User:
    """Toggle the account; only an admin can lift a block an admin placed."""
    if by_admin:
        user.blocked_by_admin = not is_active
    elif is_active and user.blocked_by_admin:
        raise ForbiddenError("Account was blocked by an administrator")
    user.is_active = is_active
    db.commit()
    db.refresh(user)
    logger.info("User %s active=%s (by_admin=%s)", user.id, is_active, by_admin)
    return user


def set_role(db: Session, user: models.User, role: str) -> models.User:
    allowed = {member.value for member in models.Role}
    if role not in allowed:
        raise BadRequestError("Invalid role")
    user.role = role
    if role == models.Role.TUTOR.value:
        user.ready_to_teach = True
    elif role == models.Role.LEARNER.value:
        user.ready_to_teach = False
    db.commit()
    db.refresh(user)
    logger.info("User %s role=%s", user.id, role)
    return user


def list_users(db: Session, search: Optional[str] = None) -> List[models.User]:
    query = db.query(models.User)
    if search and search.strip():
        like = like_contains(search.strip())
        query = query.filter(
            models.User.full_name.ilike(like, escape=LIKE_ESCAPE)
            | models.User.email.ilike(like, escape=LIKE_ESCAPE)
        )
    return query.order_by(models.User.id.asc()).all()


def delete_user(db: Session, user: models.User) -> None:
    user_id = user.id
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
