"""
Create the first Admin account from environment variables.

    ENABLE_ADMIN_BOOTSTRAP=true ADMIN_BOOTSTRAP_CONFIRM=CREATE-FIRST-ADMIN \
    ADMIN_NAME="Site Admin" ADMIN_EMAIL=admin@example.org ADMIN_PASSWORD=... \
    python -m skilllink.scripts.bootstrap_admin
"""

import os
import re
import sys
from typing import Callable, Mapping, Optional

from sqlalchemy.orm import Session

from skilllink import models
from skilllink.database import SessionLocal
from skilllink.utils.security import get_password_hash


CONFIRM_PHRASE = "CREATE-FIRST-ADMIN"
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "y", "on"}


def _required(env: Mapping[str, str], key: str) -> str:
    value = (env.get(key) or "").strip()
    if not value:
        raise ValueError(f"Missing required environment variable: {key}")
    return value


def _validate_password(password: str) -> None:
    if len(password) < 8:
        raise ValueError("ADMIN_PASSWORD must be at least 8 characters.")
    if len(password.encode("utf-8")) > 72:
        raise ValueError("ADMIN_PASSWORD must be <= 72 bytes (bcrypt limit).")
    if not re.search(r"[A-Z]", password):
        raise ValueError("ADMIN_PASSWORD must contain at least one uppercase letter.")
    if not re.search(r"[a-z]", password):
        raise ValueError("ADMIN_PASSWORD must contain at least one lowercase letter.")
    if not re.search(r"\d", password):
        raise ValueError("ADMIN_PASSWORD must contain at least one digit.")


def create_first_admin(db: Session, *, full_name: str, email: str, password: str) -> models.User:
    if db.query(models.User).filter(models.User.role == models.Role.ADMIN.value).count() > 0:
        raise ValueError(
            "Admin bootstrap blocked: an admin already exists. "
            "This command is one-time for first admin creation."
        )
    if db.query(models.User).filter(models.User.email == email).first():
        raise ValueError("ADMIN_EMAIL is already registered.")

    user = models.User(
        full_name=full_name,
        email=email,
        password_hash=get_password_hash(password),
        role=models.Role.ADMIN.value,
        is_active=True,
        email_verified=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def bootstrap_admin(
    env: Mapping[str, str] = os.environ,
    session_factory: Callable[[], Session] = SessionLocal,
) -> int:
    try:
        if not _is_truthy(env.get("ENABLE_ADMIN_BOOTSTRAP")):
            raise ValueError(
                "Bootstrap disabled. Set ENABLE_ADMIN_BOOTSTRAP=true to run."
            )
        if _required(env, "ADMIN_BOOTSTRAP_CONFIRM") != CONFIRM_PHRASE:
            raise ValueError(
                f"Invalid ADMIN_BOOTSTRAP_CONFIRM. Expected exact phrase: {CONFIRM_PHRASE}"
            )

        full_name = _required(env, "ADMIN_NAME")
        email = _required(env, "ADMIN_EMAIL").lower()
        password = _required(env, "ADMIN_PASSWORD")

        if not EMAIL_RE.match(email):
            raise ValueError("ADMIN_EMAIL is not a valid email format.")
        _validate_password(password)

        db = session_factory()
        try:
            create_first_admin(db, full_name=full_name, email=email, password=password)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
    except Exception as exc:
        print(f"Admin bootstrap failed: {exc}", file=sys.stderr)
        return 1

    print(f"Admin created successfully: {email}")
    return 0


if __name__ == "__main__":
    raise SystemExit(bootstrap_admin())
