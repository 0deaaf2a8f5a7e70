import logging
import shutil
import uuid
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session

from skilllink import models
from skilllink.config import settings
from skilllink.crud import user as crud_user
from skilllink.database import get_db
from skilllink.errors import SkillLinkError
from skilllink.schemas.auth import ActiveUpdate, LoginRequest, TeachModeUpdate, Token
from skilllink.schemas.user import (
    PublicUser,
    UpdateProfileRequest,
    UserProfile,
    to_public_user,
    to_user_profile,
)
from skilllink.utils.email import send_verification_email
from skilllink.utils.security import authenticate_user, create_user_token, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

ALLOWED_PICTURE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}


def _save_profile_picture(upload: UploadFile) -> str:
    """Store the upload under UPLOAD_DIR and return its public URL path."""
    extension = Path(upload.filename or "").suffix.lower()
    if extension not in ALLOWED_PICTURE_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Profile picture must be an image file")

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    file_name = f"{uuid.uuid4()}{extension}"
    with (upload_dir / file_name).open("wb") as out:
        shutil.copyfileobj(upload.file, out)
    return f"/uploads/{file_name}"


def _discard_profile_picture(url_path: str) -> None:
    (Path(settings.UPLOAD_DIR) / Path(url_path).name).unlink(missing_ok=True)


# ===== REGISTER ENDPOINT =====

@router.post("/register")
def register(
    full_name: Optional[str] = Form(None, alias="fullName"),
    email: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    profile_picture: Optional[UploadFile] = File(None, alias="profilePicture"),
    db: Session = Depends(get_db),
):
    """Register a new account and send the verification email."""
    if not (full_name or "").strip() or not (email or "").strip() or not password:
        raise HTTPException(status_code=400, detail="Full name, email, and password are required.")

    picture_path = None
    if profile_picture is not None and profile_picture.filename:
        picture_path = _save_profile_picture(profile_picture)

    try:
        user = crud_user.create_user(
            db,
            full_name=full_name,
            email=email,
            password=password,
            role=role,
            profile_picture=picture_path,
        )
    except SkillLinkError:
        if picture_path:
            _discard_profile_picture(picture_path)
        raise

    send_verification_email(
        to_email=user.email,
        full_name=user.full_name,
        token=user.email_verification_token,
    )

    return {
        "message": "User registered successfully. Please check your email to verify your account."
    }


# ===== EMAIL VERIFICATION =====

@router.get("/verify-email")
def verify_email(token: Optional[str] = Query(None), db: Session = Depends(get_db)):
    if not token or not token.strip():
        raise HTTPException(status_code=400, detail="Missing token")

    if not crud_user.verify_email_token(db, token.strip()):
        raise HTTPException(status_code=400, detail="Invalid or expired token")

    return {"message": "Email verified successfully"}


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return a bearer token."""
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return Token(token=create_user_token(user), role=user.role)


# ===== PROFILE =====

@router.get("/profile", response_model=UserProfile)
def get_profile(current_user: models.User = Depends(get_current_user)):
    return to_user_profile(current_user)


@router.put("/profile")
def update_profile(
    payload: UpdateProfileRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    crud_user.update_profile(
        db,
        current_user,
        full_name=payload.full_name,
        bio=payload.bio,
        location=payload.location,
    )
    return {"message": "Profile updated successfully"}


@router.get("/me", response_model=PublicUser)
def get_me(current_user: models.User = Depends(get_current_user)):
    return to_public_user(current_user)


@router.get("/by-userId/{user_id}", response_model=PublicUser)
def get_user_by_id(user_id: int, db: Session = Depends(get_db)):
    user = crud_user.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return to_public_user(user)


# ===== ACCOUNT TOGGLES =====

@router.put("/teach-mode")
def update_teach_mode(
    payload: TeachModeUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    user = crud_user.set_teach_mode(db, current_user, payload.ready_to_teach)
    return {"message": "Updated", "readyToTeach": user.ready_to_teach, "role": user.role}


@router.put("/active")
def update_active(
    payload: ActiveUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    crud_user.set_active(db, current_user, payload.is_active)
    return {
        "message": "Account reactivated" if payload.is_active else "Account deactivated",
        "isActive": payload.is_active,
    }
