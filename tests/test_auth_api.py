from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path

from skilllink.config import settings
from skilllink.crud import user as crud_user
from skilllink.models import User
from skilllink.utils.security import get_password_hash


def _register(client, **overrides):
    form = {
        "fullName": "Lena Learner",
        "email": "Lena@SkillLink.edu",
        "password": "Secret123",
        "role": "Learner",
    }
    form.update(overrides)
    return client.post("/api/auth/register", data=form)


def test_register_verify_then_login(client, db_session):
    registered = _register(client)
    assert registered.status_code == 200

    user = crud_user.get_user_by_email(db_session, "lena@skilllink.edu")
    assert user.email == "lena@skilllink.edu"
    assert user.email_verified is False

    # Unverified accounts cannot sign in yet.
    early = client.post("/api/auth/login", json={"email": "lena@skilllink.edu", "password": "Secret123"})
    assert early.status_code == 401

    verified = client.get("/api/auth/verify-email", params={"token": user.email_verification_token})
    assert verified.status_code == 200

    login = client.post("/api/auth/login", json={"email": "lena@skilllink.edu", "password": "Secret123"})
    assert login.status_code == 200
    body = login.json()
    assert body["role"] == "Learner"
    assert body["token_type"] == "bearer"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.json()["fullName"] == "Lena Learner"


def test_register_tutor_is_ready_to_teach(client, db_session):
    _register(client, email="theo@skilllink.edu", role="Tutor")

    user = crud_user.get_user_by_email(db_session, "theo@skilllink.edu")
    assert user.role == "Tutor"
    assert user.ready_to_teach is True


def test_register_rejects_duplicates_disposable_and_admin_role(client):
    assert _register(client).status_code == 200

    duplicate = _register(client)
    disposable = _register(client, email="someone@mailinator.com")
    admin = _register(client, email="boss@skilllink.edu", role="Admin")
    missing = _register(client, email="", password="")

    assert duplicate.status_code == 409
    assert duplicate.json() == {"message": "Email already exists."}
    assert disposable.status_code == 409
    assert admin.status_code == 400
    assert missing.status_code == 400


def test_register_stores_uploaded_profile_picture(client, db_session):
    response = client.post(
        "/api/auth/register",
        data={"fullName": "Pic User", "email": "pic@skilllink.edu", "password": "Secret123"},
        files={"profilePicture": ("me.png", b"\x89PNG fake", "image/png")},
    )

    assert response.status_code == 200
    user = crud_user.get_user_by_email(db_session, "pic@skilllink.edu")
    assert user.profile_picture.startswith("/uploads/")
    assert user.profile_picture.endswith(".png")


def test_failed_registration_discards_uploaded_picture(client):
    assert _register(client).status_code == 200
    upload_dir = Path(settings.UPLOAD_DIR)
    before = {p.name for p in upload_dir.iterdir()}

    duplicate = client.post(
        "/api/auth/register",
        data={"fullName": "Lena Again", "email": "lena@skilllink.edu", "password": "Secret123"},
        files={"profilePicture": ("me.png", b"\x89PNG fake", "image/png")},
    )

    assert duplicate.status_code == 409
    assert {p.name for p in upload_dir.iterdir()} == before


def test_verify_email_rejects_missing_unknown_and_expired_tokens(client, db_session, make_user):
    expired = make_user(
        email_verified=False,
        email_verification_token="old-token",
        email_verification_expires=datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(hours=1),
    )

    assert client.get("/api/auth/verify-email").json() == {"message": "Missing token"}
    assert client.get("/api/auth/verify-email", params={"token": "nope"}).status_code == 400
    assert client.get("/api/auth/verify-email", params={"token": "old-token"}).status_code == 400

    db_session.refresh(expired)
    assert expired.email_verified is False


def test_login_rejects_wrong_password_and_blocked_account(client, make_user):
    make_user(email="ok@skilllink.edu", password_hash=get_password_hash("Secret123"))
    make_user(email="blocked@skilllink.edu", password_hash=get_password_hash("Secret123"), is_active=False)

    wrong = client.post("/api/auth/login", json={"email": "ok@skilllink.edu", "password": "nope"})
    blocked = client.post("/api/auth/login", json={"email": "blocked@skilllink.edu", "password": "Secret123"})

    assert wrong.status_code == 401
    assert wrong.json() == {"message": "Invalid credentials"}
    assert blocked.status_code == 401


def test_protected_route_without_token_is_401(client):
    response = client.get("/api/auth/profile")

    assert response.status_code == 401
    assert "message" in response.json()


def test_garbage_token_is_401(client):
    response = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid token or user not logged in"}


def test_update_profile(client, db_session, make_user, auth_headers):
    user = make_user()

    response = client.put(
        "/api/auth/profile",
        json={"fullName": "Renamed", "bio": "Loves jazz", "location": "Leeds"},
        headers=auth_headers(user),
    )

    assert response.status_code == 200
    profile = client.get("/api/auth/profile", headers=auth_headers(user)).json()
    assert profile["fullName"] == "Renamed"
    assert profile["bio"] == "Loves jazz"
    assert profile["isActive"] is True


def test_teach_mode_flips_role_but_admin_keeps_role(client, make_user, auth_headers):
    learner = make_user()
    admin = make_user(role="Admin")

    on = client.put("/api/auth/teach-mode", json={"readyToTeach": True}, headers=auth_headers(learner))
    admin_on = client.put("/api/auth/teach-mode", json={"readyToTeach": True}, headers=auth_headers(admin))

    assert on.json() == {"message": "Updated", "readyToTeach": True, "role": "Tutor"}
    assert admin_on.json()["role"] == "Admin"


def test_user_can_deactivate_and_reactivate_self(client, db_session, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)

    off = client.put("/api/auth/active", json={"isActive": False}, headers=headers)
    on = client.put("/api/auth/active", json={"isActive": True}, headers=headers)

    assert off.json()["message"] == "Account deactivated"
    assert on.json()["message"] == "Account reactivated"
    assert db_session.get(User, user.id).is_active is True


def test_public_user_lookup(client, make_user):
    user = make_user(full_name="Public Person")

    found = client.get(f"/api/auth/by-userId/{user.id}")
    missing = client.get("/api/auth/by-userId/9999")

    assert found.json()["fullName"] == "Public Person"
    assert "passwordHash" not in found.json()
    assert missing.status_code == 404
