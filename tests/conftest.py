"""Pytest bootstrap for project imports and shared API fixtures."""

from pathlib import Path
import os
import sys
import tempfile

# Ensure project root is on sys.path so `import skilllink` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

# Settings are read once at import time; pin them before skilllink loads.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "skilllink-test-secret")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="skilllink-uploads-"))
os.environ["EMAIL_NOTIFICATIONS_ENABLED"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from skilllink import models
from skilllink.database import Base, get_db
from skilllink.utils.security import create_user_token


@pytest.fixture
def db_session():
    # One shared connection so the app thread and the test see the same rows.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient
    from skilllink.main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(
        full_name: str = None,
        email: str = None,
        role: str = models.Role.LEARNER.value,
        password_hash: str = "hash",
        **extra,
    ) -> models.User:
        counter["n"] += 1
        user = models.User(
            full_name=full_name or f"User {counter['n']}",
            email=email or f"user{counter['n']}@skilllink.edu",
            password_hash=password_hash,
            role=role,
            is_active=extra.pop("is_active", True),
            email_verified=extra.pop("email_verified", True),
            ready_to_teach=role == models.Role.TUTOR.value,
            **extra,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user: models.User) -> dict:
        return {"Authorization": f"Bearer {create_user_token(user)}"}

    return _auth_headers
