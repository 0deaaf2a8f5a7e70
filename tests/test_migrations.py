from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from skilllink.config import settings

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def test_upgrade_uses_database_url_from_settings(tmp_path, monkeypatch):
    db_file = tmp_path / "migrated.db"
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite:///{db_file}")
    cfg = Config()
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))

    command.upgrade(cfg, "head")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        assert {"users", "skills", "requests", "accepted_requests", "sessions"} <= set(inspector.get_table_names())
        columns = {c["name"] for c in inspector.get_columns("users")}
        assert "blocked_by_admin" in columns
    finally:
        engine.dispose()
