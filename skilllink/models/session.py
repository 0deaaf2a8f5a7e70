# skilllink/models/session.py
import enum

from sqlalchemy import Column, Integer, String, TIMESTAMP, func
from skilllink.database import Base


class SessionStatus(str, enum.Enum):
    PENDING = "PENDING"
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Session(Base):
    """Standalone tutor scheduling row; request_id/tutor_id are plain references."""

    __tablename__ = "sessions"

    id = Column(Integer, primary_key=True, index=True)
    request_id = Column(Integer, nullable=False, index=True)
    tutor_id = Column(Integer, nullable=False, index=True)
    scheduled_at = Column(TIMESTAMP)
    status = Column(String(20), nullable=False, default=SessionStatus.PENDING.value)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    @property
    def room_name(self) -> str:
        return f"SkillLinkSession_{self.id}"
