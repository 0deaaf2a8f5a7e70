from datetime import datetime
from typing import Optional

from pydantic import field_validator

from skilllink.models.session import SessionStatus
from skilllink.schemas.base import CamelModel, as_utc_naive

# ======================
# SESSION REQUEST MODELS
# ======================

class SessionCreate(CamelModel):
    request_id: int
    # Defaults to the caller when omitted.
    tutor_id: Optional[int] = None
    scheduled_at: Optional[datetime] = None
    status: SessionStatus = SessionStatus.PENDING

    @field_validator("scheduled_at")
    @classmethod
    def scheduled_at_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc_naive(value)

# ======================
# SESSION RESPONSE MODELS
# ======================

class SessionView(CamelModel):
    session_id: int
    request_id: int
    tutor_id: int
    scheduled_at: Optional[datetime] = None
    status: str
    created_at: Optional[datetime] = None
    room_name: str


def to_session_view(session) -> SessionView:
    return SessionView(
        session_id=session.id,
        request_id=session.request_id,
        tutor_id=session.tutor_id,
        scheduled_at=session.scheduled_at,
        status=session.status,
        created_at=session.created_at,
        room_name=session.room_name,
    )
