from datetime import datetime
from typing import Optional

from pydantic import field_validator, model_validator

from skilllink.models.request import MeetingType
from skilllink.schemas.base import CamelModel, as_utc_naive


def _required_text(value: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValueError("must not be blank")
    return cleaned


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


# ======================
# REQUEST BOARD INPUT
# ======================

class RequestUpdate(CamelModel):
    skill_name: str
    topic: Optional[str] = None
    description: Optional[str] = None

    @field_validator("skill_name")
    @classmethod
    def clean_skill_name(cls, value: str) -> str:
        return _required_text(value)

    @field_validator("topic", "description")
    @classmethod
    def clean_optional_text(cls, value: Optional[str]) -> Optional[str]:
        return _optional_text(value)


class RequestCreate(RequestUpdate):
    # Defaults to the caller when omitted.
    learner_id: Optional[int] = None


# ======================
# ACCEPTANCE INPUT
# ======================

class ScheduleMeetingRequest(CamelModel):
    schedule_date: datetime
    meeting_type: MeetingType
    meeting_link: Optional[str] = None

    @field_validator("schedule_date")
    @classmethod
    def schedule_date_in_utc(cls, value: datetime) -> datetime:
        return as_utc_naive(value)

    @model_validator(mode="after")
    def online_meetings_need_a_link(self):
        if self.meeting_type == MeetingType.ONLINE and not (self.meeting_link or "").strip():
            raise ValueError("meetingLink is required for ONLINE meetings")
        return self


# ======================
# READ MODELS
# ======================

class RequestView(CamelModel):
    """Request row joined with the requesting learner."""
    request_id: int
    learner_id: int
    skill_name: str
    topic: Optional[str] = None
    description: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    full_name: str
    email: str


class AcceptedRequestView(CamelModel):
    """Acceptance row joined with its request, the requester and the acceptor."""
    accepted_request_id: int
    request_id: int
    acceptor_id: int
    accepted_at: Optional[datetime] = None
    status: str
    schedule_date: Optional[datetime] = None
    meeting_type: Optional[str] = None
    meeting_link: Optional[str] = None
    skill_name: str
    topic: Optional[str] = None
    description: Optional[str] = None
    requester_id: int
    requester_name: str
    requester_email: str
    acceptor_name: str
    acceptor_email: str


class AcceptedStatus(CamelModel):
    has_accepted: bool
