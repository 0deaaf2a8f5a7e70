# skilllink/models/request.py
import enum

from sqlalchemy import Column, Integer, String, Text, ForeignKey, TIMESTAMP, UniqueConstraint, func
from sqlalchemy.orm import relationship
from skilllink.database import Base


class RequestStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    CLOSED = "CLOSED"


class AcceptanceStatus(str, enum.Enum):
    PENDING = "PENDING"
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class MeetingType(str, enum.Enum):
    ONLINE = "ONLINE"
    PHYSICAL = "PHYSICAL"


class Request(Base):
    __tablename__ = "requests"

    id = Column(Integer, primary_key=True, index=True)
    learner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    skill_name = Column(String(100), nullable=False, index=True)
    topic = Column(String(200))
    description = Column(Text)
    status = Column(String(20), nullable=False, default=RequestStatus.OPEN.value, index=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    learner = relationship("User", back_populates="requests")
    acceptances = relationship("AcceptedRequest", back_populates="request", cascade="all, delete-orphan")


class AcceptedRequest(Base):
    __tablename__ = "accepted_requests"
    # One acceptance per (request, acceptor); the insert relies on this constraint.
    __table_args__ = (
        UniqueConstraint("request_id", "acceptor_id", name="uq_accepted_requests_request_acceptor"),
    )

    id = Column(Integer, primary_key=True, index=True)
    request_id = Column(Integer, ForeignKey("requests.id", ondelete="CASCADE"), nullable=False, index=True)
    acceptor_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    accepted_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)
    status = Column(String(20), nullable=False, default=AcceptanceStatus.PENDING.value, index=True)
    schedule_date = Column(TIMESTAMP)
    meeting_type = Column(String(20))
    meeting_link = Column(String(500))

    request = relationship("Request", back_populates="acceptances")
    acceptor = relationship("User", back_populates="acceptances")
