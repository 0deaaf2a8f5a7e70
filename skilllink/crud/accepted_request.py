"""
Acceptance workflow: binding an acceptor to a request and scheduling the
meeting that follows.

Duplicate acceptances are rejected by the ``(request_id, acceptor_id)``
unique constraint; ``accept_request`` issues a single INSERT and turns the
resulting ``IntegrityError`` into ``AlreadyAcceptedError``.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased

from skilllink import models
from skilllink.errors import AlreadyAcceptedError, BadRequestError, NotFoundError
from skilllink.schemas.base import as_utc_naive
from skilllink.schemas.request import AcceptedRequestView
from skilllink.services.workflow import next_acceptance_status

logger = logging.getLogger(__name__)

Requester = aliased(models.User, name="requester")
Acceptor = aliased(models.User, name="acceptor")


def to_accepted_view(
    accepted: models.AcceptedRequest,
    request: models.Request,
    requester: models.User,
    acceptor: models.User,
) -> AcceptedRequestView:
    return AcceptedRequestView(
        accepted_request_id=accepted.id,
        request_id=accepted.request_id,
        acceptor_id=accepted.acceptor_id,
        accepted_at=accepted.accepted_at,
        status=accepted.status,
        schedule_date=accepted.schedule_date,
        meeting_type=accepted.meeting_type,
        meeting_link=accepted.meeting_link,
        skill_name=request.skill_name,
        topic=request.topic,
        description=request.description,
        requester_id=requester.id,
        requester_name=requester.full_name,
        requester_email=requester.email,
        acceptor_name=acceptor.full_name,
        acceptor_email=acceptor.email,
    )


def _view_query(db: Session):
    return (
        db.query(models.AcceptedRequest, models.Request, Requester, Acceptor)
        .join(models.Request, models.AcceptedRequest.request_id == models.Request.id)
        .join(Requester, models.Request.learner_id == Requester.id)
        .join(Acceptor, models.AcceptedRequest.acceptor_id == Acceptor.id)
        .order_by(models.AcceptedRequest.accepted_at.desc(), models.AcceptedRequest.id.desc())
    )


# ============================
# ACCEPT
# ============================

def accept_request(db: Session, request_id: int, acceptor_id: int) -> models.AcceptedRequest:
    request = db.query(models.Request).filter(models.Request.id == request_id).first()
    if request is None:
        raise NotFoundError("Request not found")
    if request.learner_id == acceptor_id:
        raise BadRequestError("You cannot accept your own request")
    if request.status == models.RequestStatus.CLOSED.value:
        raise BadRequestError("Request is closed")

    accepted = models.AcceptedRequest(
        request_id=request_id,
        acceptor_id=acceptor_id,
        status=models.AcceptanceStatus.PENDING.value,
    )
    db.add(accepted)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyAcceptedError(request_id, acceptor_id) from None

    db.refresh(accepted)
    logger.info("User %s accepted request %s", acceptor_id, request_id)
    return accepted


def has_user_accepted(db: Session, user_id: int, request_id: int) -> bool:
    return db.query(models.AcceptedRequest.id).filter(
        models.AcceptedRequest.acceptor_id == user_id,
        models.AcceptedRequest.request_id == request_id,
    ).first() is not None


# ============================
# READS
# ============================

def get_accepted_request(db: Session, accepted_request_id: int) -> Optional[models.AcceptedRequest]:
    return db.query(models.AcceptedRequest).filter(
        models.AcceptedRequest.id == accepted_request_id
    ).first()


def list_accepted_by_user(db: Session, acceptor_id: int) -> List[AcceptedRequestView]:
    """Acceptances made by ``acceptor_id``, newest first."""
    rows = _view_query(db).filter(models.AcceptedRequest.acceptor_id == acceptor_id).all()
    return [to_accepted_view(*row) for row in rows]


def list_for_requester(db: Session, learner_id: int) -> List[AcceptedRequestView]:
    """Acceptances of requests authored by ``learner_id``, newest first."""
    rows = _view_query(db).filter(models.Request.learner_id == learner_id).all()
    return [to_accepted_view(*row) for row in rows]


def is_participant(accepted: models.AcceptedRequest, user_id: int) -> bool:
    return accepted.acceptor_id == user_id or accepted.request.learner_id == user_id


# ============================
# SCHEDULE / STATUS
# ============================

def schedule_meeting(
    db: Session,
    accepted: models.AcceptedRequest,
    *,
    schedule_date: datetime,
    meeting_type: str,
    meeting_link: Optional[str],
) -> models.AcceptedRequest:
    """Overwrite the meeting details and force SCHEDULED, whatever the prior status."""
    accepted.schedule_date = as_utc_naive(schedule_date)
    accepted.meeting_type = meeting_type
    accepted.meeting_link = meeting_link
    accepted.status = models.AcceptanceStatus.SCHEDULED.value
    db.commit()
    db.refresh(accepted)
    logger.info("Acceptance %s scheduled for %s (%s)", accepted.id, schedule_date, meeting_type)
    return accepted


def set_acceptance_status(db: Session, accepted: models.AcceptedRequest, status) -> models.AcceptedRequest:
    target = next_acceptance_status(accepted.status, status)
    accepted.status = target.value
    db.commit()
    db.refresh(accepted)
    logger.info("Acceptance %s status=%s", accepted.id, target.value)
    return accepted
