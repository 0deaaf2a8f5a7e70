import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud.filters import LIKE_ESCAPE, like_contains
from skilllink.schemas.request import RequestView
from skilllink.services.workflow import next_request_status

logger = logging.getLogger(__name__)


def to_request_view(request: models.Request, learner: models.User) -> RequestView:
    return RequestView(
        request_id=request.id,
        learner_id=request.learner_id,
        skill_name=request.skill_name,
        topic=request.topic,
        description=request.description,
        status=request.status,
        created_at=request.created_at,
        full_name=learner.full_name,
        email=learner.email,
    )


def _view_query(db: Session):
    return db.query(models.Request, models.User).join(
        models.User, models.Request.learner_id == models.User.id
    )


def _newest_first(query):
    return query.order_by(models.Request.created_at.desc(), models.Request.id.desc())


# ============================
# READS
# ============================

def get_request(db: Session, request_id: int) -> Optional[models.Request]:
    return db.query(models.Request).filter(models.Request.id == request_id).first()


def get_request_view(db: Session, request_id: int) -> Optional[RequestView]:
    row = _view_query(db).filter(models.Request.id == request_id).first()
    if row is None:
        return None
    return to_request_view(*row)


def list_requests(db: Session) -> List[RequestView]:
    return [to_request_view(*row) for row in _newest_first(_view_query(db)).all()]


def list_requests_by_learner(db: Session, learner_id: int) -> List[RequestView]:
    query = _view_query(db).filter(models.Request.learner_id == learner_id)
    return [to_request_view(*row) for row in _newest_first(query).all()]


def search_requests(db: Session, q: str) -> List[RequestView]:
    """Substring match over skill, topic, description and requester name."""
    like = like_contains(q.strip())
    query = _view_query(db).filter(
        or_(
            models.Request.skill_name.ilike(like, escape=LIKE_ESCAPE),
            models.Request.topic.ilike(like, escape=LIKE_ESCAPE),
            models.Request.description.ilike(like, escape=LIKE_ESCAPE),
            models.User.full_name.ilike(like, escape=LIKE_ESCAPE),
        )
    )
    return [to_request_view(*row) for row in _newest_first(query).all()]


# ============================
# WRITES
# ============================

def create_request(
    db: Session,
    *,
    learner_id: int,
    skill_name: str,
    topic: Optional[str] = None,
    description: Optional[str] = None,
) -> models.Request:
    request = models.Request(
        learner_id=learner_id,
        skill_name=skill_name,
        topic=topic,
        description=description,
        status=models.RequestStatus.OPEN.value,
    )
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info("Learner %s created request %s for '%s'", learner_id, request.id, skill_name)
    return request


def update_request(
    db: Session,
    request: models.Request,
    *,
    skill_name: str,
    topic: Optional[str],
    description: Optional[str],
) -> models.Request:
    # Status is only changed through set_request_status.
    request.skill_name = skill_name
    request.topic = topic
    request.description = description
    db.commit()
    db.refresh(request)
    return request


def set_request_status(db: Session, request: models.Request, status) -> models.Request:
    target = next_request_status(request.status, status)
    request.status = target.value
    db.commit()
    db.refresh(request)
    logger.info("Request %s status=%s", request.id, target.value)
    return request


def delete_request(db: Session, request: models.Request) -> None:
    """Delete the request together with its acceptances."""
    request_id = request.id
    db.delete(request)
    db.commit()
    logger.info("Deleted request %s", request_id)
