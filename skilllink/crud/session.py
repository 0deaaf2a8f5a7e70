import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from skilllink.models.session import Session as SessionModel, SessionStatus
from skilllink.schemas.base import as_utc_naive
from skilllink.services.workflow import next_session_status

logger = logging.getLogger(__name__)


def create_session(
    db: Session,
    *,
    request_id: int,
    tutor_id: int,
    scheduled_at: Optional[datetime] = None,
    status: SessionStatus = SessionStatus.PENDING,
) -> SessionModel:
    session = SessionModel(
        request_id=request_id,
        tutor_id=tutor_id,
        scheduled_at=as_utc_naive(scheduled_at),
        status=status.value,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    logger.info("Tutor %s created session %s for request %s", tutor_id, session.id, request_id)
    return session


def list_sessions(db: Session) -> List[SessionModel]:
    return db.query(SessionModel).order_by(SessionModel.id.asc()).all()


def get_session(db: Session, session_id: int) -> Optional[SessionModel]:
    return db.query(SessionModel).filter(SessionModel.id == session_id).first()


def list_sessions_by_tutor(db: Session, tutor_id: int) -> List[SessionModel]:
    return (
        db.query(SessionModel)
        .filter(SessionModel.tutor_id == tutor_id)
        .order_by(SessionModel.id.asc())
        .all()
    )


def set_session_status(db: Session, session: SessionModel, status) -> SessionModel:
    target = next_session_status(session.status, status)
    session.status = target.value
    db.commit()
    db.refresh(session)
    logger.info("Session %s status=%s", session.id, target.value)
    return session


def delete_session(db: Session, session: SessionModel) -> None:
    session_id = session.id
    db.delete(session)
    db.commit()
    logger.info("Deleted session %s", session_id)
