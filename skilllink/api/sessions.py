from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud import session as crud_session
from skilllink.database import get_db
from skilllink.models.session import Session as SessionModel
from skilllink.schemas.session import SessionCreate, SessionView, to_session_view
from skilllink.utils.security import ensure_self_or_admin, get_current_user

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def _get_session_for_tutor(
    db: Session,
    session_id: int,
    current_user: models.User,
) -> SessionModel:
    session = crud_session.get_session(db, session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    ensure_self_or_admin(current_user, session.tutor_id, "manage sessions")
    return session


# ======================
# SESSION LISTING
# ======================
@router.get("", response_model=List[SessionView])
def get_all_sessions(db: Session = Depends(get_db)):
    return [to_session_view(s) for s in crud_session.list_sessions(db)]


@router.get("/by-sessionId/{session_id}", response_model=SessionView)
def get_session_by_id(session_id: int, db: Session = Depends(get_db)):
    session = crud_session.get_session(db, session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return to_session_view(session)


@router.get("/by-tutorId/{tutor_id}", response_model=List[SessionView])
def get_sessions_by_tutor(tutor_id: int, db: Session = Depends(get_db)):
    sessions = crud_session.list_sessions_by_tutor(db, tutor_id)
    if not sessions:
        raise HTTPException(status_code=404, detail="No sessions found for this tutor")
    return [to_session_view(s) for s in sessions]


# ======================
# SESSION WRITES
# ======================
@router.post("")
def create_session(
    payload: SessionCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    tutor_id = payload.tutor_id if payload.tutor_id is not None else current_user.id
    ensure_self_or_admin(current_user, tutor_id, "create sessions")

    session = crud_session.create_session(
        db,
        request_id=payload.request_id,
        tutor_id=tutor_id,
        scheduled_at=payload.scheduled_at,
        status=payload.status,
    )
    return {"message": "Session created successfully", "sessionId": session.id}


@router.patch("/{session_id}")
def update_session_status(
    session_id: int,
    status: str = Body(...),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    session = _get_session_for_tutor(db, session_id, current_user)
    session = crud_session.set_session_status(db, session, status)
    return {"message": "Session status updated", "status": session.status}


@router.delete("/{session_id}")
def delete_session(
    session_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    session = _get_session_for_tutor(db, session_id, current_user)
    crud_session.delete_session(db, session)
    return {"message": "Session deleted"}
