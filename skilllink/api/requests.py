# skilllink/api/requests.py
"""
Request Board and Acceptance Workflow API.

Learners post requests; any other user may accept one, after which the
acceptor or the requester schedules the meeting.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from skilllink import models
from skilllink.crud import accepted_request as crud_accepted
from skilllink.crud import request as crud_request
from skilllink.database import get_db
from skilllink.schemas.request import (
    AcceptedRequestView,
    AcceptedStatus,
    RequestCreate,
    RequestUpdate,
    RequestView,
    ScheduleMeetingRequest,
)
from skilllink.utils.security import ensure_self_or_admin, get_current_user

router = APIRouter(prefix="/requests", tags=["Requests"])


# ======================
# HELPER FUNCTIONS
# ======================
def _get_request_or_404(db: Session, request_id: int) -> models.Request:
    request = crud_request.get_request(db, request_id)
    if request is None:
        raise HTTPException(status_code=404, detail="Request not found")
    return request


def _ensure_owner(request: models.Request, current_user: models.User) -> None:
    if request.learner_id != current_user.id and not current_user.is_admin:
        raise HTTPException(status_code=403, detail="Only the requester can modify this request")


def _get_acceptance_for_participant(
    db: Session,
    accepted_request_id: int,
    current_user: models.User,
) -> models.AcceptedRequest:
    accepted = crud_accepted.get_accepted_request(db, accepted_request_id)
    if accepted is None:
        raise HTTPException(status_code=404, detail="Accepted request not found")
    if not crud_accepted.is_participant(accepted, current_user.id) and not current_user.is_admin:
        raise HTTPException(
            status_code=403,
            detail="Only the acceptor or the requester can manage this meeting",
        )
    return accepted


# ======================
# REQUEST BOARD: READS
# ======================
@router.get("", response_model=List[RequestView])
def get_all_requests(db: Session = Depends(get_db)):
    return crud_request.list_requests(db)


@router.get("/search", response_model=List[RequestView])
def search_requests(
    q: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not q or not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    return crud_request.search_requests(db, q)


@router.get("/by-requestId/{request_id}", response_model=RequestView)
def get_request_by_id(request_id: int, db: Session = Depends(get_db)):
    view = crud_request.get_request_view(db, request_id)
    if view is None:
        raise HTTPException(status_code=404, detail="Request not found")
    return view


@router.get("/by-learnerId/{learner_id}", response_model=List[RequestView])
def get_requests_by_learner(learner_id: int, db: Session = Depends(get_db)):
    views = crud_request.list_requests_by_learner(db, learner_id)
    if not views:
        raise HTTPException(status_code=404, detail="No requests found for this user")
    return views


# ======================
# REQUEST BOARD: WRITES
# ======================
@router.post("")
def create_request(
    payload: RequestCreate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    learner_id = payload.learner_id if payload.learner_id is not None else current_user.id
    ensure_self_or_admin(current_user, learner_id, "create requests")

    request = crud_request.create_request(
        db,
        learner_id=learner_id,
        skill_name=payload.skill_name,
        topic=payload.topic,
        description=payload.description,
    )
    return {"message": "Request Created", "requestId": request.id}


@router.put("/{request_id}")
def update_request(
    request_id: int,
    payload: RequestUpdate,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    request = _get_request_or_404(db, request_id)
    _ensure_owner(request, current_user)

    crud_request.update_request(
        db,
        request,
        skill_name=payload.skill_name,
        topic=payload.topic,
        description=payload.description,
    )
    return {"message": "Request updated"}


@router.patch("/{request_id}")
def update_request_status(
    request_id: int,
    status: str = Body(...),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    request = _get_request_or_404(db, request_id)
    _ensure_owner(request, current_user)

    request = crud_request.set_request_status(db, request, status)
    return {"message": "Status updated", "status": request.status}


@router.delete("/{request_id}")
def delete_request(
    request_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    request = _get_request_or_404(db, request_id)
    _ensure_owner(request, current_user)

    crud_request.delete_request(db, request)
    return {"message": "Request deleted"}


# ======================
# ACCEPTANCE WORKFLOW
# ======================
@router.post("/{request_id}/accept")
def accept_request(
    request_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    accepted = crud_accepted.accept_request(db, request_id, current_user.id)
    return {
        "message": "Request accepted successfully",
        "acceptedRequestId": accepted.id,
        "status": accepted.status,
    }


@router.get("/accepted", response_model=List[AcceptedRequestView])
def get_accepted_requests(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Requests the caller has accepted (what am I teaching)."""
    return crud_accepted.list_accepted_by_user(db, current_user.id)


@router.get("/accepted/requester", response_model=List[AcceptedRequestView])
def get_requests_i_asked_for(
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Acceptances of the caller's own requests (who accepted my request)."""
    return crud_accepted.list_for_requester(db, current_user.id)


@router.get("/{request_id}/accepted-status", response_model=AcceptedStatus)
def get_accepted_status(
    request_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return AcceptedStatus(
        has_accepted=crud_accepted.has_user_accepted(db, current_user.id, request_id)
    )


@router.post("/accepted/{accepted_request_id}/schedule")
def schedule_meeting(
    accepted_request_id: int,
    payload: ScheduleMeetingRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    accepted = _get_acceptance_for_participant(db, accepted_request_id, current_user)

    accepted = crud_accepted.schedule_meeting(
        db,
        accepted,
        schedule_date=payload.schedule_date,
        meeting_type=payload.meeting_type.value,
        meeting_link=payload.meeting_link,
    )
    return {"message": "Meeting scheduled successfully", "status": accepted.status}


@router.patch("/accepted/{accepted_request_id}/status")
def update_acceptance_status(
    accepted_request_id: int,
    status: str = Body(...),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    accepted = _get_acceptance_for_participant(db, accepted_request_id, current_user)

    accepted = crud_accepted.set_acceptance_status(db, accepted, status)
    return {"message": "Status updated", "status": accepted.status}
