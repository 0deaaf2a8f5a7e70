from __future__ import annotations

from skilllink.crud import session as crud_session
from skilllink.models import Session as SessionModel


def test_create_session_defaults_tutor_to_caller(client, db_session, make_user, auth_headers):
    tutor = make_user(role="Tutor")

    response = client.post(
        "/api/sessions",
        json={"requestId": 77, "scheduledAt": "2024-03-05T18:00:00"},
        headers=auth_headers(tutor),
    )

    assert response.status_code == 200
    session = db_session.get(SessionModel, response.json()["sessionId"])
    assert session.tutor_id == tutor.id
    # request_id is a loose reference; no row 77 exists.
    assert session.request_id == 77
    assert session.status == "PENDING"


def test_session_views_carry_room_name(client, db_session, make_user):
    tutor = make_user(role="Tutor")
    session = crud_session.create_session(db_session, request_id=1, tutor_id=tutor.id)

    by_id = client.get(f"/api/sessions/by-sessionId/{session.id}")
    listing = client.get("/api/sessions")

    assert by_id.status_code == 200
    assert by_id.json()["roomName"] == f"SkillLinkSession_{session.id}"
    assert [row["sessionId"] for row in listing.json()] == [session.id]


def test_missing_session_and_empty_tutor_listing_are_404(client, make_user):
    tutor = make_user(role="Tutor")

    missing = client.get("/api/sessions/by-sessionId/999")
    empty = client.get(f"/api/sessions/by-tutorId/{tutor.id}")

    assert missing.status_code == 404
    assert missing.json() == {"message": "Session not found"}
    assert empty.status_code == 404
    assert empty.json() == {"message": "No sessions found for this tutor"}


def test_tutor_moves_session_through_statuses(client, db_session, make_user, auth_headers):
    tutor = make_user(role="Tutor")
    session = crud_session.create_session(db_session, request_id=1, tutor_id=tutor.id)

    scheduled = client.patch(f"/api/sessions/{session.id}", json="SCHEDULED", headers=auth_headers(tutor))
    rewind = client.patch(f"/api/sessions/{session.id}", json="PENDING", headers=auth_headers(tutor))

    assert scheduled.status_code == 200
    assert scheduled.json()["status"] == "SCHEDULED"
    assert rewind.status_code == 400
    assert rewind.json() == {"message": "Cannot change status from SCHEDULED to PENDING"}


def test_only_owning_tutor_may_delete(client, db_session, make_user, auth_headers):
    tutor = make_user(role="Tutor")
    other = make_user(role="Tutor")
    session = crud_session.create_session(db_session, request_id=1, tutor_id=tutor.id)

    denied = client.delete(f"/api/sessions/{session.id}", headers=auth_headers(other))
    allowed = client.delete(f"/api/sessions/{session.id}", headers=auth_headers(tutor))

    assert denied.status_code == 403
    assert allowed.status_code == 200
    assert crud_session.get_session(db_session, session.id) is None


def test_scheduled_at_with_offset_is_stored_as_utc(client, db_session, make_user, auth_headers):
    tutor = make_user(role="Tutor")

    created = client.post(
        "/api/sessions",
        json={"requestId": 5, "scheduledAt": "2024-03-05T18:00:00-05:00"},
        headers=auth_headers(tutor),
    )

    view = client.get(f"/api/sessions/by-sessionId/{created.json()['sessionId']}").json()
    assert view["scheduledAt"] == "2024-03-05T23:00:00"
