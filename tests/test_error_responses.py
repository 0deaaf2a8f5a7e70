from __future__ import annotations

import pytest

from skilllink.errors import AlreadyAcceptedError, ConflictError, NotFoundError, SkillLinkError


def test_error_hierarchy_carries_status_codes():
    err = AlreadyAcceptedError(3, 7)

    assert isinstance(err, ConflictError)
    assert err.status_code == 409
    assert (err.request_id, err.acceptor_id) == (3, 7)
    assert NotFoundError("gone").status_code == 404
    assert SkillLinkError("bad").status_code == 400


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unknown_request_is_404_message(client):
    response = client.get("/api/requests/by-requestId/12345")

    assert response.status_code == 404
    assert response.json() == {"message": "Request not found"}


def test_accepting_unknown_request_is_404(client, make_user, auth_headers):
    tutor = make_user(role="Tutor")

    response = client.post("/api/requests/12345/accept", headers=auth_headers(tutor))

    assert response.status_code == 404
    assert response.json() == {"message": "Request not found"}


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"skillName": "   "},
        {"skillName": 123},
    ],
)
def test_invalid_request_body_is_400_with_message(client, make_user, auth_headers, payload):
    learner = make_user()

    response = client.post("/api/requests", json=payload, headers=auth_headers(learner))

    assert response.status_code == 400
    assert set(response.json()) == {"message"}
    assert "skillName" in response.json()["message"]


def test_search_requires_query(client):
    response = client.get("/api/requests/search")

    assert response.status_code == 400
    assert response.json() == {"message": "Search query is required"}


def test_invalid_status_string_is_400(client, make_user, auth_headers):
    learner = make_user()
    created = client.post("/api/requests", json={"skillName": "Guitar"}, headers=auth_headers(learner))

    response = client.patch(
        f"/api/requests/{created.json()['requestId']}",
        json="ARCHIVED",
        headers=auth_headers(learner),
    )

    assert response.status_code == 400
    assert response.json()["message"].startswith("Invalid status 'ARCHIVED'")
