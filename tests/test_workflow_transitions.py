from __future__ import annotations

import pytest

from skilllink.errors import InvalidTransitionError
from skilllink.models import AcceptanceStatus, RequestStatus, SessionStatus
from skilllink.services.workflow import (
    next_acceptance_status,
    next_request_status,
    next_session_status,
    parse_status,
)


@pytest.mark.parametrize("raw", ["in progress", "IN-PROGRESS", " in_progress "])
def test_parse_status_normalizes_case_and_separators(raw):
    assert parse_status(RequestStatus, raw) is RequestStatus.IN_PROGRESS


def test_parse_status_rejects_unknown_value_and_lists_allowed():
    with pytest.raises(InvalidTransitionError) as exc_info:
        parse_status(RequestStatus, "ARCHIVED")

    assert exc_info.value.status_code == 400
    assert "Allowed: OPEN, IN_PROGRESS, CLOSED" in exc_info.value.message


def test_request_status_can_close_and_reopen():
    assert next_request_status("OPEN", "CLOSED") is RequestStatus.CLOSED
    assert next_request_status("CLOSED", "open") is RequestStatus.OPEN


def test_closed_request_cannot_jump_to_in_progress():
    with pytest.raises(InvalidTransitionError, match="from CLOSED to IN_PROGRESS"):
        next_request_status("CLOSED", "IN_PROGRESS")


def test_same_status_is_a_no_op():
    assert next_request_status("OPEN", "OPEN") is RequestStatus.OPEN
    assert next_acceptance_status("COMPLETED", "COMPLETED") is AcceptanceStatus.COMPLETED


def test_pending_acceptance_only_cancels_through_status_patch():
    assert next_acceptance_status("PENDING", "CANCELLED") is AcceptanceStatus.CANCELLED
    # Reaching SCHEDULED goes through scheduling a meeting instead.
    with pytest.raises(InvalidTransitionError):
        next_acceptance_status("PENDING", "SCHEDULED")


def test_completed_acceptance_is_terminal():
    with pytest.raises(InvalidTransitionError):
        next_acceptance_status("COMPLETED", "CANCELLED")


def test_session_lifecycle():
    assert next_session_status("PENDING", "SCHEDULED") is SessionStatus.SCHEDULED
    assert next_session_status("SCHEDULED", "COMPLETED") is SessionStatus.COMPLETED
    with pytest.raises(InvalidTransitionError):
        next_session_status("CANCELLED", "SCHEDULED")
