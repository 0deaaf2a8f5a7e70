"""
Status vocabularies and allowed transitions for requests, acceptances and
sessions.

Statuses arrive as free-form strings from the API; ``parse_status`` turns
them into enum members and ``ensure_transition`` enforces the tables below.
"""

from __future__ import annotations

import enum
from typing import Dict, FrozenSet, Type, TypeVar

from skilllink.errors import InvalidTransitionError
from skilllink.models.request import AcceptanceStatus, RequestStatus
from skilllink.models.session import SessionStatus

StatusT = TypeVar("StatusT", bound=enum.Enum)


REQUEST_TRANSITIONS: Dict[RequestStatus, FrozenSet[RequestStatus]] = {
    RequestStatus.OPEN: frozenset({RequestStatus.IN_PROGRESS, RequestStatus.CLOSED}),
    RequestStatus.IN_PROGRESS: frozenset({RequestStatus.OPEN, RequestStatus.CLOSED}),
    RequestStatus.CLOSED: frozenset({RequestStatus.OPEN}),
}

# PENDING -> SCHEDULED only happens through scheduling a meeting.
ACCEPTANCE_TRANSITIONS: Dict[AcceptanceStatus, FrozenSet[AcceptanceStatus]] = {
    AcceptanceStatus.PENDING: frozenset({AcceptanceStatus.CANCELLED}),
    AcceptanceStatus.SCHEDULED: frozenset({AcceptanceStatus.COMPLETED, AcceptanceStatus.CANCELLED}),
    AcceptanceStatus.COMPLETED: frozenset(),
    AcceptanceStatus.CANCELLED: frozenset(),
}

SESSION_TRANSITIONS: Dict[SessionStatus, FrozenSet[SessionStatus]] = {
    SessionStatus.PENDING: frozenset({SessionStatus.SCHEDULED, SessionStatus.CANCELLED}),
    SessionStatus.SCHEDULED: frozenset({SessionStatus.COMPLETED, SessionStatus.CANCELLED}),
    SessionStatus.COMPLETED: frozenset(),
    SessionStatus.CANCELLED: frozenset(),
}


def parse_status(status_type: Type[StatusT], raw) -> StatusT:
    if isinstance(raw, status_type):
        return raw
    normalized = str(raw or "").strip().upper().replace(" ", "_").replace("-", "_")
    try:
        return status_type(normalized)
    except ValueError:
        allowed = ", ".join(member.value for member in status_type)
        raise InvalidTransitionError(f"Invalid status '{raw}'. Allowed: {allowed}") from None


def ensure_transition(
    table: Dict[StatusT, FrozenSet[StatusT]],
    current: StatusT,
    target: StatusT,
) -> None:
    """Raise unless ``current -> target`` is allowed; re-setting the same status is a no-op."""
    if current == target:
        return
    if target not in table.get(current, frozenset()):
        raise InvalidTransitionError(
            f"Cannot change status from {current.value} to {target.value}"
        )


def next_request_status(current: str, raw_target) -> RequestStatus:
    target = parse_status(RequestStatus, raw_target)
    ensure_transition(REQUEST_TRANSITIONS, parse_status(RequestStatus, current), target)
    return target


def next_acceptance_status(current: str, raw_target) -> AcceptanceStatus:
    target = parse_status(AcceptanceStatus, raw_target)
    ensure_transition(ACCEPTANCE_TRANSITIONS, parse_status(AcceptanceStatus, current), target)
    return target


def next_session_status(current: str, raw_target) -> SessionStatus:
    target = parse_status(SessionStatus, raw_target)
    ensure_transition(SESSION_TRANSITIONS, parse_status(SessionStatus, current), target)
    return target
