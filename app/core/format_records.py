"""Record Formatting: pure conversion between wire payloads and persisted rows.

Invariants:
    - A record is the row's attributes dict flattened with its identifying keys
    - Identifying keys always win over same-named attributes
    - Event records carry totalAttendees; nested attendees only when requested
    - Pure functions: no IO, no DB, inputs never mutated

Design Decisions:
    - Caller-defined fields live in a JSON column and are echoed back verbatim,
      so create-then-find returns exactly what the caller sent
"""

from typing import Any

from app.core.domain_types import (
    ATTENDEE_ID_KEY, ATTENDEES_KEY, EVENT_ID_KEY, TOTAL_ATTENDEES_KEY,
)
from app.core.repository_protocols import AttendeeLike, EventLike

_EVENT_KEYS = (EVENT_ID_KEY, TOTAL_ATTENDEES_KEY, ATTENDEES_KEY)
_ATTENDEE_KEYS = (ATTENDEE_ID_KEY, EVENT_ID_KEY)


def split_attributes(
    payload: dict[str, Any], reserved: tuple[str, ...],
) -> dict[str, Any]:
    """Return the payload minus reserved keys (the free-form attributes)."""
    return {k: v for k, v in payload.items() if k not in reserved}


def event_attributes(payload: dict[str, Any]) -> dict[str, Any]:
    return split_attributes(payload, _EVENT_KEYS)


def attendee_attributes(payload: dict[str, Any]) -> dict[str, Any]:
    return split_attributes(payload, _ATTENDEE_KEYS)


def format_attendee(attendee: AttendeeLike) -> dict[str, Any]:
    """Flatten an attendee row into its wire record."""
    record = dict(attendee.attributes or {})
    record[ATTENDEE_ID_KEY] = attendee.attendee_id
    record[EVENT_ID_KEY] = attendee.event_id
    return record


def format_event(
    event: EventLike, include_attendees: bool = True,
) -> dict[str, Any]:
    """Flatten an event row into its wire record, optionally with attendees."""
    record = dict(event.attributes or {})
    record[EVENT_ID_KEY] = event.event_id
    record[TOTAL_ATTENDEES_KEY] = event.total_attendees
    if include_attendees:
        record[ATTENDEES_KEY] = [format_attendee(a) for a in event.attendees]
    return record
