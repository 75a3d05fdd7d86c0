"""Boundary Protocols: contracts between helpers and storage.

Invariants:
    - Helpers depend on these Protocols, never on concrete repository classes
    - All IO operations accessed through Protocol types
    - Implementations provided by services/record_store.py, one per request session

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Method set mirrors the storage collaborator: create / find_unique /
      find_many / update, plus count for the denormalized counter
"""

from typing import Any, Protocol

from app.core.domain_types import AttendeeId, EventId


class AttendeeLike(Protocol):
    """Structural contract for persisted attendees handed to record formatters."""
    attendee_id: str
    event_id: str
    attributes: dict


class EventLike(Protocol):
    """Structural contract for persisted events handed to record formatters."""
    event_id: str
    total_attendees: int
    attributes: dict
    attendees: list


class EventRepository(Protocol):
    """Contract for event persistence."""
    async def create(
        self,
        event_id: EventId,
        attributes: dict[str, Any],
        total_attendees: int = 0,
    ) -> EventLike: ...
    async def find_unique(
        self,
        event_id: EventId,
        include_attendees: bool = False,
        for_update: bool = False,
    ) -> EventLike | None: ...
    async def update(self, event_id: EventId, **fields: object) -> int: ...


class AttendeeRepository(Protocol):
    """Contract for attendee persistence."""
    async def create(
        self,
        attendee_id: AttendeeId,
        event_id: EventId,
        attributes: dict[str, Any],
    ) -> AttendeeLike: ...
    async def find_unique(self, attendee_id: AttendeeId) -> AttendeeLike | None: ...
    async def find_many(self, event_id: EventId) -> list[AttendeeLike]: ...
    async def count(self, event_id: EventId) -> int: ...
