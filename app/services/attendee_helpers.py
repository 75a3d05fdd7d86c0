"""Attendee Helpers: createAttendee, findAttendee and the updateAttendees recount.

Invariants:
    - An attendee is only inserted while its event row is locked (FOR UPDATE)
    - Insert, recount and commit happen in one transaction, in that order
    - totalAttendees is recounted from scratch, never incremented
    - Every failure is logged here and re-raised unchanged to the handler

Design Decisions:
    - Recount awaited inside the insert transaction instead of fired in the
      background: the response and the stored counter always agree
    - Event row locked before the attendee insert: concurrent registrations for
      one event queue on the lock instead of losing a recount (on SQLite the
      database-level write lock gives the same ordering)
    - Missing event detected by the locked read, so SQLite without
      PRAGMA foreign_keys still rejects orphan attendees
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import AttendeeId, EventId
from app.core.errors import (
    ErrorContext, ReferenceViolationError, ResourceNotFoundError,
)
from app.core.format_records import format_attendee
from app.core.repository_protocols import AttendeeRepository, EventRepository
from app.schemas.attendee import AttendeeCreate
from app.services.record_store import (
    SqlAttendeeRepository, SqlEventRepository, storage_errors,
)

logger = logging.getLogger(__name__)


class AttendeeHelpers:
    """Attendee operations bound to one request session."""

    def __init__(
        self,
        db: AsyncSession,
        attendees: AttendeeRepository | None = None,
        events: EventRepository | None = None,
    ):
        self.db = db
        self.attendees = attendees or SqlAttendeeRepository(db)
        self.events = events or SqlEventRepository(db)

    async def create_attendee(self, data: AttendeeCreate) -> dict[str, Any] | None:
        """Register an attendee, refresh the event counter, return the stored attendee."""
        attendee_id = AttendeeId(data.attendee_id)
        event_id = EventId(data.event_id)
        ctx = ErrorContext(event_id=event_id, attendee_id=attendee_id)
        extra = {"event_id": event_id, "attendee_id": attendee_id}
        try:
            async with storage_errors(self.db, "create_attendee", ctx):
                event = await self.events.find_unique(event_id, for_update=True)
                if event is None:
                    raise ReferenceViolationError("Event", event_id, ctx)
                await self.attendees.create(
                    attendee_id, event_id, data.attributes,
                )
                total = await self.update_attendees(event_id)
                await self.db.commit()
            logger.info(f"Attendee registered ({total} total)", extra=extra)
            return await self.find_attendee(attendee_id)
        except Exception as e:
            logger.error(f"Failed to create attendee: {e}", extra=extra)
            raise

    async def find_attendee(self, attendee_id: AttendeeId) -> dict[str, Any] | None:
        """Fetch one attendee by key, or None."""
        try:
            async with storage_errors(
                self.db, "find_attendee", ErrorContext(attendee_id=attendee_id),
            ):
                attendee = await self.attendees.find_unique(attendee_id)
            return format_attendee(attendee) if attendee else None
        except Exception as e:
            logger.error(
                f"Failed to find attendee: {e}",
                extra={"attendee_id": attendee_id},
            )
            raise

    async def update_attendees(self, event_id: EventId) -> int:
        """Recount the event's attendees and store the count on the event.

        Does not commit: create_attendee commits it with the insert, other
        callers commit themselves.
        """
        ctx = ErrorContext(event_id=event_id)
        try:
            async with storage_errors(self.db, "update_attendees", ctx):
                event = await self.events.find_unique(event_id, for_update=True)
                if event is None:
                    raise ResourceNotFoundError("Event", event_id, ctx)
                total = await self.attendees.count(event_id)
                await self.events.update(event_id, total_attendees=total)
            return total
        except Exception as e:
            logger.error(
                f"Failed to update attendee count: {e}",
                extra={"event_id": event_id},
            )
            raise
