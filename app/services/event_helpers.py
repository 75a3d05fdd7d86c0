"""Event Helpers: createEvent and findEvent over the event repository.

Invariants:
    - find_event returns the event record with nested attendees, or None when absent
    - create_event commits the insert before re-reading it through find_event
    - Every failure is logged here and re-raised unchanged to the handler
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import EventId
from app.core.errors import ErrorContext
from app.core.format_records import format_event
from app.core.repository_protocols import EventRepository
from app.schemas.event import EventCreate
from app.services.record_store import SqlEventRepository, storage_errors

logger = logging.getLogger(__name__)


class EventHelpers:
    """Event read/create operations bound to one request session."""

    def __init__(self, db: AsyncSession, events: EventRepository | None = None):
        self.db = db
        self.events = events or SqlEventRepository(db)

    async def find_event(self, event_id: EventId) -> dict[str, Any] | None:
        """Fetch one event by key, including its attendees."""
        try:
            async with storage_errors(
                self.db, "find_event", ErrorContext(event_id=event_id),
            ):
                event = await self.events.find_unique(
                    event_id, include_attendees=True,
                )
            return format_event(event) if event else None
        except Exception as e:
            logger.error(
                f"Failed to find event: {e}", extra={"event_id": event_id},
            )
            raise

    async def create_event(self, data: EventCreate) -> dict[str, Any] | None:
        """Insert an event from the full payload, then return it as stored."""
        event_id = EventId(data.event_id)
        try:
            async with storage_errors(
                self.db, "create_event", ErrorContext(event_id=event_id),
            ):
                await self.events.create(
                    event_id, data.attributes, data.total_attendees,
                )
                await self.db.commit()
            logger.info("Event created", extra={"event_id": event_id})
            return await self.find_event(event_id)
        except Exception as e:
            logger.error(
                f"Failed to create event: {e}", extra={"event_id": event_id},
            )
            raise
