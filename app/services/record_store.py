"""Record Store: SQLAlchemy repositories for events and attendees, plus error mapping.

Invariants:
    - Repositories flush but never commit: transaction boundaries belong to helpers
    - find_unique always re-reads the row (populate_existing), never trusts the identity map
    - storage_errors() rolls back and maps every SQLAlchemy failure to the taxonomy:
      unique collisions → UniqueViolationError, missing parents → ReferenceViolationError,
      everything else → StorageError

Design Decisions:
    - Integrity errors classified by driver message: SQLite and PostgreSQL both name
      the violated constraint kind ("UNIQUE"/"duplicate key", "FOREIGN KEY")
    - count() over find_many() for the recount: one aggregate row instead of N
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.domain_types import AttendeeId, EventId
from app.core.errors import (
    ErrorContext, ReferenceViolationError, RosterError, StorageError,
    UniqueViolationError,
)
from app.models.attendee import Attendee
from app.models.event import Event

logger = logging.getLogger(__name__)


def classify_integrity_error(
    exc: IntegrityError, context: ErrorContext,
) -> RosterError:
    """Map a driver integrity error to the matching domain error."""
    detail = str(exc.orig).lower()
    if "foreign key" in detail:
        return ReferenceViolationError(
            "Event", context.event_id or "unknown", context,
        )
    if "unique" in detail or "duplicate key" in detail:
        return UniqueViolationError(
            "A record with this key already exists", context,
        )
    return StorageError("Integrity constraint violated", "commit", context)


@asynccontextmanager
async def storage_errors(
    db: AsyncSession, operation: str, context: ErrorContext | None = None,
) -> AsyncGenerator[None, None]:
    """Roll back and translate storage failures raised inside the block."""
    ctx = context or ErrorContext()
    ctx.operation = ctx.operation or operation
    try:
        yield
    except RosterError:
        await db.rollback()
        raise
    except IntegrityError as e:
        await db.rollback()
        logger.error(f"DB integrity error during {operation}: {e.orig}")
        raise classify_integrity_error(e, ctx) from e
    except DBAPIError as e:
        await db.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise StorageError("Connection or driver error", operation, ctx) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise StorageError("Database operation failed", operation, ctx) from e


class SqlEventRepository:
    """Event persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        event_id: EventId,
        attributes: dict[str, Any],
        total_attendees: int = 0,
    ) -> Event:
        event = Event(
            event_id=event_id,
            attributes=attributes,
            total_attendees=total_attendees,
        )
        self.db.add(event)
        await self.db.flush()
        return event

    async def find_unique(
        self,
        event_id: EventId,
        include_attendees: bool = False,
        for_update: bool = False,
    ) -> Event | None:
        """Fetch by event key. for_update takes a row lock where the backend has one."""
        query = (
            select(Event)
            .where(Event.event_id == event_id)
            .execution_options(populate_existing=True)
        )
        if include_attendees:
            query = query.options(selectinload(Event.attendees))
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def update(self, event_id: EventId, **fields: object) -> int:
        """Write fields onto the event; returns the number of rows touched."""
        result = await self.db.execute(
            update(Event).where(Event.event_id == event_id).values(**fields),
        )
        return result.rowcount


class SqlAttendeeRepository:
    """Attendee persistence over one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        attendee_id: AttendeeId,
        event_id: EventId,
        attributes: dict[str, Any],
    ) -> Attendee:
        attendee = Attendee(
            attendee_id=attendee_id,
            event_id=event_id,
            attributes=attributes,
        )
        self.db.add(attendee)
        await self.db.flush()
        return attendee

    async def find_unique(self, attendee_id: AttendeeId) -> Attendee | None:
        result = await self.db.execute(
            select(Attendee)
            .where(Attendee.attendee_id == attendee_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def find_many(self, event_id: EventId) -> list[Attendee]:
        result = await self.db.execute(
            select(Attendee)
            .where(Attendee.event_id == event_id)
            .order_by(Attendee.created_at),
        )
        return list(result.scalars().all())

    async def count(self, event_id: EventId) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(Attendee)
            .where(Attendee.event_id == event_id),
        )
        return result.scalar_one()
