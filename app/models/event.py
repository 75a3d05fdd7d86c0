"""Event ORM: persists a schedulable occasion and its denormalized attendee count.

Invariants:
    - id is UUID primary key; event_id is the caller-chosen unique key
    - total_attendees starts at the value sent on creation (default 0) and is
      afterwards only written by the attendee recount
    - attributes holds every caller field other than the keys, verbatim

Design Decisions:
    - Surrogate UUID id plus unique event_id: callers address events by their own key
    - JSON column for attributes: payloads are caller-defined (ADR: pass-through records)
    - total_attendees denormalized: event reads never count attendees
    - attendees lazy="raise": async sessions cannot lazy-load, so every query
      that needs them asks for selectinload explicitly
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Event(Base):
    """Event aggregate root: owns its attendees."""
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    event_id: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    total_attendees: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    attributes: Mapped[dict] = mapped_column(
        JSON, nullable=False, default=dict,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    attendees: Mapped[list["Attendee"]] = relationship(
        "Attendee", back_populates="event",
        order_by="Attendee.created_at", lazy="raise",
    )
