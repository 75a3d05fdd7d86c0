"""Attendee ORM: persists a participant registered to exactly one event.

Invariants:
    - attendee_id is the caller-chosen unique key
    - Always belongs to an Event (event_id FK → events.event_id)
    - Never updated or deleted once inserted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Attendee(Base):
    """Attendee entity: linked to its event by the event's own key."""
    __tablename__ = "attendees"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    attendee_id: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    event_id: Mapped[str] = mapped_column(
        String(255), ForeignKey("events.event_id"),
        nullable=False, index=True,
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
    event: Mapped["Event"] = relationship(
        "Event", back_populates="attendees",
    )
