"""ORM Models: SQLAlchemy declarative models for events and attendees.

Invariants:
    - All models inherit from Base (db/base.py)
    - Event is the aggregate root; attendees scoped by event_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from app.models.event import Event  # noqa: F401
from app.models.attendee import Attendee  # noqa: F401
