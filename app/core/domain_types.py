"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - EventId, AttendeeId wrap the caller-chosen string keys: never bare str in helpers
    - Wire keys (camelCase) are defined once here, not repeated as string literals
    - All valid modes encoded as Enums: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: settings parse them from env vars without custom validators
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EventId = NewType("EventId", str)
AttendeeId = NewType("AttendeeId", str)


# ─── Wire Keys ───────────────────────────────────────────────────

EVENT_ID_KEY = "eventId"
ATTENDEE_ID_KEY = "attendeeId"
TOTAL_ATTENDEES_KEY = "totalAttendees"
ATTENDEES_KEY = "attendees"


# ─── Enums ───────────────────────────────────────────────────────

class ErrorMode(str, Enum):
    """How handler failures are rendered to clients."""
    LEGACY = "legacy"   # every failure → 500, text body "Error!"
    TYPED = "typed"     # taxonomy status + JSON envelope
