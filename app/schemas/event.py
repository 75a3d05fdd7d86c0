"""Event Schemas: payload contract for POST /add_event.

Invariants:
    - eventId is required and non-empty; integers are accepted and coerced to str
    - totalAttendees defaults to 0 and is never negative
    - Any other field is kept as a free-form attribute (reserved record keys dropped)

Design Decisions:
    - camelCase aliases match the wire format; populate_by_name lets tests
      and scripts build payloads with snake_case names too
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.format_records import event_attributes
from app.schemas.keys import coerce_key


class EventCreate(BaseModel):
    """Event creation payload: identifying key plus pass-through fields."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    event_id: str = Field(alias="eventId", min_length=1)
    total_attendees: int = Field(0, alias="totalAttendees", ge=0)

    @field_validator("event_id", mode="before")
    @classmethod
    def coerce_event_id(cls, v: Any) -> Any:
        return coerce_key(v)

    @property
    def attributes(self) -> dict[str, Any]:
        return event_attributes(self.model_extra or {})
