"""Attendee Schemas: payload contract for POST /add_attendee.

Invariants:
    - attendeeId and eventId are required and non-empty (ints coerced to str)
    - Any other field is kept as a free-form attribute (reserved record keys dropped)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.format_records import attendee_attributes
from app.schemas.keys import coerce_key


class AttendeeCreate(BaseModel):
    """Attendee creation payload: both keys plus pass-through fields."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    attendee_id: str = Field(alias="attendeeId", min_length=1)
    event_id: str = Field(alias="eventId", min_length=1)

    @field_validator("attendee_id", "event_id", mode="before")
    @classmethod
    def coerce_keys(cls, v: Any) -> Any:
        return coerce_key(v)

    @property
    def attributes(self) -> dict[str, Any]:
        return attendee_attributes(self.model_extra or {})
