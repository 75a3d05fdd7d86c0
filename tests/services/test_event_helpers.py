"""Event Helpers: create/find without the HTTP layer."""

import pytest

from app.core.domain_types import EventId
from app.core.errors import UniqueViolationError
from app.schemas.event import EventCreate
from app.services.event_helpers import EventHelpers


async def test_find_event_returns_none_when_absent(test_db):
    assert await EventHelpers(test_db).find_event(EventId("missing")) is None


async def test_create_event_returns_record_as_stored(test_db):
    data = EventCreate.model_validate({"eventId": "e1", "title": "Demo day"})

    record = await EventHelpers(test_db).create_event(data)

    assert record == {
        "eventId": "e1", "title": "Demo day",
        "totalAttendees": 0, "attendees": [],
    }


async def test_create_event_keeps_caller_counter(test_db):
    data = EventCreate.model_validate({"eventId": "e2", "totalAttendees": 4})

    record = await EventHelpers(test_db).create_event(data)

    assert record["totalAttendees"] == 4


async def test_create_event_twice_raises_unique_violation(test_db):
    helpers = EventHelpers(test_db)
    await helpers.create_event(EventCreate.model_validate({"eventId": "e3"}))

    with pytest.raises(UniqueViolationError):
        await helpers.create_event(EventCreate.model_validate({"eventId": "e3"}))
