"""Typed Error Mode: failures mapped to taxonomy statuses with a JSON envelope.

Invariants:
    - Missing resources → 404 RESOURCE_NOT_FOUND
    - Duplicate keys → 409 UNIQUE_VIOLATION
    - Attendee for an unknown event → 409 FOREIGN_KEY_VIOLATION
    - Bad payloads → 400 VALIDATION_ERROR
    - Success responses are identical to legacy mode
"""


async def test_typed_missing_event_returns_404(typed_client):
    res = await typed_client.get("/event=missing")

    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["context"]["event_id"] == "missing"


async def test_typed_missing_attendee_returns_404(typed_client):
    res = await typed_client.get("/attendee=missing")

    assert res.status_code == 404
    assert res.json()["error"]["context"]["attendee_id"] == "missing"


async def test_typed_duplicate_event_returns_409(typed_client, seed_event):
    res = await typed_client.post("/add_event", json={"eventId": "launch-2026"})

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "UNIQUE_VIOLATION"


async def test_typed_duplicate_attendee_returns_409(typed_client, seed_event):
    payload = {"attendeeId": "ana", "eventId": "launch-2026"}
    await typed_client.post("/add_attendee", json=payload)

    res = await typed_client.post("/add_attendee", json=payload)

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "UNIQUE_VIOLATION"


async def test_typed_unknown_event_reference_returns_409(typed_client):
    res = await typed_client.post(
        "/add_attendee", json={"attendeeId": "ana", "eventId": "nope"},
    )

    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "FOREIGN_KEY_VIOLATION"
    assert error["category"] == "conflict"


async def test_typed_missing_key_returns_400(typed_client):
    res = await typed_client.post("/add_event", json={"name": "No key"})

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "eventId" in error["message"]


async def test_typed_malformed_json_returns_400_with_details(typed_client):
    res = await typed_client.post(
        "/add_event", content=b"{broken",
        headers={"content-type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["details"]


async def test_typed_success_matches_legacy_shape(typed_client):
    payload = {"eventId": "typed", "name": "Typed"}

    res = await typed_client.post("/add_event", json=payload)

    assert res.status_code == 201
    assert res.json() == {**payload, "totalAttendees": 0, "attendees": []}


async def test_typed_non_finite_number_returns_400(typed_client, seed_event):
    res = await typed_client.post(
        "/add_attendee",
        content=b'{"attendeeId": "g", "eventId": "launch-2026", "x": -Infinity}',
        headers={"content-type": "application/json"},
    )

    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
