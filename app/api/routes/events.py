"""Event Routes: GET /event={eventId} and POST /add_event.

Invariants:
    - Handlers only decode, delegate to EventHelpers, and pick the status code
    - Success: 200 (read) / 201 (create) with the event record as JSON body
    - Any failure, including a missing event, goes through handler_failure
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.error_handlers import handler_failure
from app.core.domain_types import EventId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.infrastructure.database import get_db
from app.schemas.event import EventCreate
from app.schemas.keys import parse_payload
from app.services.event_helpers import EventHelpers

logger = logging.getLogger(__name__)
router = APIRouter(tags=["events"])


@router.get("/event={event_id}")
async def get_event(
    event_id: str, request: Request, db: AsyncSession = Depends(get_db),
):
    """Fetch one event with its attendees."""
    try:
        record = await EventHelpers(db).find_event(EventId(event_id))
        if record is None:
            raise ResourceNotFoundError(
                "Event", event_id, ErrorContext(event_id=event_id),
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content=record)
    except Exception as e:
        return handler_failure(request, e)


@router.post("/add_event")
async def add_event(
    request: Request,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Create an event from the request body and return it as stored."""
    try:
        data = parse_payload(EventCreate, payload)
        record = await EventHelpers(db).create_event(data)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=record)
    except Exception as e:
        return handler_failure(request, e)
