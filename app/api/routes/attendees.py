"""Attendee Routes: POST /add_attendee and GET /attendee={attendeeId}.

Invariants:
    - Handlers only decode, delegate to AttendeeHelpers, and pick the status code
    - The event counter is already recomputed when POST /add_attendee responds
    - Any failure, including a missing attendee, goes through handler_failure
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.error_handlers import handler_failure
from app.core.domain_types import AttendeeId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.infrastructure.database import get_db
from app.schemas.attendee import AttendeeCreate
from app.schemas.keys import parse_payload
from app.services.attendee_helpers import AttendeeHelpers

logger = logging.getLogger(__name__)
router = APIRouter(tags=["attendees"])


@router.post("/add_attendee")
async def add_attendee(
    request: Request,
    payload: Any = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Register an attendee to an existing event."""
    try:
        data = parse_payload(AttendeeCreate, payload)
        record = await AttendeeHelpers(db).create_attendee(data)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=record)
    except Exception as e:
        return handler_failure(request, e)


@router.get("/attendee={attendee_id}")
async def get_attendee(
    attendee_id: str, request: Request, db: AsyncSession = Depends(get_db),
):
    """Fetch one attendee."""
    try:
        record = await AttendeeHelpers(db).find_attendee(AttendeeId(attendee_id))
        if record is None:
            raise ResourceNotFoundError(
                "Attendee", attendee_id, ErrorContext(attendee_id=attendee_id),
            )
        return JSONResponse(status_code=status.HTTP_200_OK, content=record)
    except Exception as e:
        return handler_failure(request, e)
