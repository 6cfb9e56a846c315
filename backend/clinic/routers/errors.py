# backend/clinic/routers/errors.py

from fastapi import HTTPException, status

from ..services.slots import Weekday
from ..services.slots.errors import (
    ScheduleNotFoundError,
    TimeSlotNotFoundError,
)


def parse_day(day: str) -> Weekday:
    try:
        return Weekday.parse(day)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def schedule_http_error(exc: Exception) -> HTTPException:
    """Map authoring errors to HTTP responses."""
    if isinstance(exc, (ScheduleNotFoundError, TimeSlotNotFoundError)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
