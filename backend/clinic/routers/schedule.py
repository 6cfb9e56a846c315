# backend/clinic/routers/schedule.py
"""
Schedule API endpoints.

GET    /schedule/               - resolved slots for location/day(/date)
GET    /schedule/default-count  - weekly default slot count
GET    /schedule/exists         - whether any tier has hours for the day
POST   /schedule/               - add a location slot
DELETE /schedule/               - remove a location slot
"""

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.schedules import LocationScheduleRead, LocationSlotCreate, LocationSlotDelete
from ..schemas.slots import (
    DefaultSlotCountResponse,
    ScheduleExistsResponse,
    TimeSlotRead,
    TimeSlotsResponse,
)
from ..services.slots import get_scheduling_config, resolve_section_id
from ..services.slots.editor import add_location_slot, remove_location_slot
from ..services.slots.errors import ScheduleError
from ..services.slots.resolver import build_resolver
from .errors import parse_day, schedule_http_error

router = APIRouter(prefix="/schedule", tags=["schedule"])


def _require_location_and_day(location: str | None, day: str | None) -> None:
    if not location or not day:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Location and day are required",
        )


@router.get("/", response_model=TimeSlotsResponse)
def get_time_slots(
    location: str | None = None,
    day: str | None = None,
    target_date: date | None = Query(None, alias="date"),
    section_id: int | None = Query(None, alias="sectionId"),
    test_type: str | None = Query(None, alias="testType"),
    db: Session = Depends(get_db),
):
    """
    Slots for a location/day. An empty list means no schedule is
    configured and the client should offer custom time entry.
    """
    _require_location_and_day(location, day)
    weekday = parse_day(day)
    section_id = resolve_section_id(db, section_id, test_type)

    resolver = build_resolver(db, get_scheduling_config())
    slots = resolver.resolve(location, weekday, target_date, section_id)

    return TimeSlotsResponse(data=[TimeSlotRead.model_validate(s) for s in slots])


@router.get("/default-count", response_model=DefaultSlotCountResponse)
def get_default_slot_count(
    location: str | None = None,
    day: str | None = None,
    section_id: int | None = Query(None, alias="sectionId"),
    test_type: str | None = Query(None, alias="testType"),
    db: Session = Depends(get_db),
):
    _require_location_and_day(location, day)
    weekday = parse_day(day)
    section_id = resolve_section_id(db, section_id, test_type)

    count = build_resolver(db).count_default_slots(location, weekday, section_id)
    return DefaultSlotCountResponse(
        location=location,
        day=weekday.label(),
        section_id=section_id,
        count=count,
    )


@router.get("/exists", response_model=ScheduleExistsResponse)
def get_schedule_exists(
    location: str | None = None,
    day: str | None = None,
    section_id: int | None = Query(None, alias="sectionId"),
    db: Session = Depends(get_db),
):
    _require_location_and_day(location, day)
    weekday = parse_day(day)
    exists = build_resolver(db).has_schedule(location, weekday, section_id)
    return ScheduleExistsResponse(exists=exists)


@router.post("/", response_model=LocationScheduleRead, status_code=status.HTTP_201_CREATED)
def create_location_slot(
    data: LocationSlotCreate,
    db: Session = Depends(get_db),
):
    weekday = parse_day(data.day)
    try:
        return add_location_slot(
            db, data.location, weekday, data.time_slot.time, data.time_slot.date
        )
    except (ScheduleError, ValueError) as e:
        raise schedule_http_error(e)


@router.delete("/", response_model=LocationScheduleRead)
def delete_location_slot(
    data: LocationSlotDelete,
    db: Session = Depends(get_db),
):
    weekday = parse_day(data.day)
    try:
        return remove_location_slot(
            db, data.location, weekday, data.time_slot.time, data.time_slot.date
        )
    except (ScheduleError, ValueError) as e:
        raise schedule_http_error(e)
