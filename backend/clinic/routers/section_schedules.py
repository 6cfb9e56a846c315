# backend/clinic/routers/section_schedules.py

from datetime import date
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import SectionSchedules as DBSectionSchedules
from ..schemas.schedules import (
    SectionScheduleCreate,
    SectionScheduleRead,
    SectionScheduleUpdate,
    SectionSlotDelete,
    SlotRangeResult,
)
from ..services.slots import WeeklySchedule
from ..services.slots.config import normalize_time
from ..services.slots.editor import (
    add_section_slot,
    add_section_slot_range,
    delete_section_schedule,
    get_or_create_section_schedule,
    remove_section_slot,
    set_section_slot_interval,
)
from ..services.slots.errors import ScheduleError
from ..services.slots.tiers import date_filter_set
from .errors import parse_day, schedule_http_error

router = APIRouter(prefix="/section-schedules", tags=["section_schedules"])


@router.get("/", response_model=list[SectionScheduleRead])
def list_section_schedules(
    section_id: int | None = Query(None, alias="sectionId"),
    location: str | None = None,
    day: str | None = None,
    target_date: date | None = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """List schedules; with day, only that day's defaults (+ date overrides)."""
    query = db.query(DBSectionSchedules)
    if section_id is not None:
        query = query.filter(DBSectionSchedules.section_id == section_id)
    if location:
        query = query.filter(DBSectionSchedules.location == location)
    rows = query.all()

    if not day:
        return rows

    weekday = parse_day(day)
    allowed = date_filter_set(target_date)
    result = []
    for row in rows:
        entries = WeeklySchedule.from_json(row.schedule).day(weekday)
        read = SectionScheduleRead.model_validate(row)
        result.append(read.model_copy(update={
            "schedule": {
                weekday.label(): [e.to_raw() for e in entries if e.date_value in allowed]
            }
        }))
    return result


@router.post("/", response_model=SlotRangeResult, status_code=status.HTTP_201_CREATED)
def create_section_slots(
    data: SectionScheduleCreate,
    db: Session = Depends(get_db),
):
    """Add a slot or a range of slots; creates the schedule if needed."""
    try:
        added: list[str] = []
        if data.day and data.time_slot:
            row = add_section_slot(
                db, data.section_id, data.location, parse_day(data.day),
                data.time_slot.time, data.time_slot.date,
            )
            added = [normalize_time(data.time_slot.time)]
        elif data.day and data.start_time and data.end_time:
            added = add_section_slot_range(
                db, data.section_id, data.location, parse_day(data.day),
                data.start_time, data.end_time, data.date, data.slot_interval,
            )
            row = get_or_create_section_schedule(db, data.section_id, data.location)
        else:
            row = get_or_create_section_schedule(
                db, data.section_id, data.location, data.slot_interval
            )
            if data.slot_interval:
                row = set_section_slot_interval(db, row.id, data.slot_interval)
            else:
                db.commit()
                db.refresh(row)
    except (ScheduleError, ValueError) as e:
        raise schedule_http_error(e)

    return SlotRangeResult(schedule=SectionScheduleRead.model_validate(row), added=added)


@router.patch("/{id}", response_model=SectionScheduleRead)
def update_section_schedule(
    id: int,
    data: SectionScheduleUpdate,
    db: Session = Depends(get_db),
):
    try:
        return set_section_slot_interval(db, id, data.slot_interval)
    except ScheduleError as e:
        raise schedule_http_error(e)


@router.delete("/slot", response_model=SectionScheduleRead)
def delete_section_slot(
    data: SectionSlotDelete,
    db: Session = Depends(get_db),
):
    try:
        return remove_section_slot(
            db, data.section_id, data.location, parse_day(data.day),
            data.time_slot.time, data.time_slot.date,
        )
    except (ScheduleError, ValueError) as e:
        raise schedule_http_error(e)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_section_schedule_by_id(id: int, db: Session = Depends(get_db)):
    try:
        delete_section_schedule(db, id)
    except ScheduleError as e:
        raise schedule_http_error(e)
