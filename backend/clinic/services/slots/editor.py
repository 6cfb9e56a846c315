# backend/clinic/services/slots/editor.py
"""
Write side of section and location schedules.

Keeps the per-day invariant: no two entries share the same (time, date).
Duplicates are rejected here so the resolver never has to compensate.
"""

import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from ...models.generated import LocationSchedules, SectionSchedules, Sections
from .config import get_scheduling_config, normalize_time, validate_slot_interval
from .entries import ScheduleEntry, WeeklySchedule, make_entry
from .errors import DuplicateTimeSlotError, ScheduleNotFoundError, TimeSlotNotFoundError
from .generator import generate_range
from .weekdays import Weekday

logger = logging.getLogger(__name__)


# ── Section schedules ────────────────────────────────────────────────────


def get_or_create_section_schedule(
    db: Session,
    section_id: int,
    location: str,
    slot_interval: int | None = None,
) -> SectionSchedules:
    row = _find_section_row(db, section_id, location)
    if row is not None:
        return row

    if db.get(Sections, section_id) is None:
        raise ScheduleNotFoundError(f"Section {section_id} not found")

    interval = slot_interval or get_scheduling_config().slot_interval_minutes
    row = SectionSchedules(
        section_id=section_id,
        location=location,
        schedule=WeeklySchedule().to_json(),
        slot_interval=validate_slot_interval(interval),
    )
    db.add(row)
    db.flush()
    logger.info("Created section schedule %s/%s", section_id, location)
    return row


def add_section_slot(
    db: Session,
    section_id: int,
    location: str,
    day: Weekday,
    time: str,
    target_date: date | None = None,
) -> SectionSchedules:
    row = get_or_create_section_schedule(db, section_id, location)
    entry = _entry(time, target_date)
    _write_entries(row, day, [entry], skip_existing=False)
    return _commit(db, row)


def add_section_slot_range(
    db: Session,
    section_id: int,
    location: str,
    day: Weekday,
    start_time: str,
    end_time: str,
    target_date: date | None = None,
    interval: int | None = None,
) -> list[str]:
    """
    Add every step of [start_time, end_time]. Times already present for
    the same date are skipped.

    Returns:
        Times actually added.
    """
    row = get_or_create_section_schedule(db, section_id, location, interval)
    if interval:
        row.slot_interval = validate_slot_interval(interval)

    times = generate_range(start_time, end_time, row.slot_interval)
    entries = [_entry(t, target_date) for t in times]
    added = _write_entries(row, day, entries, skip_existing=True)
    _commit(db, row)
    return [e.time for e in added]


def remove_section_slot(
    db: Session,
    section_id: int,
    location: str,
    day: Weekday,
    time: str,
    target_date: date | None = None,
) -> SectionSchedules:
    row = _find_section_row(db, section_id, location)
    if row is None:
        raise ScheduleNotFoundError("Schedule not found")
    _remove_entry(row, day, _entry(time, target_date))
    return _commit(db, row)


def set_section_slot_interval(db: Session, schedule_id: int, interval: int) -> SectionSchedules:
    row = db.get(SectionSchedules, schedule_id)
    if row is None:
        raise ScheduleNotFoundError("Schedule not found")
    row.slot_interval = validate_slot_interval(interval)
    return _commit(db, row)


def delete_section_schedule(db: Session, schedule_id: int) -> None:
    row = db.get(SectionSchedules, schedule_id)
    if row is None:
        raise ScheduleNotFoundError("Schedule not found")
    db.delete(row)
    db.commit()
    logger.info("Deleted section schedule %s", schedule_id)


# ── Location schedules ───────────────────────────────────────────────────


def add_location_slot(
    db: Session,
    location: str,
    day: Weekday,
    time: str,
    target_date: date | None = None,
) -> LocationSchedules:
    row = (
        db.query(LocationSchedules)
        .filter(LocationSchedules.location == location)
        .first()
    )
    if row is None:
        row = LocationSchedules(location=location, schedule=WeeklySchedule().to_json())
        db.add(row)
        logger.info("Created location schedule %s", location)

    _write_entries(row, day, [_entry(time, target_date)], skip_existing=False)
    return _commit(db, row)


def remove_location_slot(
    db: Session,
    location: str,
    day: Weekday,
    time: str,
    target_date: date | None = None,
) -> LocationSchedules:
    row = (
        db.query(LocationSchedules)
        .filter(LocationSchedules.location == location)
        .first()
    )
    if row is None:
        raise ScheduleNotFoundError("Location schedule not found")
    _remove_entry(row, day, _entry(time, target_date))
    return _commit(db, row)


# ── Helpers ──────────────────────────────────────────────────────────────


def _find_section_row(db: Session, section_id: int, location: str) -> SectionSchedules | None:
    return (
        db.query(SectionSchedules)
        .filter(
            SectionSchedules.section_id == section_id,
            SectionSchedules.location == location,
        )
        .first()
    )


def _entry(time: str, target_date: date | None) -> ScheduleEntry:
    return make_entry(
        normalize_time(time),
        target_date.isoformat() if target_date else None,
    )


def _write_entries(
    row,
    day: Weekday,
    entries: list[ScheduleEntry],
    skip_existing: bool,
) -> list[ScheduleEntry]:
    schedule = WeeklySchedule.from_json(row.schedule)
    current = schedule.day(day)
    existing = {(e.time, e.date_value) for e in current}

    added = []
    for entry in entries:
        key = (entry.time, entry.date_value)
        if key in existing:
            if skip_existing:
                continue
            raise DuplicateTimeSlotError(entry.time, entry.date_value)
        existing.add(key)
        added.append(entry)

    schedule.set_day(day, current + added)
    row.schedule = schedule.to_json()
    logger.info(
        "Added %d slot(s) on %s to schedule %s",
        len(added), day.label(), row.location,
    )
    return added


def _remove_entry(row, day: Weekday, entry: ScheduleEntry) -> None:
    schedule = WeeklySchedule.from_json(row.schedule)
    current = schedule.day(day)
    remaining = [e for e in current if e != entry]
    if len(remaining) == len(current):
        raise TimeSlotNotFoundError(f"Time slot {entry.time} ({entry.date_value}) not found")
    schedule.set_day(day, remaining)
    row.schedule = schedule.to_json()


def _commit(db: Session, row):
    row.updated_at = datetime.now().isoformat(timespec="seconds")
    db.commit()
    db.refresh(row)
    return row
