# backend/clinic/services/slots/store.py
"""
Read side of the schedule and booking storage.

ScheduleStore returns decoded WeeklySchedule objects; BookingStore answers
"which of these times are already booked". Both are thin wrappers over a
SQLAlchemy session and perform no caching.
"""

from dataclasses import dataclass
from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models.generated import Appointments, LocationSchedules, SectionSchedules
from .entries import WeeklySchedule


@dataclass
class SectionSchedule:
    id: int
    section_id: int
    location: str
    schedule: WeeklySchedule
    slot_interval: int = 15


@dataclass
class LocationSchedule:
    id: int
    location: str
    schedule: WeeklySchedule


def calendar_day(column):
    """YYYY-MM-DD prefix of a stored date or ISO datetime, the day as written.

    Unlike date(), any UTC offset suffix is ignored rather than applied.
    """
    return func.substr(column, 1, 10)


class ScheduleStore:
    """Schedule lookups by key."""

    def __init__(self, db: Session):
        self.db = db

    def find_section_schedule(self, section_id: int, location: str) -> SectionSchedule | None:
        row = (
            self.db.query(SectionSchedules)
            .filter(
                SectionSchedules.section_id == section_id,
                SectionSchedules.location == location,
            )
            .first()
        )
        if not row:
            return None
        return SectionSchedule(
            id=row.id,
            section_id=row.section_id,
            location=row.location,
            schedule=WeeklySchedule.from_json(row.schedule),
            slot_interval=row.slot_interval,
        )

    def find_location_schedule(self, location: str) -> LocationSchedule | None:
        row = (
            self.db.query(LocationSchedules)
            .filter(LocationSchedules.location == location)
            .first()
        )
        if not row:
            return None
        return LocationSchedule(
            id=row.id,
            location=row.location,
            schedule=WeeklySchedule.from_json(row.schedule),
        )


class BookingStore:
    """Appointment lookups for conflict marking."""

    def __init__(self, db: Session):
        self.db = db

    def find_booked_times(
        self,
        location: str,
        section_id: int | None,
        target_date: date,
        candidate_times: set[str],
        unsectioned_only: bool = False,
    ) -> set[str]:
        """
        Subset of candidate_times already booked at location on target_date.

        Args:
            section_id: Restrict to this section's appointments. None means
                location-wide, unless unsectioned_only is set.
            unsectioned_only: With section_id None, only appointments that
                have no section are counted.
        """
        if not candidate_times:
            return set()

        query = self.db.query(Appointments.time).filter(
            Appointments.location == location,
            calendar_day(Appointments.date) == target_date.isoformat(),
            Appointments.time.in_(sorted(candidate_times)),
        )
        if section_id is not None:
            query = query.filter(Appointments.section_id == section_id)
        elif unsectioned_only:
            query = query.filter(Appointments.section_id.is_(None))

        return {time for (time,) in query.all()}
