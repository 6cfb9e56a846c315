# backend/clinic/services/slots/__init__.py
"""
Time-slot availability.

Resolution: section schedule > location schedule > built-in table,
then appointments mark booked times unavailable.
Authoring: editor functions keep (time, date) unique per day.
"""

from .config import SchedulingConfig, get_scheduling_config
from .entries import (
    DEFAULT_DATE,
    DefaultEntry,
    OverrideEntry,
    ResolvedTimeSlot,
    ScheduleEntry,
    SlotSource,
    WeeklySchedule,
)
from .generator import generate_range
from .resolver import (
    AvailabilityResolver,
    count_default_slots,
    resolve_time_slots,
)
from .sections import resolve_section_id
from .store import BookingStore, ScheduleStore
from .weekdays import DayLocale, Weekday

__all__ = [
    "SchedulingConfig",
    "get_scheduling_config",
    "DEFAULT_DATE",
    "DefaultEntry",
    "OverrideEntry",
    "ResolvedTimeSlot",
    "ScheduleEntry",
    "SlotSource",
    "WeeklySchedule",
    "generate_range",
    "AvailabilityResolver",
    "count_default_slots",
    "resolve_time_slots",
    "resolve_section_id",
    "BookingStore",
    "ScheduleStore",
    "DayLocale",
    "Weekday",
]
