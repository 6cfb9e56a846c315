# backend/clinic/services/slots/static_table.py
"""
Built-in fallback hours, used only for locations that have no stored
location schedule at all. Every entry behaves as a weekly default.
"""

from .generator import generate_range
from .weekdays import Weekday

_WEEKDAYS = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
)

STATIC_TIME_SLOTS: dict[str, dict[Weekday, list[str]]] = {
    "Oradea": {
        **{day: generate_range("08:00", "13:45", 15) for day in _WEEKDAYS},
        Weekday.SATURDAY: generate_range("09:00", "11:45", 15),
    },
    "Beiuș": {
        Weekday.TUESDAY: generate_range("09:00", "12:00", 20),
        Weekday.THURSDAY: generate_range("09:00", "12:00", 20),
    },
    "Salonta": {
        Weekday.WEDNESDAY: ["09:00", "09:30", "10:00", "10:30", "11:00"],
    },
}


def static_times(location: str, day: Weekday) -> list[str]:
    """Non-blank, stripped times for location/day ([] when unknown)."""
    times = STATIC_TIME_SLOTS.get(location, {}).get(day, [])
    return [t.strip() for t in times if t and t.strip()]
