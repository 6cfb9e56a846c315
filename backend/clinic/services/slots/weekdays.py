# backend/clinic/services/slots/weekdays.py
"""
Weekday enumeration and its locale string tables.

Section and location schedules are stored with Romanian day names,
per-doctor activity schedules with English ones. Resolver code only
deals with Weekday members; strings are converted at the store and
HTTP boundaries.
"""

from datetime import date
from enum import Enum, IntEnum


class DayLocale(str, Enum):
    ROMANIAN = "ro"
    ENGLISH = "en"


class Weekday(IntEnum):
    """Day of week, numbered like date.weekday() (Monday = 0)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        return cls(value.weekday())

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        """
        Parse a day name in any supported locale.

        Raises:
            ValueError: unknown day name
        """
        key = (name or "").strip().casefold()
        try:
            return _LOOKUP[key]
        except KeyError:
            raise ValueError(f"Unknown day name: {name!r}") from None

    def label(self, locale: DayLocale = DayLocale.ROMANIAN) -> str:
        return DAY_NAMES[locale][self.value]


DAY_NAMES: dict[DayLocale, tuple[str, ...]] = {
    DayLocale.ROMANIAN: (
        "Luni", "Marți", "Miercuri", "Joi", "Vineri", "Sâmbătă", "Duminica",
    ),
    DayLocale.ENGLISH: (
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
    ),
}

# Spellings seen in older records and query strings
_ALIASES: dict[str, Weekday] = {
    "marti": Weekday.TUESDAY,
    "marţi": Weekday.TUESDAY,
    "sambata": Weekday.SATURDAY,
    "sâmbata": Weekday.SATURDAY,
    "sîmbătă": Weekday.SATURDAY,
    "duminică": Weekday.SUNDAY,
}

_LOOKUP: dict[str, Weekday] = {
    name.casefold(): Weekday(index)
    for names in DAY_NAMES.values()
    for index, name in enumerate(names)
}
_LOOKUP.update(_ALIASES)
