# backend/clinic/services/slots/entries.py
"""
Schedule entries and resolved slots.

Stored form of an entry: {"time": "HH:MM", "date": "00:00:00" | "YYYY-MM-DD"}.
The "00:00:00" sentinel means "every week on this day" and is only
interpreted here; everything else works with DefaultEntry / OverrideEntry.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .weekdays import DayLocale, Weekday

logger = logging.getLogger(__name__)

DEFAULT_DATE = "00:00:00"


@dataclass(frozen=True)
class DefaultEntry:
    """Slot that applies to its weekday every week."""
    time: str

    @property
    def date_value(self) -> str:
        return DEFAULT_DATE

    def to_raw(self) -> dict:
        return {"time": self.time, "date": DEFAULT_DATE}


@dataclass(frozen=True)
class OverrideEntry:
    """Slot that applies only on one calendar date ("YYYY-MM-DD")."""
    time: str
    date: str

    @property
    def date_value(self) -> str:
        return self.date

    def to_raw(self) -> dict:
        return {"time": self.time, "date": self.date}


ScheduleEntry = Union[DefaultEntry, OverrideEntry]


def entry_from_raw(raw: dict) -> ScheduleEntry:
    """Build an entry from its stored dict form."""
    time = raw["time"]
    date = raw.get("date") or DEFAULT_DATE
    if date == DEFAULT_DATE:
        return DefaultEntry(time)
    return OverrideEntry(time, date)


def make_entry(time: str, date: str | None = None) -> ScheduleEntry:
    if date is None or date == DEFAULT_DATE:
        return DefaultEntry(time)
    return OverrideEntry(time, date)


class SlotSource(str, Enum):
    SECTION = "section"
    LOCATION = "location"
    CUSTOM = "custom"  # ad-hoc time typed in by the user


@dataclass
class ResolvedTimeSlot:
    time: str
    date: str
    is_available: bool
    is_default: bool
    source: SlotSource

    @classmethod
    def from_entry(cls, entry: ScheduleEntry, source: SlotSource) -> "ResolvedTimeSlot":
        return cls(
            time=entry.time,
            date=entry.date_value,
            is_available=True,
            is_default=isinstance(entry, DefaultEntry),
            source=source,
        )


@dataclass
class WeeklySchedule:
    """Weekday -> ordered entries. Missing days are empty."""
    days: dict[Weekday, list[ScheduleEntry]] = field(default_factory=dict)

    def day(self, weekday: Weekday) -> list[ScheduleEntry]:
        return self.days.get(weekday, [])

    def set_day(self, weekday: Weekday, entries: list[ScheduleEntry]) -> None:
        self.days[weekday] = list(entries)

    @classmethod
    def from_json(cls, raw_json: str | None) -> "WeeklySchedule":
        """Decode the stored JSON document ({day name: [entries]})."""
        try:
            data = json.loads(raw_json) if raw_json else {}
        except json.JSONDecodeError:
            logger.warning("Unreadable schedule document, treating as empty")
            data = {}
        days: dict[Weekday, list[ScheduleEntry]] = {}
        for day_name, raw_entries in data.items():
            try:
                weekday = Weekday.parse(day_name)
            except ValueError:
                logger.warning("Ignoring unknown schedule day %r", day_name)
                continue
            days.setdefault(weekday, []).extend(
                entry_from_raw(raw) for raw in raw_entries or []
            )
        return cls(days)

    def to_json(self, locale: DayLocale = DayLocale.ROMANIAN) -> str:
        data = {
            weekday.label(locale): [entry.to_raw() for entry in self.day(weekday)]
            for weekday in Weekday
        }
        return json.dumps(data, ensure_ascii=False)
