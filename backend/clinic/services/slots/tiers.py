# backend/clinic/services/slots/tiers.py
"""
Schedule tiers consulted by the resolver, highest priority first.

Each tier returns the raw entries of one weekday; filtering by date is
shared. A new tier (e.g. per-doctor hours) is added by inserting it into
the list returned by default_tiers().
"""

from datetime import date

from .entries import DEFAULT_DATE, DefaultEntry, ScheduleEntry, SlotSource
from .static_table import static_times
from .store import ScheduleStore
from .weekdays import Weekday


def date_filter_set(target_date: date | None) -> set[str]:
    """Stored date values visible for a request: defaults plus that day's overrides."""
    if target_date is None:
        return {DEFAULT_DATE}
    return {DEFAULT_DATE, target_date.isoformat()}


class ScheduleTier:
    source: SlotSource

    def day_entries(
        self,
        location: str,
        day: Weekday,
        section_id: int | None,
        fallback: bool = True,
    ) -> list[ScheduleEntry]:
        raise NotImplementedError

    def entries(
        self,
        location: str,
        day: Weekday,
        target_date: date | None,
        section_id: int | None,
        fallback: bool = True,
    ) -> list[ScheduleEntry]:
        allowed = date_filter_set(target_date)
        return [
            entry
            for entry in self.day_entries(location, day, section_id, fallback)
            if entry.date_value in allowed
        ]


class SectionTier(ScheduleTier):
    """Hours configured for a section at a location."""

    source = SlotSource.SECTION

    def __init__(self, store: ScheduleStore):
        self.store = store

    def day_entries(self, location, day, section_id, fallback=True):
        if section_id is None:
            return []
        record = self.store.find_section_schedule(section_id, location)
        if record is None:
            return []
        return record.schedule.day(day)


class LocationTier(ScheduleTier):
    """
    Hours configured for a whole location.

    Locations with no stored schedule at all fall back to the built-in
    table when fallback is set. A stored schedule with an empty day does
    not.
    """

    source = SlotSource.LOCATION

    def __init__(self, store: ScheduleStore):
        self.store = store

    def day_entries(self, location, day, section_id, fallback=True):
        record = self.store.find_location_schedule(location)
        if record is not None:
            return record.schedule.day(day)
        if not fallback:
            return []
        return [DefaultEntry(time) for time in static_times(location, day)]


def default_tiers(store: ScheduleStore) -> list[ScheduleTier]:
    return [SectionTier(store), LocationTier(store)]
