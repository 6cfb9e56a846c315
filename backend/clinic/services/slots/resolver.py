# backend/clinic/services/slots/resolver.py
"""
Availability resolution for a location/day.

Priority: section schedule > location schedule (> built-in table).
The first tier with entries wins; entries for the requested date are
merged with the weekly defaults, then existing appointments mark
times unavailable.

Every call re-reads the stores. Nothing is cached between calls.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from .config import SchedulingConfig, get_scheduling_config
from .entries import DefaultEntry, ResolvedTimeSlot
from .store import BookingStore, ScheduleStore
from .tiers import ScheduleTier, default_tiers
from .weekdays import Weekday

logger = logging.getLogger(__name__)


class AvailabilityResolver:

    def __init__(
        self,
        schedule_store: ScheduleStore,
        booking_store: BookingStore,
        config: SchedulingConfig | None = None,
        tiers: list[ScheduleTier] | None = None,
    ):
        self.schedule_store = schedule_store
        self.booking_store = booking_store
        self.config = config or get_scheduling_config()
        self.tiers = tiers if tiers is not None else default_tiers(schedule_store)

    def resolve(
        self,
        location: str,
        day: Weekday,
        target_date: date | None = None,
        section_id: int | None = None,
    ) -> list[ResolvedTimeSlot]:
        """
        Bookable slots for location/day, sorted by time.

        Returns:
            Empty list when no tier has entries: the caller should offer
            ad-hoc time entry instead.
        """
        slots: list[ResolvedTimeSlot] = []
        for tier in self.tiers:
            entries = tier.entries(location, day, target_date, section_id)
            if entries:
                slots = [ResolvedTimeSlot.from_entry(e, tier.source) for e in entries]
                logger.debug(
                    "%d slots for %s/%s from %s tier",
                    len(slots), location, day.name, tier.source.value,
                )
                break

        if not slots:
            return []

        if target_date is not None:
            booked = self._booked_times(location, section_id, target_date, slots)
            for slot in slots:
                slot.is_available = slot.time not in booked

        slots.sort(key=lambda s: s.time)
        return slots

    def count_default_slots(
        self,
        location: str,
        day: Weekday,
        section_id: int | None = None,
    ) -> int:
        """
        Number of weekly default slots, same tier priority as resolve()
        but without the built-in table and without bookings.
        """
        for tier in self.tiers:
            entries = tier.entries(location, day, None, section_id, fallback=False)
            count = sum(1 for e in entries if isinstance(e, DefaultEntry))
            if count:
                return count
        return 0

    def has_schedule(
        self,
        location: str,
        day: Weekday,
        section_id: int | None = None,
    ) -> bool:
        """True if any tier has entries for the day, overrides included."""
        return any(
            tier.day_entries(location, day, section_id) for tier in self.tiers
        )

    def _booked_times(
        self,
        location: str,
        section_id: int | None,
        target_date: date,
        slots: list[ResolvedTimeSlot],
    ) -> set[str]:
        unsectioned_only = (
            section_id is None and not self.config.legacy_location_scoping
        )
        return self.booking_store.find_booked_times(
            location,
            section_id,
            target_date,
            {slot.time for slot in slots},
            unsectioned_only=unsectioned_only,
        )


# ── Session-level helpers ────────────────────────────────────────────────


def build_resolver(db: Session, config: SchedulingConfig | None = None) -> AvailabilityResolver:
    return AvailabilityResolver(ScheduleStore(db), BookingStore(db), config)


def resolve_time_slots(
    db: Session,
    location: str,
    day: Weekday,
    target_date: date | None = None,
    section_id: int | None = None,
    config: SchedulingConfig | None = None,
) -> list[ResolvedTimeSlot]:
    return build_resolver(db, config).resolve(location, day, target_date, section_id)


def count_default_slots(
    db: Session,
    location: str,
    day: Weekday,
    section_id: int | None = None,
) -> int:
    return build_resolver(db).count_default_slots(location, day, section_id)
