"""Test the SQLAlchemy-backed stores and the session-level helpers."""
from datetime import date

import pytest

from clinic.services.slots import (
    BookingStore,
    DefaultEntry,
    OverrideEntry,
    ScheduleStore,
    SchedulingConfig,
    SlotSource,
    Weekday,
    count_default_slots,
    resolve_section_id,
    resolve_time_slots,
)

MONDAY = Weekday.MONDAY
MARCH_10 = date(2025, 3, 10)
CANDIDATES = {"09:00", "09:15", "09:30"}


@pytest.fixture
def ecografie(make_section):
    return make_section("Ecografie")


@pytest.fixture
def chirurgie(make_section):
    return make_section("Chirurgie pediatrică")


class TestScheduleStore:

    def test_find_section_schedule(self, db, ecografie, make_section_schedule):
        make_section_schedule(ecografie.id, "Oradea", {
            MONDAY: [("09:00", None), ("09:15", "2025-03-10")],
        })

        record = ScheduleStore(db).find_section_schedule(ecografie.id, "Oradea")

        assert record.section_id == ecografie.id
        assert record.slot_interval == 15
        assert record.schedule.day(MONDAY) == [
            DefaultEntry("09:00"), OverrideEntry("09:15", "2025-03-10"),
        ]

    def test_section_schedule_is_per_location(self, db, ecografie, make_section_schedule):
        make_section_schedule(ecografie.id, "Oradea", {MONDAY: [("09:00", None)]})

        assert ScheduleStore(db).find_section_schedule(ecografie.id, "Beiuș") is None

    def test_find_location_schedule(self, db, make_location_schedule):
        make_location_schedule("Oradea", {MONDAY: [("08:00", None)]})

        store = ScheduleStore(db)

        assert store.find_location_schedule("Oradea").schedule.day(MONDAY) == [DefaultEntry("08:00")]
        assert store.find_location_schedule("Beiuș") is None


class TestBookingStore:

    def test_booked_times_scoped_to_section(self, db, ecografie, chirurgie, make_appointment):
        make_appointment("Oradea", "2025-03-10", "09:15", ecografie.id)
        make_appointment("Oradea", "2025-03-10", "09:30", chirurgie.id)

        booked = BookingStore(db).find_booked_times("Oradea", ecografie.id, MARCH_10, CANDIDATES)

        assert booked == {"09:15"}

    def test_location_wide_without_section(self, db, ecografie, chirurgie, make_appointment):
        make_appointment("Oradea", "2025-03-10", "09:15", ecografie.id)
        make_appointment("Oradea", "2025-03-10", "09:30", chirurgie.id)
        make_appointment("Oradea", "2025-03-10", "09:00")

        store = BookingStore(db)

        assert store.find_booked_times("Oradea", None, MARCH_10, CANDIDATES) == CANDIDATES
        assert store.find_booked_times(
            "Oradea", None, MARCH_10, CANDIDATES, unsectioned_only=True
        ) == {"09:00"}

    def test_whole_calendar_day_matches(self, db, ecografie, make_appointment):
        # stored with a time component late in the day
        make_appointment("Oradea", "2025-03-10T23:30:00", "09:00", ecografie.id)
        make_appointment("Oradea", "2025-03-11T00:00:00", "09:15", ecografie.id)

        booked = BookingStore(db).find_booked_times("Oradea", ecografie.id, MARCH_10, CANDIDATES)

        assert booked == {"09:00"}

    def test_offset_datetime_matches_local_day(self, db, ecografie, make_appointment):
        # UTC would be 2025-03-09 22:30 and 2025-03-10 01:30
        make_appointment("Oradea", "2025-03-10T00:30:00+02:00", "09:00", ecografie.id)
        make_appointment("Oradea", "2025-03-09T23:30:00-02:00", "09:15", ecografie.id)

        booked = BookingStore(db).find_booked_times("Oradea", ecografie.id, MARCH_10, CANDIDATES)

        assert booked == {"09:00"}

    def test_only_candidate_times_returned(self, db, ecografie, make_appointment):
        make_appointment("Oradea", "2025-03-10", "14:00", ecografie.id)

        store = BookingStore(db)

        assert store.find_booked_times("Oradea", ecografie.id, MARCH_10, CANDIDATES) == set()
        assert store.find_booked_times("Oradea", ecografie.id, MARCH_10, set()) == set()

    def test_other_location_ignored(self, db, ecografie, make_appointment):
        make_appointment("Beiuș", "2025-03-10", "09:00", ecografie.id)

        assert BookingStore(db).find_booked_times("Oradea", ecografie.id, MARCH_10, CANDIDATES) == set()


class TestResolveTimeSlots:

    def test_end_to_end_with_bookings(
        self, db, ecografie, chirurgie, make_section_schedule, make_location_schedule, make_appointment,
    ):
        make_section_schedule(ecografie.id, "Oradea", {
            MONDAY: [("09:30", None), ("09:00", None), ("09:15", "2025-03-10")],
        })
        make_location_schedule("Oradea", {MONDAY: [("08:00", None)]})
        make_appointment("Oradea", "2025-03-10", "09:15", ecografie.id)
        make_appointment("Oradea", "2025-03-10", "09:30", chirurgie.id)

        slots = resolve_time_slots(db, "Oradea", MONDAY, MARCH_10, ecografie.id)

        assert [(s.time, s.is_available, s.is_default) for s in slots] == [
            ("09:00", True, True),
            ("09:15", False, False),
            ("09:30", True, True),
        ]
        assert {s.source for s in slots} == {SlotSource.SECTION}

    def test_legacy_flag_from_config(self, db, ecografie, make_location_schedule, make_appointment):
        make_location_schedule("Oradea", {MONDAY: [("09:00", None)]})
        make_appointment("Oradea", "2025-03-10", "09:00", ecografie.id)

        legacy = resolve_time_slots(db, "Oradea", MONDAY, MARCH_10, config=SchedulingConfig())
        scoped = resolve_time_slots(
            db, "Oradea", MONDAY, MARCH_10,
            config=SchedulingConfig(legacy_location_scoping=False),
        )

        assert legacy[0].is_available is False
        assert scoped[0].is_available is True

    def test_count_default_slots(self, db, ecografie, make_section_schedule, make_location_schedule):
        make_section_schedule(ecografie.id, "Oradea", {
            MONDAY: [("09:00", None), ("09:15", "2025-03-10")],
        })
        make_location_schedule("Oradea", {MONDAY: [("08:00", None), ("08:15", None)]})

        assert count_default_slots(db, "Oradea", MONDAY, ecografie.id) == 1
        assert count_default_slots(db, "Oradea", MONDAY) == 2


class TestResolveSectionId:

    def test_explicit_id_wins(self, db, ecografie):
        assert resolve_section_id(db, 42, "Ecografie") == 42

    def test_test_type_name_lookup(self, db, ecografie):
        assert resolve_section_id(db, None, "Ecografie") == ecografie.id

    def test_unknown_or_inactive_name(self, db, make_section):
        make_section("Cardiologie", is_active=0)

        assert resolve_section_id(db, None, "Cardiologie") is None
        assert resolve_section_id(db, None, "Nope") is None
        assert resolve_section_id(db, None, None) is None
