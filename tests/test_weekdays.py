"""Test weekday parsing and locale labels."""
from datetime import date

import pytest

from clinic.services.slots import DayLocale, Weekday


@pytest.mark.parametrize("name,expected", [
    ("Luni", Weekday.MONDAY),
    ("Marți", Weekday.TUESDAY),
    ("Marti", Weekday.TUESDAY),
    ("Marţi", Weekday.TUESDAY),
    ("miercuri", Weekday.WEDNESDAY),
    ("Sâmbătă", Weekday.SATURDAY),
    ("Sambata", Weekday.SATURDAY),
    ("Duminica", Weekday.SUNDAY),
    ("Duminică", Weekday.SUNDAY),
    ("Monday", Weekday.MONDAY),
    ("  FRIDAY ", Weekday.FRIDAY),
])
def test_parse_accepts_both_locales(name, expected):
    assert Weekday.parse(name) is expected


@pytest.mark.parametrize("name", ["", "Lundi", "Mon", None])
def test_parse_rejects_unknown(name):
    with pytest.raises(ValueError):
        Weekday.parse(name)


def test_labels():
    assert Weekday.TUESDAY.label() == "Marți"
    assert Weekday.SUNDAY.label(DayLocale.ROMANIAN) == "Duminica"
    assert Weekday.SUNDAY.label(DayLocale.ENGLISH) == "Sunday"


def test_from_date():
    # 2025-03-10 is a Monday
    assert Weekday.from_date(date(2025, 3, 10)) is Weekday.MONDAY
    assert Weekday.from_date(date(2025, 3, 16)) is Weekday.SUNDAY
