"""Test time range expansion."""
import pytest

from clinic.services.slots import generate_range
from clinic.services.slots.config import (
    SchedulingConfig,
    minutes_to_time_str,
    normalize_time,
    time_str_to_minutes,
)


class TestGenerateRange:

    def test_end_boundary_is_included(self):
        assert generate_range("09:00", "09:30", 15) == ["09:00", "09:15", "09:30"]

    def test_start_after_end_is_empty(self):
        assert generate_range("09:00", "08:30", 15) == []

    def test_end_off_step_is_not_included(self):
        assert generate_range("09:00", "09:40", 15) == ["09:00", "09:15", "09:30"]

    def test_single_point(self):
        assert generate_range("12:00", "12:00", 30) == ["12:00"]

    def test_output_is_zero_padded(self):
        assert generate_range("8:05", "8:25", 10) == ["08:05", "08:15", "08:25"]

    def test_runs_to_end_of_day(self):
        result = generate_range("23:00", "23:59", 30)
        assert result == ["23:00", "23:30"]

    @pytest.mark.parametrize("interval", [0, -15])
    def test_non_positive_interval_rejected(self, interval):
        with pytest.raises(ValueError):
            generate_range("09:00", "10:00", interval)

    @pytest.mark.parametrize("bad", ["9", "09:60", "24:00", "ab:cd", "09-00", ""])
    def test_malformed_time_rejected(self, bad):
        with pytest.raises(ValueError):
            generate_range(bad, "10:00", 15)


class TestTimeHelpers:

    def test_minutes_round_trip_values(self):
        assert time_str_to_minutes("00:00") == 0
        assert time_str_to_minutes("13:45") == 825
        assert minutes_to_time_str(825) == "13:45"
        assert minutes_to_time_str(5) == "00:05"

    def test_normalize_pads_hour(self):
        assert normalize_time(" 9:15 ") == "09:15"


class TestSchedulingConfig:

    def test_defaults(self):
        config = SchedulingConfig()
        assert config.slot_interval_minutes == 15
        assert config.legacy_location_scoping is True

    @pytest.mark.parametrize("interval", [4, 61])
    def test_interval_out_of_range(self, interval):
        with pytest.raises(ValueError):
            SchedulingConfig(slot_interval_minutes=interval)
