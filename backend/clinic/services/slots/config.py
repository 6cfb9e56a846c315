# backend/clinic/services/slots/config.py
"""
Scheduling configuration and "HH:MM" helpers.
"""

from dataclasses import dataclass
from functools import lru_cache

from ...config import settings


MIN_SLOT_INTERVAL = 5
MAX_SLOT_INTERVAL = 60


@dataclass(frozen=True)
class SchedulingConfig:
    """
    Configuration for slot resolution and authoring.

    Attributes:
        slot_interval_minutes: Default step when expanding a time range
            into slots (5..60). Only used when authoring schedules.
        legacy_location_scoping: When a request carries no section, booking
            conflicts are checked for the whole location. Two sections at
            the same location then block each other's times. Disable to
            only count appointments that have no section either.
    """
    slot_interval_minutes: int = 15
    legacy_location_scoping: bool = True

    def __post_init__(self):
        """Validate configuration."""
        validate_slot_interval(self.slot_interval_minutes)


def validate_slot_interval(interval: int) -> int:
    if not MIN_SLOT_INTERVAL <= interval <= MAX_SLOT_INTERVAL:
        raise ValueError(
            f"slot interval must be between {MIN_SLOT_INTERVAL} and "
            f"{MAX_SLOT_INTERVAL} minutes, got {interval}"
        )
    return interval


@lru_cache
def get_scheduling_config() -> SchedulingConfig:
    """Get scheduling configuration (singleton), built from settings."""
    return SchedulingConfig(
        slot_interval_minutes=settings.default_slot_interval,
        legacy_location_scoping=settings.legacy_location_scoping,
    )


def time_str_to_minutes(time_str: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    parts = time_str.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid time {time_str!r}, expected HH:MM")
    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid time {time_str!r}, expected HH:MM")
    return hour * 60 + minute


def minutes_to_time_str(minutes: int) -> str:
    """Convert minutes since midnight to zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def normalize_time(time_str: str) -> str:
    """Validate and zero-pad a "H:MM" / "HH:MM" string."""
    return minutes_to_time_str(time_str_to_minutes(time_str))
