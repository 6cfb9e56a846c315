# backend/clinic/services/slots/generator.py
"""
Time range expansion used when an administrator authors a block of slots.
Plays no part in resolving availability.
"""

from .config import minutes_to_time_str, time_str_to_minutes


def generate_range(start_time: str, end_time: str, interval_minutes: int) -> list[str]:
    """
    Expand [start_time, end_time] into "HH:MM" steps.

    The end boundary is included when it falls on a step. No wraparound:
    start_time later than end_time gives an empty list.

    Raises:
        ValueError: malformed time or non-positive interval
    """
    if interval_minutes <= 0:
        raise ValueError(f"interval_minutes must be positive, got {interval_minutes}")

    start_min = time_str_to_minutes(start_time)
    end_min = time_str_to_minutes(end_time)

    return [
        minutes_to_time_str(t)
        for t in range(start_min, end_min + 1, interval_minutes)
    ]
