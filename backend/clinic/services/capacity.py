# backend/clinic/services/capacity.py
"""
Day capacity colour for the appointment calendar.

A day turns "red" once its appointments reach the number of weekly default
slots (same tier priority as slot resolution), "blue" otherwise.
Colours are kept in Redis: hash colors:day:{location}, field = YYYY-MM-DD.
"""

import logging
from datetime import date

from redis import Redis
from redis.exceptions import RedisError
from sqlalchemy import func
from sqlalchemy.orm import Session

from ..models.generated import Appointments
from .slots import Weekday, count_default_slots
from .slots.store import calendar_day

logger = logging.getLogger(__name__)

RED = "red"
BLUE = "blue"


def day_color(default_count: int, appointment_count: int) -> str:
    return RED if appointment_count >= default_count else BLUE


def count_appointments(db: Session, location: str, target_date: date) -> int:
    """All appointments at location on target_date, any section."""
    return (
        db.query(func.count(Appointments.id))
        .filter(
            Appointments.location == location,
            calendar_day(Appointments.date) == target_date.isoformat(),
        )
        .scalar()
    ) or 0


class DayColorStore:
    """Redis storage for per-day colours."""

    KEY_PREFIX = "colors:day"

    def __init__(self, redis: Redis):
        self.redis = redis

    def _key(self, location: str) -> str:
        return f"{self.KEY_PREFIX}:{location}"

    def set_color(self, location: str, dt: date, color: str) -> None:
        self.redis.hset(self._key(location), dt.isoformat(), color)

    def get_colors(self, location: str, dates: list[date]) -> dict[date, str | None]:
        if not dates:
            return {}
        values = self.redis.hmget(self._key(location), [d.isoformat() for d in dates])
        return {
            dt: (v.decode() if isinstance(v, bytes) else v)
            for dt, v in zip(dates, values)
        }


def refresh_day_color(
    db: Session,
    redis: Redis | None,
    location: str,
    day: Weekday,
    target_date: date,
    section_id: int | None = None,
) -> dict:
    """
    Recompute the colour of one day and store it when Redis is configured.

    Returns:
        Dict with default_slot_count, appointment_count and color.
    """
    default_count = count_default_slots(db, location, day, section_id)
    appointment_count = count_appointments(db, location, target_date)
    color = day_color(default_count, appointment_count)

    if redis is not None:
        try:
            DayColorStore(redis).set_color(location, target_date, color)
        except RedisError:
            logger.exception("Failed to store day colour for %s %s", location, target_date)

    return {
        "default_slot_count": default_count,
        "appointment_count": appointment_count,
        "color": color,
    }
