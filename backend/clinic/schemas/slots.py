# backend/clinic/schemas/slots.py
"""
Pydantic schemas for slots API.

Field names go out in camelCase ({time, date, isAvailable, isDefault,
source}), the shape existing clients read.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..services.slots import SlotSource


class TimeSlotRead(BaseModel):
    """One resolved slot."""
    time: str  # "HH:MM"
    date: str  # "00:00:00" or "YYYY-MM-DD"
    is_available: bool
    is_default: bool
    source: SlotSource

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimeSlotsResponse(BaseModel):
    success: bool = True
    data: list[TimeSlotRead]


class DefaultSlotCountResponse(BaseModel):
    location: str
    day: str
    section_id: int | None = None
    count: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScheduleExistsResponse(BaseModel):
    exists: bool
