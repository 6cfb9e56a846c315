# backend/clinic/schemas/schedules.py

import datetime
import json
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimeSlotSpec(_CamelModel):
    """Stored entry; date None means the weekly default."""
    time: str
    date: Optional[datetime.date] = None

    @field_validator("date", mode="before")
    @classmethod
    def _sentinel_is_default(cls, value):
        if value == "00:00:00" or value == "":
            return None
        return value


class LocationSlotCreate(_CamelModel):
    location: str
    day: str
    time_slot: TimeSlotSpec


class LocationSlotDelete(LocationSlotCreate):
    pass


class SectionScheduleCreate(_CamelModel):
    """
    Add one slot (time_slot) or a range (start_time..end_time) to a
    section schedule. With neither, only makes sure the schedule exists.
    """
    section_id: int
    location: str
    day: Optional[str] = None
    time_slot: Optional[TimeSlotSpec] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    date: Optional[datetime.date] = None
    slot_interval: Optional[int] = Field(default=None, ge=5, le=60)


class SectionSlotDelete(_CamelModel):
    section_id: int
    location: str
    day: str
    time_slot: TimeSlotSpec


class SectionScheduleUpdate(_CamelModel):
    slot_interval: int = Field(ge=5, le=60)


class SectionScheduleRead(_CamelModel):
    id: int
    section_id: int
    location: str
    schedule: dict[str, list[dict]]
    slot_interval: int
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("schedule", mode="before")
    @classmethod
    def _decode(cls, value):
        if isinstance(value, str):
            return json.loads(value) if value else {}
        return value


class LocationScheduleRead(_CamelModel):
    id: int
    location: str
    schedule: dict[str, list[dict]]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("schedule", mode="before")
    @classmethod
    def _decode(cls, value):
        if isinstance(value, str):
            return json.loads(value) if value else {}
        return value


class SlotRangeResult(_CamelModel):
    schedule: SectionScheduleRead
    added: list[str] = []
