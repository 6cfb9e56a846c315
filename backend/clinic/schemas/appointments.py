# backend/clinic/schemas/appointments.py

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AppointmentCreate(_CamelModel):
    location: str
    day: str
    date: date
    time: str
    patient_name: str
    test_type: str
    phone_number: str

    doctor_name: str = ""
    is_confirmed: bool = False
    is_default: bool = False
    notes: str = ""
    section_id: Optional[int] = None


class AppointmentRead(_CamelModel):
    id: int
    location: str
    day: str
    date: str
    time: str
    patient_name: str
    test_type: str
    phone_number: str
    doctor_name: str
    is_confirmed: bool
    is_default: bool
    notes: str
    section_id: Optional[int] = None
    created_at: Optional[str] = None


class AppointmentCreated(_CamelModel):
    data: AppointmentRead
    default_slot_count: int
    appointment_count: int
    color: str


class DayColor(_CamelModel):
    date: date
    color: Optional[str] = None


class DayColorsResponse(_CamelModel):
    location: str
    days: list[DayColor]
