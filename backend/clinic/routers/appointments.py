# backend/clinic/routers/appointments.py
# Booking-write path: create + list. Capacity colour is refreshed on create.

from datetime import date, timedelta
from fastapi import APIRouter, Depends, HTTPException, Query, status
from redis import Redis
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.generated import Appointments as DBAppointments
from ..redis_client import get_redis
from ..schemas.appointments import (
    AppointmentCreate,
    AppointmentCreated,
    AppointmentRead,
    DayColor,
    DayColorsResponse,
)
from ..services.capacity import DayColorStore, refresh_day_color
from ..services.slots import resolve_section_id
from ..services.slots.config import normalize_time
from ..services.slots.store import calendar_day
from .errors import parse_day

router = APIRouter(prefix="/appointments", tags=["appointments"])

MAX_COLOR_RANGE_DAYS = 62


@router.get("/", response_model=list[AppointmentRead])
def list_appointments(
    location: str | None = None,
    target_date: date | None = Query(None, alias="date"),
    section_id: int | None = Query(None, alias="sectionId"),
    test_type: str | None = Query(None, alias="testType"),
    db: Session = Depends(get_db),
):
    query = db.query(DBAppointments)
    if location:
        query = query.filter(DBAppointments.location == location)
    if target_date:
        query = query.filter(calendar_day(DBAppointments.date) == target_date.isoformat())
    if section_id is not None:
        query = query.filter(DBAppointments.section_id == section_id)
    if test_type:
        query = query.filter(DBAppointments.test_type == test_type)
    return query.order_by(DBAppointments.date, DBAppointments.time).all()


@router.post("/", response_model=AppointmentCreated, status_code=status.HTTP_201_CREATED)
def create_appointment(
    data: AppointmentCreate,
    db: Session = Depends(get_db),
    redis: Redis | None = Depends(get_redis),
):
    weekday = parse_day(data.day)
    try:
        time = normalize_time(data.time)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    section_id = resolve_section_id(db, data.section_id, data.test_type)

    obj = DBAppointments(
        **data.model_dump(exclude={"date", "time", "section_id", "is_confirmed", "is_default"}),
        date=data.date.isoformat(),
        time=time,
        section_id=section_id,
        is_confirmed=int(data.is_confirmed),
        is_default=int(data.is_default),
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)

    capacity = refresh_day_color(db, redis, data.location, weekday, data.date, section_id)

    return AppointmentCreated(
        data=AppointmentRead.model_validate(obj),
        **capacity,
    )


@router.get("/colors", response_model=DayColorsResponse)
def get_day_colors(
    location: str,
    start_date: date = Query(..., alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    redis: Redis | None = Depends(get_redis),
):
    """Stored capacity colours for a date range (null = not computed)."""
    end_date = end_date or start_date
    if end_date < start_date:
        raise HTTPException(status_code=400, detail="endDate is before startDate")
    if (end_date - start_date).days > MAX_COLOR_RANGE_DAYS:
        raise HTTPException(
            status_code=400,
            detail=f"Range cannot exceed {MAX_COLOR_RANGE_DAYS} days",
        )

    dates = [start_date + timedelta(days=i) for i in range((end_date - start_date).days + 1)]
    colors = DayColorStore(redis).get_colors(location, dates) if redis is not None else {}

    return DayColorsResponse(
        location=location,
        days=[DayColor(date=dt, color=colors.get(dt)) for dt in dates],
    )
