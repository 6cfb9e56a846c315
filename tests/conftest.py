"""Shared test fixtures."""
import os

# in-memory database for anything importing clinic.database
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.pop("REDIS_URL", None)

import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clinic.models import Base
from clinic.models.generated import (
    Appointments,
    LocationSchedules,
    SectionSchedules,
    Sections,
)
from clinic.services.slots import WeeklySchedule, Weekday
from clinic.services.slots.entries import make_entry


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def redis_mock():
    return MagicMock()


@pytest.fixture
def client(engine, redis_mock):
    """FastAPI test client bound to the in-memory database."""
    from fastapi.testclient import TestClient
    from clinic.database import get_db
    from clinic.main import app
    from clinic.redis_client import get_redis

    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = lambda: redis_mock
    yield TestClient(app)
    app.dependency_overrides.clear()


def schedule_json(days: dict[Weekday, list[tuple[str, str | None]]]) -> str:
    """Build a stored schedule document from (time, date) pairs."""
    schedule = WeeklySchedule()
    for day, pairs in days.items():
        schedule.set_day(day, [make_entry(t, d) for t, d in pairs])
    return schedule.to_json()


@pytest.fixture
def make_section(db):
    def _create(name: str, is_active: int = 1) -> Sections:
        section = Sections(name=name, is_active=is_active)
        db.add(section)
        db.commit()
        db.refresh(section)
        return section
    return _create


@pytest.fixture
def make_section_schedule(db):
    def _create(section_id: int, location: str, days: dict) -> SectionSchedules:
        row = SectionSchedules(
            section_id=section_id,
            location=location,
            schedule=schedule_json(days),
        )
        db.add(row)
        db.commit()
        return row
    return _create


@pytest.fixture
def make_location_schedule(db):
    def _create(location: str, days: dict) -> LocationSchedules:
        row = LocationSchedules(location=location, schedule=schedule_json(days))
        db.add(row)
        db.commit()
        return row
    return _create


@pytest.fixture
def make_appointment(db):
    def _create(location: str, date: str, time: str, section_id: int | None = None) -> Appointments:
        row = Appointments(
            location=location,
            date=date,
            day="Luni",
            time=time,
            patient_name="Ion Popescu",
            test_type="Ecografie",
            phone_number="0740000000",
            section_id=section_id,
        )
        db.add(row)
        db.commit()
        return row
    return _create
