import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import text

from .config import settings
from .database import SessionLocal, engine
from .models import Base
from .redis_client import redis_client
from .routers import appointments, schedule, section_schedules

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Clinic API started")
    yield


app = FastAPI(title="Clinic Scheduling API", lifespan=lifespan)

app.include_router(schedule.router)
app.include_router(section_schedules.router)
app.include_router(appointments.router)


@app.get("/health")
def health():
    db = SessionLocal()
    try:
        db_ok = db.execute(text("SELECT 1")).scalar() == 1
    finally:
        db.close()
    return {
        "database": db_ok,
        "redis": redis_client.ping() if redis_client is not None else None,
    }


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "clinic.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
