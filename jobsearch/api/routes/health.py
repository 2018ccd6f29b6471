from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text

from jobsearch.config import build_sqlalchemy_db_url, settings
from jobsearch.database import engine
from jobsearch.db.postgres import DatabaseError, mask_db_url, translate_db_errors


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class DBHealthStatus(BaseModel):
    database: str
    dialect: str
    db_url: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check() -> DBHealthStatus:
    db_status = "ok"
    try:
        with translate_db_errors("health_check"), engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except DatabaseError:
        db_status = "error"

    return DBHealthStatus(
        database=db_status,
        dialect=engine.dialect.name,
        db_url=mask_db_url(build_sqlalchemy_db_url(settings)),
        timestamp=datetime.now(timezone.utc),
    )
