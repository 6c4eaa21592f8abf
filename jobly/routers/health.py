from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from jobly.db.queries import DatabaseConnectionError, DatabaseQueryError, query_one


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


class DBHealthStatus(BaseModel):
    database: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check() -> DBHealthStatus:
    db_status = "ok"
    try:
        query_one("SELECT 1 AS ok")
    except (DatabaseConnectionError, DatabaseQueryError):
        db_status = "error"
    return DBHealthStatus(database=db_status, timestamp=datetime.now(timezone.utc))
