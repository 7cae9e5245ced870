from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from jobboard.database import Database, get_database, mask_db_url
from jobboard.schemas.base import APIModel


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(APIModel):
    status: str
    timestamp: datetime


class DBHealthStatus(APIModel):
    orm: str
    db_url: str
    timestamp: datetime


@router.get("", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/db", response_model=DBHealthStatus, summary="DB connectivity check")
def db_health_check(database: Database = Depends(get_database)) -> DBHealthStatus:
    return DBHealthStatus(
        orm="ok" if database.ping() else "error",
        db_url=mask_db_url(database.url),
        timestamp=datetime.now(timezone.utc),
    )
