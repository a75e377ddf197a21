import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hr_admin.api.deps import get_db
from hr_admin.core.config import get_settings
from hr_admin.schemas.health import DatabaseState, HealthResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_db),
) -> HealthResponse:
    settings = get_settings()
    db_status: DatabaseState
    try:
        await db.execute(text("SELECT 1"))
        db_status = "connected"
    except (SQLAlchemyError, OSError):
        logger.exception("Database health check failed")
        db_status = "disconnected"

    return HealthResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        database=db_status,
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse()
