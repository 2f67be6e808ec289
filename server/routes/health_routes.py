# server/routes/health_routes.py
"""
Health Check Endpoint

GET /health - service status and database connectivity
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.config import APP_TITLE, APP_VERSION
from core.logger import get_logger
from dependencies import get_session_factory
from utils.datetime_utils import to_iso_string

logger = get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(session_factory: async_sessionmaker = Depends(get_session_factory)):
    """
    Returns 200 when the database answers, 503 otherwise.
    """
    database = "healthy"
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        database = "unhealthy"

    status_code = 200 if database == "healthy" else 503
    return JSONResponse(
        status_code=status_code,
        content={
            "status": database,
            "service": APP_TITLE,
            "version": APP_VERSION,
            "components": {"database": database},
            "timestamp": to_iso_string(datetime.now(timezone.utc))
        }
    )
