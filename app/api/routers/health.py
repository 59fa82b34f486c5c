"""
Health check endpoints for monitoring and orchestration.

- /health: liveness (always 200 while the process is up)
- /health/db: database connectivity (503 when the database is unreachable)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db_session
from app.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "hirings-api"


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "storage": "in_memory" if settings.use_in_memory else "sql",
    }


@router.get("/health/db")
async def health_check_db(session: AsyncSession = Depends(get_db_session)):
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Database health check failed", exc_info=exc)
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "component": "database",
                "error": "Database connection failed",
            },
        )
    return {"status": "healthy", "component": "database"}
