"""
Health check endpoint.

- GET /health: application status plus database reachability
"""

from datetime import datetime, timezone
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.db import get_db
from app.core.error_handlers import error_handler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """Report whether the service and its database are usable."""
    settings = get_settings()
    database = {"status": "ok"}
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check database probe failed: {type(e).__name__}")
        database = {"status": "unavailable", "error": type(e).__name__}

    healthy = database["status"] == "ok"
    body = {
        "status": "ok" if healthy else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": settings.app_version,
        "environment": settings.environment.value,
        "database": database,
        "errors": error_handler.get_error_statistics()["error_counts"],
    }
    return JSONResponse(status_code=200 if healthy else 503, content=body)
