"""
Health Check Endpoints

- /health/live  - Basic liveness (app is running)
- /health/ready - Readiness check (database reachable, tables created)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from datetime import datetime, timezone
from typing import Dict, Any
import time

from sqlalchemy import text

from teamflow.core.config import settings
from teamflow.core.database import get_session_local
from teamflow.core.logging_config import logger


router = APIRouter(prefix="/health", tags=["Health Checks"])


async def check_database() -> Dict[str, Any]:
    """Check database connectivity and that the templates table exists"""
    start = time.time()
    try:
        session_factory = get_session_local()
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
            await session.execute(text("SELECT COUNT(*) FROM templates"))

        return {
            "status": "healthy",
            "latency_ms": round((time.time() - start) * 1000, 2),
        }
    except Exception as e:
        logger.error(f"[HealthCheck] Database check failed: {e}")
        return {
            "status": "unhealthy",
            "latency_ms": round((time.time() - start) * 1000, 2),
            "error": str(e),
        }


@router.get("/live")
async def liveness():
    return {"status": "alive", "service": settings.APP_NAME}


@router.get("/ready")
async def readiness():
    database = await check_database()
    healthy = database["status"] == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if healthy else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {"database": database},
        },
    )
