"""
Health check and monitoring endpoints.

Provides detailed health status for the database and the task broker.
"""

import logging
from typing import Dict, Any
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from redis import Redis
from redis.exceptions import RedisError
from sqlalchemy.orm import Session
from sqlalchemy import text

from app.core.config import settings
from app.core.database import get_db

router = APIRouter(tags=["Health"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> Dict[str, str]:
    """
    Basic health check endpoint.

    Returns 200 OK if the service is running.
    Use this for simple uptime monitoring and load balancer health checks.
    """
    return {
        "status": "healthy",
        "timestamp": _now()
    }


@router.get("/health/detailed", status_code=status.HTTP_200_OK)
def detailed_health_check(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """
    Detailed health check with dependency status.

    Checks:
    - Database connectivity
    - Redis (Celery broker) connectivity

    A failing database marks the service unhealthy; a failing broker only
    degrades it, since reads and writes do not need the worker.
    """
    health_status = {
        "status": "healthy",
        "timestamp": _now(),
        "checks": {}
    }

    # Check database connectivity
    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database error: {str(e)}"
        }

    # Check the Celery broker
    try:
        Redis.from_url(settings.REDIS_URL, socket_connect_timeout=1, socket_timeout=1).ping()
        health_status["checks"]["broker"] = {
            "status": "healthy",
            "message": "Redis connection successful"
        }
    except RedisError as e:
        logger.warning(f"Broker health check failed: {e}")
        if health_status["status"] == "healthy":
            health_status["status"] = "degraded"
        health_status["checks"]["broker"] = {
            "status": "unhealthy",
            "message": f"Redis error: {str(e)}"
        }

    return health_status
