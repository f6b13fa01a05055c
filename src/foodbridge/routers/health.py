from datetime import datetime, timezone

import redis
from fastapi import APIRouter, Depends, HTTPException

from foodbridge.config import config
from foodbridge.models.database import get_redis

health = APIRouter()


@health.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "foodbridge",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config["environment"],
    }


@health.get("/health/detailed")
async def detailed_health_check(redis_client: redis.Redis = Depends(get_redis)):
    """Detailed health check including the record store backend"""
    health_status = {
        "status": "healthy",
        "service": "foodbridge",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": config["environment"],
        "checks": {},
    }

    try:
        redis_client.ping()
        health_status["checks"]["redis"] = "healthy"
    except redis.RedisError as e:
        health_status["checks"]["redis"] = f"unhealthy: {str(e)}"
        health_status["status"] = "unhealthy"

    if health_status["status"] == "unhealthy":
        raise HTTPException(status_code=503, detail=health_status)

    return health_status
