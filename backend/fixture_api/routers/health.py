"""
Health check router for liveness and readiness checks.
"""
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorClient

from fixture_api.database.connections import get_mongo_client

router = APIRouter(tags=["Health"])


@router.get(
    "/is-alive",
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
)
async def is_alive():
    """
    Basic liveness endpoint.
    Returns 200 if the API is running.
    """
    return {"ok": True}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with database",
)
async def readiness_check(client: AsyncIOMotorClient = Depends(get_mongo_client)):
    """
    Readiness check that verifies the database connection.
    Reports degraded when MongoDB does not answer a ping.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        await client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
