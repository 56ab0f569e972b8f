"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the goal store cannot be read (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from life_planner.api.dependencies import get_goal_store
from life_planner.infrastructure.memory_store import InMemoryGoalStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "life-planner-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: InMemoryGoalStore = Depends(get_goal_store)):
    """Readiness probe — includes a goal store read."""
    try:
        await store.list_available_years()
    except Exception as e:
        logger.error(f"Readiness check failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "goal_store_unavailable"},
        )
    return {"status": "ready", "checks": {"goal_store": "healthy"}}
