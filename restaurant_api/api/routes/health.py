"""Health & Readiness Checks — liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the table or menu store cannot be read
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from restaurant_api.api.dependencies import Restaurant
from restaurant_api.core.errors import RestaurantError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "restaurant-api",
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check(restaurant: Restaurant):
    """Readiness check — the table registry and menu catalog must be readable."""
    checks = {}
    for name, check in (
        ("tables", restaurant.get_all_tables),
        ("menus", restaurant.get_all_menus),
    ):
        try:
            check()
            checks[name] = "healthy"
        except RestaurantError as e:
            logger.error(
                f"Readiness check failed for {name}: {e.message}",
                extra=e.log_extra(),
            )
            checks[name] = "unavailable"
    if any(v != "healthy" for v in checks.values()):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
