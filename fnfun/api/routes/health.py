"""Health Probe — liveness endpoint.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up
"""

from fastapi import APIRouter, status

from fnfun.version import __version__

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "fnfun-api",
        "version": __version__,
    }
