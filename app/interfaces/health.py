"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter
from starlette.responses import Response

from app.core.config import settings
from app.interfaces.schemas import SuccessEnvelope
from app.shared.responses import success

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=None,
    responses={200: {"model": SuccessEnvelope}},
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> Response:
    """Return current application health status."""
    return success(
        {"status": "ok", "version": settings.version}, "Service is healthy"
    ).to_response()
