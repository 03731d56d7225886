"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against denial-of-service and resource abuse.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import Response

from app.core.config import settings
from app.shared.responses import error

HTTP_429 = 429


def build_limiter(default_limit: str, enabled: bool = True) -> Limiter:
    """Create a limiter applying `default_limit` to every route, per client IP."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


limiter = build_limiter(settings.rate_limit_default, settings.rate_limit_enabled)



def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> Response:
    """Handle rate limit exceeded errors with an error envelope.

    Kept synchronous: SlowAPIMiddleware calls it without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 error envelope.
    """
    return error("Rate limit exceeded", HTTP_429).to_response()
