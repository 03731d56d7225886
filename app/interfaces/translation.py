"""
Failure translation for route handlers.

Routes return an ApiResponse; this decorator is the single layer that
turns domain failures and unexpected exceptions into error envelopes.
"""

import functools
import logging
from typing import Callable

from starlette.responses import Response

from app.domain.taskboard.errors import TaskboardError
from app.shared.responses import ApiResponse, failure, server_error

logger = logging.getLogger(__name__)


def translate_failures(failure_message: str) -> Callable:
    """Wrap a route so every outcome leaves as an envelope.

    Args:
        failure_message: Generic message sent when the route fails unexpectedly.
    """

    def decorator(func: Callable[..., ApiResponse]) -> Callable[..., Response]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Response:
            try:
                result = func(*args, **kwargs)
            except TaskboardError as exc:
                logger.info("%s: %s", func.__name__, exc.message)
                return failure(exc.kind, exc.message).to_response()
            except Exception:
                logger.exception("%s failed", func.__name__)
                return server_error(failure_message).to_response()
            return result.to_response()

        return wrapper

    return decorator
