"""
Centralized error handlers for FastAPI.

Maps framework and domain errors to response envelopes.
No stack traces or internal details are exposed to clients.
Every failure leaves the API as a `success: false` envelope.
"""

import logging
from collections import defaultdict
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.domain.taskboard.errors import TaskboardError
from app.shared.http_status import reason_phrase
from app.shared.responses import error, failure, server_error, validation_error

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_name(loc: Iterable[Any]) -> str:
    """Turn a pydantic error location into a dotted field name."""
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "request"


def collect_field_errors(raw_errors: Iterable[dict[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic validation errors by field name, keeping their order."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for item in raw_errors:
        grouped[_field_name(item.get("loc", ()))].append(str(item.get("msg", "Invalid value")))
    return dict(grouped)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle malformed body, query or path parameters."""
        field_errors = collect_field_errors(exc.errors())
        logger.warning("Request validation failed: fields=%s", sorted(field_errors))
        return validation_error(errors=field_errors).to_response()

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Handle routing errors such as unknown paths or unsupported methods."""
        message = exc.detail if isinstance(exc.detail, str) and exc.detail else reason_phrase(exc.status_code)
        response = error(message, exc.status_code).to_response()
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(TaskboardError)
    async def handle_taskboard_error(
        _request: Request, exc: TaskboardError
    ) -> Response:
        """Catch-all for domain errors not translated by a route."""
        logger.warning("Unhandled taskboard error: kind=%s", exc.kind.value)
        return failure(exc.kind, exc.message).to_response()

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return server_error().to_response()
