"""
Response envelope formatting.

Every endpoint answers through these helpers so that all success bodies
share one shape and all error bodies share another:

    success:   {"success": true,  "message": ..., "data"?: ...}
    paginated: {"success": true,  "message": ..., "data": [...], "pagination": {...}}
    error:     {"success": false, "message": ..., "error": ..., "errors"?: {...}}

The helpers are pure: they build an ApiResponse value and never raise.
Rendering to a Starlette response happens in ApiResponse.to_response().
`message` and `error` carry the same text on purpose; clients read either.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Sequence, Union

from starlette.responses import JSONResponse, Response

from app.domain.taskboard.errors import FailureKind
from app.shared.http_status import HttpStatus

HTTP_405 = 405

FieldErrors = Mapping[str, Union[str, Sequence[str]]]


class PaginatedResult(Protocol):
    """Anything that can describe one page of a larger collection."""

    current_page: int
    per_page: int
    items: Sequence[Any]
    total: int
    last_page: int
    has_more_pages: bool


@dataclass(frozen=True)
class ApiResponse:
    """A formatted response: the status code plus the envelope body.

    Attributes:
        status_code: HTTP status to send.
        body: The envelope, or None for an empty body.
    """

    status_code: int
    body: Optional[dict[str, Any]]

    def to_response(self) -> Response:
        """Render as a Starlette response."""
        if self.body is None:
            return Response(status_code=self.status_code)
        return JSONResponse(status_code=self.status_code, content=self.body)


def success(
    data: Any = None,
    message: str = "Success",
    status_code: int = HttpStatus.OK,
) -> ApiResponse:
    """Build a success envelope. `data` is omitted when None."""
    body: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        body["data"] = data
    return ApiResponse(status_code=int(status_code), body=body)


def created(data: Any, message: str = "Resource created successfully") -> ApiResponse:
    return success(data, message, HttpStatus.CREATED)


def error(
    message: str,
    status_code: int = HttpStatus.BAD_REQUEST,
    errors: Optional[FieldErrors] = None,
) -> ApiResponse:
    """Build an error envelope.

    Args:
        message: Client-facing description, copied to both `message` and `error`.
        status_code: HTTP status to send.
        errors: Optional per-field messages, included only when given. A
            bare string value becomes a one-element list.
    """
    body: dict[str, Any] = {"success": False, "message": message, "error": message}
    if errors is not None:
        body["errors"] = {
            field: [messages] if isinstance(messages, str) else list(messages)
            for field, messages in errors.items()
        }
    return ApiResponse(status_code=int(status_code), body=body)


def not_found(message: str = "Resource not found") -> ApiResponse:
    return error(message, HttpStatus.NOT_FOUND)


def validation_error(
    message: str = "Validation failed",
    errors: Optional[FieldErrors] = None,
) -> ApiResponse:
    return error(message, HttpStatus.BAD_REQUEST, errors)


def unauthorized(message: str = "Unauthorized") -> ApiResponse:
    return error(message, HttpStatus.UNAUTHORIZED)


def forbidden(message: str = "Forbidden") -> ApiResponse:
    return error(message, HttpStatus.FORBIDDEN)


def conflict(message: str = "Conflict") -> ApiResponse:
    return error(message, HttpStatus.CONFLICT)


def server_error(message: str = "Internal server error") -> ApiResponse:
    return error(message, HttpStatus.INTERNAL_SERVER_ERROR)


def paginated(
    page: PaginatedResult,
    message: str = "Success",
    status_code: int = HttpStatus.OK,
) -> ApiResponse:
    """Build a paginated success envelope.

    The pagination block is copied from `page` as-is, nothing is recomputed.
    `data` is always present, an empty list for an empty page.
    """
    body = {
        "success": True,
        "message": message,
        "data": list(page.items),
        "pagination": {
            "page": page.current_page,
            "limit": page.per_page,
            "total": page.total,
            "totalPages": page.last_page,
            "hasMore": page.has_more_pages,
        },
    }
    return ApiResponse(status_code=int(status_code), body=body)


def no_content() -> ApiResponse:
    return ApiResponse(status_code=int(HttpStatus.NO_CONTENT), body=None)


def failure(kind: FailureKind, message: str) -> ApiResponse:
    """Map a domain failure kind to the matching error response.

    Internal failures never echo `message`; the generic text is sent instead.
    """
    if kind is FailureKind.INVALID_INPUT:
        return validation_error(message)
    if kind is FailureKind.NOT_FOUND:
        return not_found(message)
    if kind is FailureKind.CONFLICT:
        return conflict(message)
    if kind is FailureKind.METHOD_NOT_ALLOWED:
        return error(message, HTTP_405)
    return server_error()
