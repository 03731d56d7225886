"""
HTTP status catalog.

Named status codes used across the API instead of raw integers,
plus the canonical reason phrase for each of them.
The lookup table is immutable and built once at import time.
"""

from enum import IntEnum
from types import MappingProxyType

UNKNOWN_STATUS = "Unknown Status"


class HttpStatus(IntEnum):
    """Status codes the API is allowed to answer with."""

    # Success
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204

    # Client error
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    UNPROCESSABLE_ENTITY = 422

    # Server error
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    SERVICE_UNAVAILABLE = 503


_REASON_PHRASES = MappingProxyType(
    {
        HttpStatus.OK: "OK",
        HttpStatus.CREATED: "Created",
        HttpStatus.ACCEPTED: "Accepted",
        HttpStatus.NO_CONTENT: "No Content",
        HttpStatus.BAD_REQUEST: "Bad Request",
        HttpStatus.UNAUTHORIZED: "Unauthorized",
        HttpStatus.FORBIDDEN: "Forbidden",
        HttpStatus.NOT_FOUND: "Not Found",
        HttpStatus.CONFLICT: "Conflict",
        HttpStatus.UNPROCESSABLE_ENTITY: "Unprocessable Entity",
        HttpStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
        HttpStatus.NOT_IMPLEMENTED: "Not Implemented",
        HttpStatus.SERVICE_UNAVAILABLE: "Service Unavailable",
    }
)


def reason_phrase(code: int) -> str:
    """Return the reason phrase for a status code.

    Args:
        code: Any integer.

    Returns:
        The catalog phrase, or "Unknown Status" for codes outside the catalog.
    """
    return _REASON_PHRASES.get(code, UNKNOWN_STATUS)


def is_success(code: int) -> bool:
    """Return True for 2xx codes."""
    return 200 <= code < 300


def is_client_error(code: int) -> bool:
    """Return True for 4xx codes."""
    return 400 <= code < 500


def is_server_error(code: int) -> bool:
    """Return True for 5xx codes."""
    return 500 <= code < 600
