"""
Pydantic schemas shared by every router.

The envelope models document the response shapes in OpenAPI; the bodies
themselves are built by app.shared.responses.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class PaginationInfo(BaseModel):
    """Position of a page within the whole collection."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    totalPages: int = Field(..., ge=0)
    hasMore: bool


class SuccessEnvelope(BaseModel):
    """Success body. `data` is left out when there is no payload."""

    success: bool = True
    message: str
    data: Optional[Any] = None


class PaginatedEnvelope(BaseModel):
    """Success body for list endpoints."""

    success: bool = True
    message: str
    data: list[Any]
    pagination: PaginationInfo


class ErrorEnvelope(BaseModel):
    """Error body. `message` and `error` always carry the same text."""

    success: bool = False
    message: str
    error: str
    errors: Optional[dict[str, list[str]]] = None


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorEnvelope, "description": "Invalid input"},
    500: {"model": ErrorEnvelope, "description": "Unexpected failure"},
}

NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorEnvelope, "description": "Resource not found"},
}
