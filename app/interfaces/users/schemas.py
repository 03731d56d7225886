"""Pydantic schemas for user API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Request schema for registering a user.

    Attributes:
        username: 3-50 chars of letters, digits, '_', '.' or '-'.
        email: E-mail address, unique across users.
    """

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=1, max_length=255)


class UserItem(BaseModel):
    """A user as returned in `data`."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime
