"""
Data Transfer Objects for the taskboard application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateTaskCommand:
    """Input DTO for creating a task.

    Attributes:
        title: Short task title.
        description: Optional free-text description.
        status: Optional status value; defaults to "pending".
        user_id: ID of the owning user.
    """

    title: Optional[str]
    user_id: Optional[int]
    description: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class UpdateTaskCommand:
    """Input DTO for updating a task. Only non-None fields are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None

    def is_empty(self) -> bool:
        return self.title is None and self.description is None and self.status is None


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a user."""

    username: Optional[str]
    email: Optional[str]
