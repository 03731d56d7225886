"""
Domain-specific errors for the taskboard bounded context.

All errors raised from the domain and application layers are defined here.
Each error carries a FailureKind; the interface layer matches on the kind
to choose the response it sends.
No framework imports allowed.
"""

from enum import Enum


class FailureKind(Enum):
    """Closed set of failure categories a caller can map to a response."""

    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INTERNAL = "internal"


class TaskboardError(Exception):
    """Base error for all taskboard domain errors."""

    kind = FailureKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidInputError(TaskboardError):
    """Raised when request data is malformed or out of range."""

    kind = FailureKind.INVALID_INPUT


class TaskNotFoundError(TaskboardError):
    """Raised when a task does not exist."""

    kind = FailureKind.NOT_FOUND

    def __init__(self, task_id: int) -> None:
        super().__init__("Task not found")
        self.task_id = task_id


class DuplicateUserError(TaskboardError):
    """Raised when a username or e-mail is already registered."""

    kind = FailureKind.CONFLICT

    def __init__(self, field: str) -> None:
        super().__init__(f"A user with this {field} already exists")
        self.field = field
