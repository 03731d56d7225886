"""
Port interfaces (ABCs) for the taskboard bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.domain.taskboard.entities import Task, TaskStatus, User
from app.domain.taskboard.pagination import Page


class TaskRepository(ABC):
    """Port for persisting and retrieving tasks."""

    @abstractmethod
    def list_page(
        self, page: int, per_page: int, user_id: Optional[int] = None
    ) -> Page[Task]:
        """Return one page of tasks ordered by id ascending.

        Args:
            page: 1-based page number.
            per_page: Number of tasks per page.
            user_id: Optional filter on the owning user.

        Returns:
            A Page of Task entities with the total count of matching tasks.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, task_id: int) -> Optional[Task]:
        """Return a task by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def add(
        self,
        title: str,
        description: Optional[str],
        status: TaskStatus,
        user_id: int,
    ) -> Task:
        """Persist a new task and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: int, changes: dict[str, Any]) -> Optional[Task]:
        """Apply column changes to a task.

        Returns:
            The updated task, or None if no task has this ID.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Delete a task. Returns False if no task has this ID."""
        raise NotImplementedError


class UserRepository(ABC):
    """Port for persisting and retrieving users."""

    @abstractmethod
    def list_page(self, page: int, per_page: int) -> Page[User]:
        """Return one page of users ordered by id ascending."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return a user by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    def add(self, username: str, email: str) -> User:
        """Persist a new user and return it with its assigned ID.

        Raises:
            DuplicateUserError: The username or e-mail is already taken.
        """
        raise NotImplementedError
