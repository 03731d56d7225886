"""
Service: Task management.

Operations: list (paginated, optional owner filter), create, get,
update, delete.
Failure cases:
    InvalidInputError — out-of-range paging, blank title, unknown status
        or owner, empty update.
    TaskNotFoundError — update or delete of a missing task.
"""

import logging
from typing import Any, Optional

from app.application.taskboard.dtos import CreateTaskCommand, UpdateTaskCommand
from app.application.taskboard.paging import DEFAULT_MAX_PAGE_SIZE, check_page_bounds
from app.domain.taskboard.entities import Task, TaskStatus
from app.domain.taskboard.errors import InvalidInputError, TaskNotFoundError
from app.domain.taskboard.pagination import Page
from app.domain.taskboard.ports import TaskRepository, UserRepository

logger = logging.getLogger(__name__)

TITLE_MAX_LEN = 255


def _clean_title(title: Optional[str]) -> str:
    if title is None or not title.strip():
        raise InvalidInputError("Title is required")
    title = title.strip()
    if len(title) > TITLE_MAX_LEN:
        raise InvalidInputError(f"Title must not exceed {TITLE_MAX_LEN} characters")
    return title


def _parse_status(status: str) -> TaskStatus:
    try:
        return TaskStatus(status)
    except ValueError:
        allowed = ", ".join(TaskStatus.values())
        raise InvalidInputError(f"Status must be one of: {allowed}") from None


class TaskService:
    """Orchestrates task operations over the task and user repositories."""

    def __init__(
        self,
        task_repo: TaskRepository,
        user_repo: UserRepository,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    ) -> None:
        """Initialize the service.

        Args:
            task_repo: Repository for task persistence.
            user_repo: Repository used to check task owners exist.
            max_page_size: Largest page size a caller may request.
        """
        self._task_repo = task_repo
        self._user_repo = user_repo
        self._max_page_size = max_page_size

    def get_all_tasks(
        self, page: int, limit: int, user_id: Optional[int] = None
    ) -> Page[Task]:
        """Return one page of tasks, optionally restricted to one owner."""
        check_page_bounds(page, limit, self._max_page_size)
        if user_id is not None and user_id < 1:
            raise InvalidInputError("Invalid user ID")
        logger.info("Listing tasks: page=%d, limit=%d, user_id=%s", page, limit, user_id)
        return self._task_repo.list_page(page, limit, user_id)

    def create_task(self, command: CreateTaskCommand) -> Task:
        """Validate and persist a new task.

        Returns:
            The created task.
        """
        title = _clean_title(command.title)
        status = _parse_status(command.status) if command.status is not None else TaskStatus.PENDING
        if command.user_id is None:
            raise InvalidInputError("User ID is required")
        if self._user_repo.get_by_id(command.user_id) is None:
            raise InvalidInputError("User does not exist")

        task = self._task_repo.add(
            title=title,
            description=command.description,
            status=status,
            user_id=command.user_id,
        )
        logger.info("Created task: id=%d, user_id=%d", task.id, task.user_id)
        return task

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        return self._task_repo.get_by_id(task_id)

    def update_task(self, task_id: int, command: UpdateTaskCommand) -> Task:
        """Apply the non-empty fields of `command` to a task.

        Raises:
            InvalidInputError: No field given, or a field fails validation.
            TaskNotFoundError: No task has this ID.
        """
        if command.is_empty():
            raise InvalidInputError("No fields to update")

        changes: dict[str, Any] = {}
        if command.title is not None:
            changes["title"] = _clean_title(command.title)
        if command.description is not None:
            changes["description"] = command.description
        if command.status is not None:
            changes["status"] = _parse_status(command.status)

        task = self._task_repo.update(task_id, changes)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info("Updated task: id=%d, fields=%s", task_id, sorted(changes))
        return task

    def delete_task(self, task_id: int) -> None:
        if not self._task_repo.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info("Deleted task: id=%d", task_id)
