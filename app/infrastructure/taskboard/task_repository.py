"""
Adapter: Task repository.

Implements TaskRepository port.
Persists and retrieves tasks from the tasks table.
"""

import logging
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from app.domain.taskboard.entities import Task, TaskStatus
from app.domain.taskboard.pagination import Page
from app.domain.taskboard.ports import TaskRepository
from app.infrastructure.taskboard.database import (
    from_db_timestamp,
    to_db_timestamp,
    utc_now,
)

logger = logging.getLogger(__name__)

_COLUMNS = "id, title, description, status, user_id, created_at, updated_at"
_UPDATABLE = ("title", "description", "status")


def _row_to_task(row: Any) -> Task:
    return Task(
        id=row[0],
        title=row[1],
        description=row[2],
        status=TaskStatus(row[3]),
        user_id=row[4],
        created_at=from_db_timestamp(row[5]),
        updated_at=from_db_timestamp(row[6]),
    )


class TaskRepositoryAdapter(TaskRepository):
    """SQL implementation of the task repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_page(
        self, page: int, per_page: int, user_id: Optional[int] = None
    ) -> Page[Task]:
        """Return one page of tasks ordered by id.

        Args:
            page: 1-based page number.
            per_page: Number of tasks per page.
            user_id: Optional owner filter.

        Returns:
            A Page with the matching tasks and their total count.
        """
        where = ""
        params: dict[str, Any] = {"limit": per_page, "offset": (page - 1) * per_page}
        if user_id is not None:
            where = " WHERE user_id = :user_id"
            params["user_id"] = user_id

        with self._engine.connect() as conn:
            total = conn.execute(
                text(f"SELECT COUNT(*) FROM tasks{where}"), params
            ).scalar_one()
            rows = conn.execute(
                text(
                    f"SELECT {_COLUMNS} FROM tasks{where} "
                    "ORDER BY id ASC LIMIT :limit OFFSET :offset"
                ),
                params,
            ).fetchall()

        return Page(
            items=[_row_to_task(row) for row in rows],
            total=total,
            current_page=page,
            per_page=per_page,
        )

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {_COLUMNS} FROM tasks WHERE id = :id"),
                {"id": task_id},
            ).first()
        return _row_to_task(row) if row is not None else None

    def add(
        self,
        title: str,
        description: Optional[str],
        status: TaskStatus,
        user_id: int,
    ) -> Task:
        now = to_db_timestamp(utc_now())
        with self._engine.begin() as conn:
            row = conn.execute(
                text(
                    "INSERT INTO tasks "
                    "(title, description, status, user_id, created_at, updated_at) "
                    "VALUES (:title, :description, :status, :user_id, :created_at, :updated_at) "
                    f"RETURNING {_COLUMNS}"
                ),
                {
                    "title": title,
                    "description": description,
                    "status": status.value,
                    "user_id": user_id,
                    "created_at": now,
                    "updated_at": now,
                },
            ).one()
        return _row_to_task(row)

    def update(self, task_id: int, changes: dict[str, Any]) -> Optional[Task]:
        """Apply column changes and bump updated_at.

        Only title, description and status may be changed.
        """
        unknown = set(changes) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"Columns not updatable: {sorted(unknown)}")

        params: dict[str, Any] = {"id": task_id, "updated_at": to_db_timestamp(utc_now())}
        assignments = ["updated_at = :updated_at"]
        for column in _UPDATABLE:
            if column in changes:
                value = changes[column]
                params[column] = value.value if isinstance(value, TaskStatus) else value
                assignments.append(f"{column} = :{column}")

        with self._engine.begin() as conn:
            row = conn.execute(
                text(
                    f"UPDATE tasks SET {', '.join(assignments)} "
                    f"WHERE id = :id RETURNING {_COLUMNS}"
                ),
                params,
            ).first()
        return _row_to_task(row) if row is not None else None

    def delete(self, task_id: int) -> bool:
        with self._engine.begin() as conn:
            result = conn.execute(text("DELETE FROM tasks WHERE id = :id"), {"id": task_id})
        deleted = result.rowcount > 0
        if not deleted:
            logger.debug("Delete skipped, task %d does not exist.", task_id)
        return deleted
