"""
Shared test fixtures.

Settings are read at import time, so the environment is prepared
before anything from `app` is imported: rate limiting is switched off
and the default database is an in-memory SQLite store.
"""

import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import datetime, timezone  # noqa: E402
from typing import Any, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.domain.taskboard.entities import Task, TaskStatus, User  # noqa: E402
from app.domain.taskboard.pagination import Page  # noqa: E402
from app.domain.taskboard.ports import TaskRepository, UserRepository  # noqa: E402
from app.infrastructure.taskboard.database import build_engine, init_schema  # noqa: E402
from app.interfaces.dependencies import get_engine  # noqa: E402
from app.main import app  # noqa: E402

FIXED_NOW = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, for service tests."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}

    def list_page(self, page: int, per_page: int) -> Page[User]:
        ordered = [self.users[key] for key in sorted(self.users)]
        start = (page - 1) * per_page
        return Page(
            items=ordered[start:start + per_page],
            total=len(ordered),
            current_page=page,
            per_page=per_page,
        )

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def add(self, username: str, email: str) -> User:
        user = User(
            id=len(self.users) + 1,
            username=username,
            email=email,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        self.users[user.id] = user
        return user


class InMemoryTaskRepository(TaskRepository):
    """TaskRepository backed by a dict, for service tests."""

    def __init__(self) -> None:
        self.tasks: dict[int, Task] = {}
        self._next_id = 1

    def list_page(
        self, page: int, per_page: int, user_id: Optional[int] = None
    ) -> Page[Task]:
        ordered = [
            self.tasks[key]
            for key in sorted(self.tasks)
            if user_id is None or self.tasks[key].user_id == user_id
        ]
        start = (page - 1) * per_page
        return Page(
            items=ordered[start:start + per_page],
            total=len(ordered),
            current_page=page,
            per_page=per_page,
        )

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.tasks.get(task_id)

    def add(
        self,
        title: str,
        description: Optional[str],
        status: TaskStatus,
        user_id: int,
    ) -> Task:
        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            status=status,
            user_id=user_id,
            created_at=FIXED_NOW,
            updated_at=FIXED_NOW,
        )
        self.tasks[task.id] = task
        self._next_id += 1
        return task

    def update(self, task_id: int, changes: dict[str, Any]) -> Optional[Task]:
        task = self.tasks.get(task_id)
        if task is None:
            return None
        fields = {**task.__dict__, **changes}
        updated = Task(**fields)
        self.tasks[task_id] = updated
        return updated

    def delete(self, task_id: int) -> bool:
        return self.tasks.pop(task_id, None) is not None


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def task_repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database with the schema created."""
    db_engine = build_engine("sqlite://")
    init_schema(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def client(engine):
    """TestClient wired to the per-test database."""
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register a user through the API and return its `data` block."""

    def _make_user(username: str, email: Optional[str] = None) -> dict[str, Any]:
        response = client.post(
            "/api/v1/users",
            json={"username": username, "email": email or f"{username}@example.com"},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make_user
