"""
Tests for the task API endpoints.

Runs the FastAPI app against a per-test in-memory database.
Validates status codes, envelope shapes and failure translation.
"""

import pytest

from app.application.taskboard.task_service import TaskService
from app.interfaces.dependencies import get_task_service
from app.main import app

TASKS_URL = "/api/v1/tasks"


@pytest.fixture
def owner(make_user) -> dict:
    return make_user("owner")


@pytest.fixture
def make_task(client, owner):
    def _make_task(title: str = "Write report", **fields) -> dict:
        payload = {"title": title, "user_id": owner["id"], **fields}
        response = client.post(TASKS_URL, json=payload)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make_task


class TestCreateTask:
    """Tests for POST /api/v1/tasks."""

    def test_created(self, client, owner) -> None:
        response = client.post(
            TASKS_URL,
            json={"title": "Write report", "description": "Q3", "user_id": owner["id"]},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Task created successfully"
        assert body["data"]["status"] == "pending"
        assert body["data"]["user_id"] == owner["id"]

    def test_unknown_owner(self, client) -> None:
        response = client.post(TASKS_URL, json={"title": "Orphan", "user_id": 42})
        assert response.status_code == 400
        assert response.json()["message"] == "User does not exist"

    def test_unknown_status(self, client, owner) -> None:
        response = client.post(
            TASKS_URL, json={"title": "X", "user_id": owner["id"], "status": "done"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == (
            "Status must be one of: pending, in_progress, completed"
        )

    def test_blank_title(self, client, owner) -> None:
        response = client.post(TASKS_URL, json={"title": "   ", "user_id": owner["id"]})
        assert response.status_code == 400
        assert response.json()["message"] == "Title is required"

    def test_schema_errors(self, client) -> None:
        response = client.post(TASKS_URL, json={"title": ""})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert set(body["errors"]) == {"title", "user_id"}

    def test_malformed_json(self, client) -> None:
        response = client.post(
            TASKS_URL, content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestListTasks:
    """Tests for GET /api/v1/tasks."""

    def test_paginated(self, client, make_task) -> None:
        for n in range(1, 26):
            make_task(f"Task {n}")
        response = client.get(TASKS_URL, params={"page": 2, "limit": 10})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Tasks retrieved successfully"
        assert [t["title"] for t in body["data"]] == [f"Task {n}" for n in range(11, 21)]
        assert body["pagination"] == {
            "page": 2,
            "limit": 10,
            "total": 25,
            "totalPages": 3,
            "hasMore": True,
        }

    def test_filter_by_user(self, client, make_task, make_user) -> None:
        other = make_user("other")
        make_task("Mine")
        client.post(TASKS_URL, json={"title": "Theirs", "user_id": other["id"]})

        body = client.get(TASKS_URL, params={"userId": other["id"]}).json()

        assert [t["title"] for t in body["data"]] == ["Theirs"]
        assert body["pagination"]["total"] == 1

    def test_invalid_user_filter(self, client) -> None:
        response = client.get(TASKS_URL, params={"userId": 0})
        assert response.status_code == 400
        assert "userId" in response.json()["errors"]


class TestShowTask:
    """Tests for GET /api/v1/tasks/{id}."""

    def test_found(self, client, make_task) -> None:
        task = make_task()
        response = client.get(f"{TASKS_URL}/{task['id']}")
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Task retrieved successfully",
            "data": task,
        }

    def test_not_found(self, client) -> None:
        response = client.get(f"{TASKS_URL}/77")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "message": "Task not found",
            "error": "Task not found",
        }

    def test_invalid_id(self, client) -> None:
        response = client.get(f"{TASKS_URL}/abc")
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid task ID",
            "error": "Invalid task ID",
        }


class TestUpdateTask:
    """Tests for PUT/PATCH /api/v1/tasks/{id}."""

    def test_patch_status(self, client, make_task) -> None:
        task = make_task()
        response = client.patch(f"{TASKS_URL}/{task['id']}", json={"status": "completed"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Task updated successfully"
        assert body["data"]["status"] == "completed"
        assert body["data"]["title"] == task["title"]

    def test_put_title(self, client, make_task) -> None:
        task = make_task()
        response = client.put(f"{TASKS_URL}/{task['id']}", json={"title": "Renamed"})
        assert response.status_code == 200
        assert response.json()["data"]["title"] == "Renamed"

    def test_empty_update(self, client, make_task) -> None:
        task = make_task()
        response = client.put(f"{TASKS_URL}/{task['id']}", json={})
        assert response.status_code == 400
        assert response.json()["message"] == "No fields to update"

    def test_missing_task(self, client) -> None:
        response = client.patch(f"{TASKS_URL}/999", json={"title": "x"})
        assert response.status_code == 404
        assert response.json()["message"] == "Task not found"

    def test_invalid_id(self, client) -> None:
        response = client.patch(f"{TASKS_URL}/0", json={"title": "x"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid task ID"


class TestDeleteTask:
    """Tests for DELETE /api/v1/tasks/{id}."""

    def test_deleted_without_data(self, client, make_task) -> None:
        task = make_task()
        response = client.delete(f"{TASKS_URL}/{task['id']}")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Task deleted successfully"}

        again = client.delete(f"{TASKS_URL}/{task['id']}")
        assert again.status_code == 404
        assert again.json()["message"] == "Task not found"


class _ExplodingRepository:
    """Stands in for a repository whose backend is down."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise RuntimeError("database is on fire at 10.0.0.3")

        return _fail


class TestUnexpectedFailures:
    """Unexpected errors become generic 500 envelopes."""

    @pytest.fixture
    def broken_service(self, client):
        app.dependency_overrides[get_task_service] = lambda: TaskService(
            task_repo=_ExplodingRepository(), user_repo=_ExplodingRepository()
        )
        yield
        app.dependency_overrides.pop(get_task_service, None)

    @pytest.mark.parametrize(
        "method,path,payload,message",
        [
            ("get", TASKS_URL, None, "Failed to retrieve tasks"),
            ("post", TASKS_URL, {"title": "T", "user_id": 1}, "Failed to create task"),
            ("get", f"{TASKS_URL}/1", None, "Failed to retrieve task"),
            ("patch", f"{TASKS_URL}/1", {"title": "T"}, "Failed to update task"),
            ("delete", f"{TASKS_URL}/1", None, "Failed to delete task"),
        ],
    )
    def test_generic_message(
        self, client, broken_service, method, path, payload, message
    ) -> None:
        kwargs = {"json": payload} if payload is not None else {}
        response = client.request(method.upper(), path, **kwargs)
        assert response.status_code == 500
        assert response.json() == {"success": False, "message": message, "error": message}
        assert "10.0.0.3" not in response.text
