"""
FastAPI router for tasks.

All routes delegate to TaskService. No business logic here.
Every route answers with a response envelope; failures are
translated once, by translate_failures.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from app.application.taskboard.dtos import CreateTaskCommand, UpdateTaskCommand
from app.application.taskboard.task_service import TaskService
from app.domain.taskboard.entities import Task
from app.interfaces.dependencies import (
    PageRequest,
    get_page_request,
    get_task_service,
    parse_resource_id,
)
from app.interfaces.schemas import (
    ERROR_RESPONSES,
    NOT_FOUND_RESPONSE,
    PaginatedEnvelope,
    SuccessEnvelope,
)
from app.interfaces.tasks.schemas import CreateTaskRequest, TaskItem, UpdateTaskRequest
from app.interfaces.translation import translate_failures
from app.shared.responses import (
    ApiResponse,
    created,
    not_found,
    paginated,
    success,
    validation_error,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])

INVALID_TASK_ID = "Invalid task ID"


def _task_data(task: Task) -> dict[str, Any]:
    return TaskItem.model_validate(task).model_dump(mode="json")


@router.get(
    "",
    response_model=None,
    responses={200: {"model": PaginatedEnvelope}, **ERROR_RESPONSES},
    summary="List tasks",
    description="Return one page of tasks, optionally filtered by owner.",
)
@translate_failures("Failed to retrieve tasks")
def list_tasks(
    paging: PageRequest = Depends(get_page_request),
    user_id: Optional[int] = Query(default=None, alias="userId", ge=1),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse:
    """List tasks page by page."""
    page = service.get_all_tasks(paging.page, paging.limit, user_id)
    return paginated(page.map(_task_data), "Tasks retrieved successfully")


@router.post(
    "",
    response_model=None,
    status_code=201,
    responses={201: {"model": SuccessEnvelope}, **ERROR_RESPONSES},
    summary="Create a task",
)
@translate_failures("Failed to create task")
def create_task(
    request: CreateTaskRequest,
    service: TaskService = Depends(get_task_service),
) -> ApiResponse:
    """Create a task owned by an existing user."""
    task = service.create_task(
        CreateTaskCommand(
            title=request.title,
            description=request.description,
            status=request.status,
            user_id=request.user_id,
        )
    )
    return created(_task_data(task), "Task created successfully")


@router.get(
    "/{task_id}",
    response_model=None,
    responses={200: {"model": SuccessEnvelope}, **NOT_FOUND_RESPONSE, **ERROR_RESPONSES},
    summary="Get a task",
)
@translate_failures("Failed to retrieve task")
def show_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> ApiResponse:
    """Return a single task."""
    parsed_id = parse_resource_id(task_id)
    if parsed_id is None:
        return validation_error(INVALID_TASK_ID)

    task = service.get_task_by_id(parsed_id)
    if task is None:
        return not_found("Task not found")
    return success(_task_data(task), "Task retrieved successfully")


@router.api_route(
    "/{task_id}",
    methods=["PUT", "PATCH"],
    response_model=None,
    responses={200: {"model": SuccessEnvelope}, **NOT_FOUND_RESPONSE, **ERROR_RESPONSES},
    summary="Update a task",
)
@translate_failures("Failed to update task")
def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    service: TaskService = Depends(get_task_service),
) -> ApiResponse:
    """Update the title, description or status of a task."""
    parsed_id = parse_resource_id(task_id)
    if parsed_id is None:
        return validation_error(INVALID_TASK_ID)

    task = service.update_task(
        parsed_id,
        UpdateTaskCommand(
            title=request.title,
            description=request.description,
            status=request.status,
        ),
    )
    return success(_task_data(task), "Task updated successfully")


@router.delete(
    "/{task_id}",
    response_model=None,
    responses={200: {"model": SuccessEnvelope}, **NOT_FOUND_RESPONSE, **ERROR_RESPONSES},
    summary="Delete a task",
)
@translate_failures("Failed to delete task")
def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> ApiResponse:
    """Delete a task."""
    parsed_id = parse_resource_id(task_id)
    if parsed_id is None:
        return validation_error(INVALID_TASK_ID)

    service.delete_task(parsed_id)
    return success(message="Task deleted successfully")
