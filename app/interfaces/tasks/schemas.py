"""
Pydantic schemas for task API request/response validation.

These schemas enforce input types and define the API contract.
Business rules (known status, existing owner) are checked by TaskService.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domain.taskboard.entities import TaskStatus

TITLE_MAX_LEN = 255
DESCRIPTION_MAX_LEN = 5000


class CreateTaskRequest(BaseModel):
    """Request schema for creating a task.

    Attributes:
        title: Task title (1-255 chars).
        description: Optional description.
        status: Optional status; pending, in_progress or completed.
        user_id: ID of the owning user.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LEN)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LEN)
    status: Optional[str] = Field(default=None, description="pending, in_progress or completed")
    user_id: int = Field(..., ge=1, description="Owning user ID")


class UpdateTaskRequest(BaseModel):
    """Request schema for updating a task. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=TITLE_MAX_LEN)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LEN)
    status: Optional[str] = Field(default=None, description="pending, in_progress or completed")


class TaskItem(BaseModel):
    """A task as returned in `data`."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str]
    status: TaskStatus
    user_id: int
    created_at: datetime
    updated_at: datetime
