"""
Dependency injection for the taskboard routers.

Provides FastAPI dependency functions that wire infrastructure
adapters into services via constructor injection, plus the
request-parsing helpers the routers share.
These are the composition root for the taskboard context.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Query
from sqlalchemy.engine import Engine

from app.application.taskboard.task_service import TaskService
from app.application.taskboard.user_service import UserService
from app.core.config import settings
from app.infrastructure.taskboard.database import build_engine
from app.infrastructure.taskboard.task_repository import TaskRepositoryAdapter
from app.infrastructure.taskboard.user_repository import UserRepositoryAdapter


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.database_url)


def get_task_service(engine: Engine = Depends(get_engine)) -> TaskService:
    """Build TaskService with its infrastructure dependencies."""
    return TaskService(
        task_repo=TaskRepositoryAdapter(engine=engine),
        user_repo=UserRepositoryAdapter(engine=engine),
        max_page_size=settings.max_page_size,
    )


def get_user_service(engine: Engine = Depends(get_engine)) -> UserService:
    """Build UserService with its infrastructure dependencies."""
    return UserService(
        user_repo=UserRepositoryAdapter(engine=engine),
        max_page_size=settings.max_page_size,
    )


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int


def get_page_request(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(
        settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    ),
) -> PageRequest:
    """Parse and bound the `page` and `limit` query parameters."""
    return PageRequest(page=page, limit=limit)


def parse_resource_id(raw: str) -> Optional[int]:
    """Return `raw` as a positive integer ID, or None if it is not one."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value >= 1 else None
