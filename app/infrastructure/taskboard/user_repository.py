"""
Adapter: User repository.

Implements UserRepository port.
Persists and retrieves users from the users table.
"""

from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from app.domain.taskboard.entities import User
from app.domain.taskboard.errors import DuplicateUserError
from app.domain.taskboard.pagination import Page
from app.domain.taskboard.ports import UserRepository
from app.infrastructure.taskboard.database import (
    from_db_timestamp,
    to_db_timestamp,
    utc_now,
)

_COLUMNS = "id, username, email, created_at, updated_at"


def _row_to_user(row: Any) -> User:
    return User(
        id=row[0],
        username=row[1],
        email=row[2],
        created_at=from_db_timestamp(row[3]),
        updated_at=from_db_timestamp(row[4]),
    )


class UserRepositoryAdapter(UserRepository):
    """SQL implementation of the user repository."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_page(self, page: int, per_page: int) -> Page[User]:
        with self._engine.connect() as conn:
            total = conn.execute(text("SELECT COUNT(*) FROM users")).scalar_one()
            rows = conn.execute(
                text(
                    f"SELECT {_COLUMNS} FROM users "
                    "ORDER BY id ASC LIMIT :limit OFFSET :offset"
                ),
                {"limit": per_page, "offset": (page - 1) * per_page},
            ).fetchall()

        return Page(
            items=[_row_to_user(row) for row in rows],
            total=total,
            current_page=page,
            per_page=per_page,
        )

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._fetch_one("id = :value", user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._fetch_one("username = :value", username)

    def get_by_email(self, email: str) -> Optional[User]:
        return self._fetch_one("email = :value", email)

    def add(self, username: str, email: str) -> User:
        """Insert a user and return it with its generated ID.

        Raises:
            DuplicateUserError: The username or e-mail is already stored,
                e.g. registered concurrently after the service's lookups.
        """
        now = to_db_timestamp(utc_now())
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    text(
                        "INSERT INTO users (username, email, created_at, updated_at) "
                        "VALUES (:username, :email, :created_at, :updated_at) "
                        f"RETURNING {_COLUMNS}"
                    ),
                    {
                        "username": username,
                        "email": email,
                        "created_at": now,
                        "updated_at": now,
                    },
                ).one()
        except IntegrityError as exc:
            taken = self._fetch_one("username = :value", username) is not None
            raise DuplicateUserError("username" if taken else "email") from exc
        return _row_to_user(row)

    def _fetch_one(self, condition: str, value: Any) -> Optional[User]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text(f"SELECT {_COLUMNS} FROM users WHERE {condition}"),
                {"value": value},
            ).first()
        return _row_to_user(row) if row is not None else None
