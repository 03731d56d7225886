"""
Service: User registration and lookup.

Operations: list (paginated), create, get.
Failure cases:
    InvalidInputError — out-of-range paging, malformed username or e-mail.
    DuplicateUserError — username or e-mail already registered.
"""

import logging
import re
from typing import Optional

from app.application.taskboard.dtos import CreateUserCommand
from app.application.taskboard.paging import DEFAULT_MAX_PAGE_SIZE, check_page_bounds
from app.domain.taskboard.entities import User
from app.domain.taskboard.errors import DuplicateUserError, InvalidInputError
from app.domain.taskboard.pagination import Page
from app.domain.taskboard.ports import UserRepository

logger = logging.getLogger(__name__)

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
EMAIL_MAX_LEN = 255


class UserService:
    """Orchestrates user operations over the user repository."""

    def __init__(
        self, user_repo: UserRepository, max_page_size: int = DEFAULT_MAX_PAGE_SIZE
    ) -> None:
        self._user_repo = user_repo
        self._max_page_size = max_page_size

    def get_all_users(self, page: int, limit: int) -> Page[User]:
        check_page_bounds(page, limit, self._max_page_size)
        logger.info("Listing users: page=%d, limit=%d", page, limit)
        return self._user_repo.list_page(page, limit)

    def create_user(self, command: CreateUserCommand) -> User:
        """Validate and register a new user.

        Usernames are kept as given; e-mail addresses are lower-cased
        before the uniqueness check.

        Returns:
            The created user.
        """
        username = (command.username or "").strip()
        email = (command.email or "").strip().lower()

        if not username:
            raise InvalidInputError("Username is required")
        if not USERNAME_PATTERN.match(username):
            raise InvalidInputError(
                "Username must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        if not email:
            raise InvalidInputError("Email is required")
        if len(email) > EMAIL_MAX_LEN or not EMAIL_PATTERN.match(email):
            raise InvalidInputError("Email must be a valid email address")

        if self._user_repo.get_by_username(username) is not None:
            raise DuplicateUserError("username")
        if self._user_repo.get_by_email(email) is not None:
            raise DuplicateUserError("email")

        user = self._user_repo.add(username=username, email=email)
        logger.info("Created user: id=%d", user.id)
        return user

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self._user_repo.get_by_id(user_id)
