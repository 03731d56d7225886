"""Page request bounds shared by the list operations."""

from app.domain.taskboard.errors import InvalidInputError

DEFAULT_MAX_PAGE_SIZE = 100


def check_page_bounds(page: int, limit: int, max_limit: int = DEFAULT_MAX_PAGE_SIZE) -> None:
    """Raise InvalidInputError unless page >= 1 and 1 <= limit <= max_limit."""
    if page < 1:
        raise InvalidInputError("Page must be greater than or equal to 1")
    if limit < 1 or limit > max_limit:
        raise InvalidInputError(f"Limit must be between 1 and {max_limit}")
