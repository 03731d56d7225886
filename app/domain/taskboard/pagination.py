"""
Paginated result page.

A slice of a larger ordered collection plus the metadata describing its
position within the whole. The response formatter copies these values
verbatim, so they are computed once here.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of items.

    Attributes:
        items: Items on the current page, in collection order.
        total: Number of items in the whole collection.
        current_page: 1-based page number.
        per_page: Requested page size.
    """

    items: list[T]
    total: int
    current_page: int
    per_page: int
    last_page: int = field(init=False)
    has_more_pages: bool = field(init=False)

    def __post_init__(self) -> None:
        last_page = max(1, math.ceil(self.total / self.per_page))
        object.__setattr__(self, "last_page", last_page)
        object.__setattr__(self, "has_more_pages", self.current_page < last_page)

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        """Return a page with `func` applied to every item."""
        return Page(
            items=[func(item) for item in self.items],
            total=self.total,
            current_page=self.current_page,
            per_page=self.per_page,
        )
