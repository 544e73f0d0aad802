"""
Paging Value Types

Storage-agnostic types describing which slice of a result set to fetch
(PageRequest) and what came back (Page). Pages are zero-indexed.

Usage:
    request = PageRequest(page=0, size=10, sort=(SortOrder.parse("title,desc"),))
    page = repository.find_by_example(Book(title="avent"), request)
    page.content, page.total_elements, page.total_pages
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class SortDirection(StrEnum):
    """Direction of a sort order."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    """
    A single ORDER BY term.

    Attributes:
        field: Name of the attribute to sort by
        direction: Ascending or descending
    """

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: str) -> "SortOrder":
        """
        Parse the query-string form ``field`` or ``field,direction``.

        Raises:
            ValueError: If the field is blank or the direction unknown
        """
        name, _, direction = raw.partition(",")
        name = name.strip()
        if not name:
            raise ValueError(f"Invalid sort expression: {raw!r}")

        direction = direction.strip().lower() or SortDirection.ASC
        try:
            return cls(field=name, direction=SortDirection(direction))
        except ValueError:
            raise ValueError(
                f"Invalid sort direction {direction!r}, expected 'asc' or 'desc'"
            ) from None


@dataclass(frozen=True)
class PageRequest:
    """
    Which page of results to return.

    Attributes:
        page: Zero-based page index
        size: Maximum number of items per page
        sort: Sort orders applied before slicing, in priority order
    """

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        """Number of records to skip: page 0 skips 0, page 1 skips size, ..."""
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """
    One page of results plus the total count across all pages.

    Attributes:
        content: Items of the requested page
        total_elements: Number of matches before slicing
        page_request: The request that produced this page
    """

    content: Sequence[T]
    total_elements: int
    page_request: PageRequest = field(default_factory=PageRequest)

    @property
    def total_pages(self) -> int:
        if self.total_elements <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_request.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.page_request.page == 0

    @property
    def is_last(self) -> bool:
        return self.page_request.page + 1 >= self.total_pages
