"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Wiring for a request:
    get_db -> get_book_repository -> get_book_service

Tests replace any link of the chain with app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Query
from fastapi.exceptions import RequestValidationError
from sqlalchemy.orm import Session

from library_api.config import get_settings
from library_api.database import get_db
from library_api.models import Book
from library_api.pagination import PageRequest, SortOrder
from library_api.repositories import BookRepository, SQLAlchemyBookRepository
from library_api.repositories.book import sort_column
from library_api.services import BookService

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


def get_book_repository(db: DbSession) -> BookRepository:
    """Storage gateway bound to the request's session."""
    return SQLAlchemyBookRepository(db, isbn_case_sensitive=settings.isbn_case_sensitive)


def get_book_service(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookService:
    """Catalog service with the repository injected through its constructor."""
    return BookService(repository)


BookServiceDep = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Pagination Parameters
# =============================================================================
def get_page_request(
    page: int = Query(
        default=0,
        ge=0,
        description="Page number (0-indexed)",
        examples=[0, 1, 2],
    ),
    size: int = Query(
        default=settings.default_page_size,
        ge=1,
        le=100,  # Limit to prevent abuse
        description="Number of items per page (max 100)",
        examples=[10, 20, 100],
    ),
    sort: list[str] | None = Query(
        default=None,
        description="Sort order as field[,asc|desc]; repeat for several",
        examples=[["title,desc"], ["author", "title"]],
    ),
) -> PageRequest:
    """
    Build a PageRequest from query parameters.

        GET /books/?page=1&size=20&sort=author&sort=title,desc

    Raises:
        RequestValidationError: If a sort expression is malformed or names
            a field that cannot be sorted on
    """
    orders: list[SortOrder] = []
    for raw in sort or []:
        try:
            order = SortOrder.parse(raw)
            sort_column(order.field)
        except ValueError as exc:
            raise _invalid_sort(str(exc)) from exc
        orders.append(order)

    return PageRequest(page=page, size=size, sort=tuple(orders))


def _invalid_sort(message: str) -> RequestValidationError:
    return RequestValidationError(
        [{"type": "value_error", "loc": ("query", "sort"), "msg": message, "input": None}]
    )


Pagination = Annotated[PageRequest, Depends(get_page_request)]


# =============================================================================
# Book Example Filter
# =============================================================================
def get_book_example(
    title: str | None = Query(
        default=None,
        max_length=255,
        description="Filter by title (partial match, case-insensitive)",
        examples=["avent", "1984"],
    ),
    author: str | None = Query(
        default=None,
        max_length=255,
        description="Filter by author (partial match, case-insensitive)",
        examples=["artur", "orwell"],
    ),
    isbn: str | None = Query(
        default=None,
        max_length=20,
        description="Filter by ISBN (partial match, case-insensitive)",
        examples=["978"],
    ),
) -> Book:
    """
    Build the example Book used for search.

    Parameters that are not sent stay None and do not constrain results.

        GET /books/?title=avent&author=art
    """
    return Book(title=title, author=author, isbn=isbn)


BookExample = Annotated[Book, Depends(get_book_example)]
