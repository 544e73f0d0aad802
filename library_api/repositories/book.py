"""
Book Repository

The storage gateway used by the catalog service.

BookRepository declares what the service needs from storage;
SQLAlchemyBookRepository implements it on a relational database.

Example matching
================
find_by_example() takes a partially filled Book as a template:
- attributes left as None are not constrained
- every string attribute that is set must appear in the stored value
  as a case-insensitive substring (not prefix, not exact)
- a set id must match exactly
- all constraints are ANDed

On SQL this compiles to ``lower(column) LIKE '%' || lower(:value) || '%'``
clauses, with LIKE wildcards in the value escaped so that ``%`` and ``_``
match literally.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy import ColumnElement, delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from library_api.exceptions import BookNotFoundError, DuplicateIsbnError
from library_api.models import Book
from library_api.pagination import Page, PageRequest, SortDirection

logger = logging.getLogger(__name__)

# String attributes an example can constrain
SEARCHABLE_FIELDS = ("title", "author", "isbn")

# Attributes a page request may sort by
SORTABLE_FIELDS = {
    "id": Book.id,
    "title": Book.title,
    "author": Book.author,
    "isbn": Book.isbn,
}

# Attributes copied onto the stored row when an existing book is saved
_WRITABLE_FIELDS = ("title", "author", "isbn")


class BookRepository(ABC):
    """
    Storage contract for Book records.

    Implementations must:
    - assign an id on first save and keep it stable afterwards
    - refuse to save a book whose id has no stored row (BookNotFoundError)
    - treat delete of an unknown id as a no-op
    """

    @abstractmethod
    def exists_by_isbn(self, isbn: str) -> bool:
        """Return True if a stored book has exactly this ISBN."""

    @abstractmethod
    def find_by_id(self, book_id: int) -> Book | None:
        """Return the stored book with this id, or None."""

    @abstractmethod
    def save(self, book: Book) -> Book:
        """Insert the book when id is None, otherwise update the stored row."""

    @abstractmethod
    def delete(self, book: Book) -> None:
        """Remove the stored row matching book.id."""

    @abstractmethod
    def find_by_example(self, example: Book, page_request: PageRequest) -> Page[Book]:
        """Return one page of books matching the example (see module docstring)."""


class SQLAlchemyBookRepository(BookRepository):
    """
    BookRepository backed by a SQLAlchemy session.

    Each write commits the session. A UNIQUE violation on isbn is rolled
    back and raised as DuplicateIsbnError, so the database constraint is
    the final word when two requests race past the service's existence
    check.

    The unique index compares isbn exactly. With isbn_case_sensitive=False
    only exists_by_isbn folds case, so "ABC" and "abc" racing past the
    service check are both stored; that mode has no storage backstop.

    Args:
        session: Session for the current request
        isbn_case_sensitive: Compare ISBNs exactly (default) or after
            lowercasing both sides
    """

    def __init__(self, session: Session, isbn_case_sensitive: bool = True) -> None:
        self.session = session
        self.isbn_case_sensitive = isbn_case_sensitive

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    def exists_by_isbn(self, isbn: str) -> bool:
        return self._isbn_taken(isbn)

    def find_by_id(self, book_id: int) -> Book | None:
        return self.session.get(Book, book_id)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def save(self, book: Book) -> Book:
        book_id = book.id

        if book_id is None:
            target = book
            self.session.add(target)
        else:
            target = self.session.get(Book, book_id)
            if target is None:
                raise BookNotFoundError(book_id)
            if target is not book:
                for name in _WRITABLE_FIELDS:
                    setattr(target, name, getattr(book, name))

        # rollback expires the row, so keep the attempted value
        isbn = target.isbn
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            if self._isbn_taken(isbn, exclude_id=book_id):
                logger.warning("Unique constraint rejected isbn=%s", isbn)
                raise DuplicateIsbnError(isbn) from exc
            raise

        self.session.refresh(target)
        return target

    def delete(self, book: Book) -> None:
        result = self.session.execute(delete(Book).where(Book.id == book.id))
        self.session.commit()
        if result.rowcount == 0:
            logger.debug("Delete of unknown book id=%s ignored", book.id)

    # -------------------------------------------------------------------------
    # Example search
    # -------------------------------------------------------------------------
    def find_by_example(self, example: Book, page_request: PageRequest) -> Page[Book]:
        filtered = select(Book).where(*example_criteria(example))

        count_stmt = select(func.count()).select_from(filtered.subquery())
        total = self.session.execute(count_stmt).scalar() or 0

        stmt = (
            filtered
            .order_by(*order_by_clauses(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        books = self.session.execute(stmt).scalars().all()

        return Page(content=list(books), total_elements=total, page_request=page_request)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _isbn_taken(self, isbn: str, exclude_id: int | None = None) -> bool:
        if self.isbn_case_sensitive:
            criterion = Book.isbn == isbn
        else:
            criterion = func.lower(Book.isbn) == func.lower(isbn)

        condition = exists().where(criterion)
        if exclude_id is not None:
            condition = condition.where(Book.id != exclude_id)

        return bool(self.session.scalar(select(condition)))


def example_criteria(example: Book) -> list[ColumnElement[bool]]:
    """
    Compile an example Book into WHERE criteria.

    Returns an empty list for an empty example, which matches every row.
    """
    criteria: list[ColumnElement[bool]] = []

    if example.id is not None:
        criteria.append(Book.id == example.id)

    for name in SEARCHABLE_FIELDS:
        value = getattr(example, name)
        if value is None:
            continue
        column = SORTABLE_FIELDS[name]
        criteria.append(column.icontains(value, autoescape=True))

    return criteria


def sort_column(field: str) -> ColumnElement:
    """
    Return the column a page request may sort by under this name.

    Raises:
        ValueError: If the field is not sortable
    """
    column = SORTABLE_FIELDS.get(field)
    if column is None:
        raise ValueError(
            f"Cannot sort by {field!r}; "
            f"allowed fields: {', '.join(sorted(SORTABLE_FIELDS))}"
        )
    return column


def order_by_clauses(page_request: PageRequest) -> list[ColumnElement]:
    """
    Translate the requested sort into ORDER BY terms.

    id ascending is always appended last so pages never overlap.

    Raises:
        ValueError: If a sort field is not sortable
    """
    clauses: list[ColumnElement] = []
    seen: set[str] = set()

    for order in page_request.sort:
        column = sort_column(order.field)
        if order.field in seen:
            continue
        seen.add(order.field)
        clauses.append(column.desc() if order.direction == SortDirection.DESC else column.asc())

    if "id" not in seen:
        clauses.append(Book.id.asc())

    return clauses
