"""
Book Service

Catalog rules for books, on top of a BookRepository.

Rules:
- create: the ISBN must not already be registered (checked before insert)
- update/delete: the book must carry an id
- get_by_id: absence is a normal result (None), not an error
- find: example-based search, delegated to the repository

The ISBN check in create is check-then-act. Two concurrent creates with
the same ISBN can both pass it; the repository's unique constraint turns
the loser into a DuplicateIsbnError. update does not re-check the ISBN
here; the same constraint applies on storage.
"""

import logging

from library_api.exceptions import DuplicateIsbnError, InvalidArgumentError
from library_api.models import Book
from library_api.pagination import Page, PageRequest
from library_api.repositories import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """
    Catalog service for Book records.

    Args:
        repository: Storage gateway (injected, never created here)

    Usage:
        service = BookService(SQLAlchemyBookRepository(db))
        book = service.create(Book(title="1984", author="George Orwell", isbn="9780451524935"))
    """

    def __init__(self, repository: BookRepository) -> None:
        self.repository = repository

    def create(self, book: Book) -> Book:
        """
        Persist a new book.

        Args:
            book: Book with id None

        Returns:
            The stored book, with its assigned id

        Raises:
            DuplicateIsbnError: If another book already has this ISBN
        """
        if self.repository.exists_by_isbn(book.isbn):
            logger.warning("Rejected book with duplicate isbn=%s", book.isbn)
            raise DuplicateIsbnError(book.isbn)

        saved = self.repository.save(book)
        logger.info("Created book id=%s isbn=%s", saved.id, saved.isbn)
        return saved

    def get_by_id(self, book_id: int) -> Book | None:
        """Return the book with this id, or None when there is none."""
        return self.repository.find_by_id(book_id)

    def delete(self, book: Book | None) -> None:
        """
        Delete a stored book.

        Raises:
            InvalidArgumentError: If book is None or has no id
        """
        _require_id(book)
        self.repository.delete(book)
        logger.info("Deleted book id=%s", book.id)

    def update(self, book: Book | None) -> Book:
        """
        Save changes to a stored book.

        The ISBN is not re-checked for uniqueness here.

        Raises:
            InvalidArgumentError: If book is None or has no id
        """
        _require_id(book)
        saved = self.repository.save(book)
        logger.info("Updated book id=%s", saved.id)
        return saved

    def find(self, example: Book, page_request: PageRequest) -> Page[Book]:
        """
        Search books matching the example, one page at a time.

        Set string fields of the example match as case-insensitive
        substrings; None fields are ignored; an empty example matches all.
        """
        return self.repository.find_by_example(example, page_request)


def _require_id(book: Book | None) -> None:
    if book is None or book.id is None:
        raise InvalidArgumentError()
