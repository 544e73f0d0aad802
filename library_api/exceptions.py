"""
Catalog Errors

- BusinessException: a domain rule was violated; the message is meant for
  the end user and the request can be corrected and retried.
- InvalidArgumentError: the caller passed something it never should have
  (e.g. updating an unsaved book). Indicates a bug, not bad user input.
- BookNotFoundError: the repository was asked to update a row that does
  not exist (for example, deleted concurrently).

Plain absence on lookup is not an error: get_by_id returns None.
"""


class BusinessException(Exception):
    """Domain rule violation with a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DuplicateIsbnError(BusinessException):
    """Another book is already registered with this ISBN."""

    default_message = "ISBN already registered."

    def __init__(self, isbn: str | None = None, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.isbn = isbn


class InvalidArgumentError(ValueError):
    """A book without an id was given to an operation that needs one."""

    def __init__(self, message: str = "Book id can't be null.") -> None:
        super().__init__(message)
        self.message = message


class BookNotFoundError(LookupError):
    """No stored book has the given id."""

    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book with id {book_id} not found")
        self.book_id = book_id
