"""
Services Package

Business logic kept separate from HTTP handling so it can be tested in
isolation with a mocked repository.

Current services:
- book_service.py: Catalog rules for books (ISBN uniqueness, id checks)
"""

from library_api.services.book_service import BookService

__all__ = [
    "BookService",
]
