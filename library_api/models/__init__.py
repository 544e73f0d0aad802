"""
SQLAlchemy Models Package

The catalog has a single entity, Book. It is imported here so that
Alembic discovers it through Base.metadata and callers can write
``from library_api.models import Book``.
"""

from library_api.models.book import Book

__all__ = [
    "Book",
]
