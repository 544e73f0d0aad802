"""
Repositories Package

Storage gateways consumed by the services. Services depend on the
abstract BookRepository; the application wires in the SQLAlchemy one.
"""

from library_api.repositories.book import BookRepository, SQLAlchemyBookRepository

__all__ = [
    "BookRepository",
    "SQLAlchemyBookRepository",
]
