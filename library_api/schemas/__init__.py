"""
Pydantic Schemas Package

Request/response validation for the HTTP layer, kept apart from the
SQLAlchemy models so the API contract can evolve independently of the
table layout.

Schema Naming Convention:
- XxxBase: Shared fields between create/response
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookPageResponse,
    BookResponse,
    BookUpdate,
    PageableResponse,
    SortResponse,
)
from library_api.schemas.errors import ApiErrors

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookPageResponse",
    "PageableResponse",
    "SortResponse",
    # Error envelope
    "ApiErrors",
]
