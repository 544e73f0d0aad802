"""
Book Model

The only entity of the catalog.

Lifecycle:
- Built in memory by a caller with id=None
- Persisted by the repository, which assigns the id
- Updated in place (same id), deleted by id

A transient Book (never added to a session) is also what callers hand to
the search operation as an example: every attribute left as None is
unconstrained.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base


class Book(Base):
    """
    Book model representing a catalog record.

    Table: books

    Fields:
    - title: Book title (required, free text)
    - author: Author name (required, free text)
    - isbn: International Standard Book Number (unique)

    The unique index on isbn is the storage-level backstop for the
    service's check-then-insert uniqueness rule.

    Example:
        book = Book(title="As aventuras", author="Artur", isbn="001")
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
