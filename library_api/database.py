"""
Database Configuration Module

This module sets up synchronous SQLAlchemy 2.0 for the Library API.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. The repository uses that session for every call in the request
3. The repository commits its own writes; failures roll back
4. Session is closed when the request ends

This is implemented using FastAPI's dependency injection (get_db).
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from library_api.config import get_settings

settings = get_settings()


def _engine_options() -> dict[str, Any]:
    """
    Build create_engine() keyword arguments for the configured database.

    SQLite does not support connection pool sizing and refuses to share a
    connection across threads unless check_same_thread is disabled, which
    FastAPI's threadpool needs.
    """
    if settings.is_sqlite:
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,  # Verify connections are alive before using
    }


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def use_unicode_lower(sqlite_engine: Engine) -> None:
    """
    Replace SQLite's lower() with Python's str.lower on every new connection.

    The built-in lower() only folds ASCII, so case-insensitive search
    (``lower(column) LIKE lower(:value)``) would miss "MEMÓRIAS" vs
    "Memórias". PostgreSQL's lower() is already locale aware.
    """

    @event.listens_for(sqlite_engine, "connect")
    def _register_lower(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


# =============================================================================
# Database Engine
# =============================================================================
engine = create_engine(
    settings.database_url,
    echo=settings.debug,  # Log SQL in debug mode
    **_engine_options(),
)
if settings.is_sqlite:
    use_unicode_lower(engine)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: We control when to commit
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover models for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it,
    even when the route raised.

    Usage in Routes:
        from fastapi import Depends
        from library_api.database import get_db

        @router.get("/books/")
        def get_books(db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and tests. In production, use Alembic migrations.
    """
    # Import models so they are registered on Base.metadata
    import library_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development or tests.
    """
    Base.metadata.drop_all(bind=engine)
