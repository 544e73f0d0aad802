"""
pytest Fixtures for Library API Tests

Shared fixtures used across all test files.

For database tests, we use:
- a fresh in-memory SQLite engine per test (the repository commits and
  rolls back for real, so tests cannot share one outer transaction)
- a session per test, also injected into the app through get_db
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTO_CREATE_TABLES"] = "false"

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, get_db, use_unicode_lower
from library_api.dependencies import get_book_service
from library_api.main import app
from library_api.models import Book
from library_api.repositories import SQLAlchemyBookRepository
from library_api.services import BookService

# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture
def engine():
    """
    Create a SQLite in-memory database engine with all tables.

    StaticPool keeps the single connection alive for the whole test.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    use_unicode_lower(engine)
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def repository(db_session: Session) -> SQLAlchemyBookRepository:
    """Repository on the test session, case-sensitive ISBN comparison."""
    return SQLAlchemyBookRepository(db_session)


@pytest.fixture
def service(repository: SQLAlchemyBookRepository) -> BookService:
    """Catalog service on a real repository."""
    return BookService(repository)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency so routes use the test session.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def mock_service() -> MagicMock:
    """BookService stand-in for route tests that stub the catalog."""
    return MagicMock(spec=BookService)


@pytest.fixture
def mocked_client(mock_service: MagicMock) -> Generator[TestClient, None, None]:
    """Test client whose routes talk to mock_service instead of a database."""
    app.dependency_overrides[get_book_service] = lambda: mock_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


def persist(db_session: Session, *books: Book) -> list[Book]:
    """Insert books directly, bypassing the service."""
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return list(books)


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """A stored book."""
    [book] = persist(db_session, Book(title="As aventuras", author="Artur", isbn="001"))
    return book


@pytest.fixture
def search_books(db_session: Session) -> list[Book]:
    """A small, varied catalog for search tests."""
    return persist(
        db_session,
        Book(title="As aventuras", author="Artur", isbn="001"),
        Book(title="Other", author="Fulano", isbn="002"),
        Book(title="Novas Aventuras do Artur", author="Beltrano", isbn="003"),
        Book(title="1984", author="George Orwell", isbn="9780451524935"),
        Book(title="Animal Farm", author="George Orwell", isbn="9780451526342"),
    )


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create multiple books for pagination testing."""
    return persist(
        db_session,
        *[
            Book(title=f"Test Book {i + 1:02d}", author="Fulano", isbn=f"97800000000{i:02d}")
            for i in range(15)
        ],
    )
