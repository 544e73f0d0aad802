"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, clients, sample data)
- test_books.py: /api/v1/books endpoints
- test_book_service.py: catalog rules with a mocked repository
- test_book_repository.py: SQLAlchemy repository on SQLite
- test_pagination.py: paging value types
- test_config.py: settings validation

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=library_api --cov-report=html

    # Run specific file
    pytest tests/test_books.py
"""
