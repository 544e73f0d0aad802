"""
Library API Application Package

A small catalog service for book records: create, retrieve, update,
delete and paginated example-based search, with ISBN uniqueness enforced.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and session management
- exceptions.py: Business and argument errors raised by the core
- pagination.py: PageRequest / Page value types
- main.py: FastAPI application factory and error mapping
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: Storage gateway (existence checks, upsert, example search)
- services/: Catalog service (business rules)
- routers/: API route handlers
"""

__version__ = "0.1.0"
