#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

Books go through BookService, so the ISBN rule applies: running the script
twice without --clear skips the books that are already registered.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.config import get_settings
from library_api.database import SessionLocal, create_tables
from library_api.exceptions import DuplicateIsbnError
from library_api.models import Book
from library_api.repositories import SQLAlchemyBookRepository
from library_api.services import BookService

SAMPLE_BOOKS = [
    {"title": "As aventuras", "author": "Artur", "isbn": "001"},
    {"title": "1984", "author": "George Orwell", "isbn": "9780451524935"},
    {"title": "Animal Farm", "author": "George Orwell", "isbn": "9780451526342"},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "isbn": "9780141439518"},
    {"title": "Emma", "author": "Jane Austen", "isbn": "9780141439587"},
    {"title": "The Old Man and the Sea", "author": "Ernest Hemingway", "isbn": "9780684801223"},
    {"title": "Murder on the Orient Express", "author": "Agatha Christie", "isbn": "9780062693662"},
    {"title": "Foundation", "author": "Isaac Asimov", "isbn": "9780553293357"},
    {"title": "I, Robot", "author": "Isaac Asimov", "isbn": "9780553382563"},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "isbn": "9780547928227"},
    {"title": "Dom Casmurro", "author": "Machado de Assis", "isbn": "9788535910667"},
    {"title": "Memórias Póstumas de Brás Cubas", "author": "Machado de Assis", "isbn": "9788535911190"},
]


def clear_data(db: Session) -> None:
    """Delete every book."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(service: BookService) -> list[Book]:
    """Create the sample books, skipping ISBNs that are already registered."""
    print("Creating books...")
    books = []
    for data in SAMPLE_BOOKS:
        try:
            books.append(service.create(Book(**data)))
        except DuplicateIsbnError:
            print(f"  skipped {data['title']!r}: ISBN {data['isbn']} already registered")

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, deletes all books before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        repository = SQLAlchemyBookRepository(db, isbn_case_sensitive=settings.isbn_case_sensitive)
        books = create_books(BookService(repository))

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nSummary:")
        print(f"  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the catalog with sample books")
    parser.add_argument("--clear", action="store_true", help="delete all books first")
    args = parser.parse_args()
    seed_database(clear_existing=args.clear)
