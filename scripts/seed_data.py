#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample authors and books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data
3. Registers sample authors and books through the service layer,
   so the duplicate checks apply exactly as they do for the API
"""

import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import SessionLocal, create_tables
from app.models import Author, Book
from app.services.authors import register_author
from app.services.books import register_book

SAMPLE_LIBRARY: dict[str, list[tuple[str, date]]] = {
    "George Orwell": [
        ("Animal Farm", date(1945, 8, 17)),
        ("Nineteen Eighty-Four", date(1949, 6, 8)),
    ],
    "Jane Austen": [
        ("Sense and Sensibility", date(1811, 10, 30)),
        ("Pride and Prejudice", date(1813, 1, 28)),
        ("Emma", date(1815, 12, 23)),
    ],
    "Ursula K. Le Guin": [
        ("A Wizard of Earthsea", date(1968, 11, 1)),
        ("The Left Hand of Darkness", date(1969, 3, 1)),
        ("The Dispossessed", date(1974, 5, 1)),
    ],
    "Haruki Murakami": [
        ("Norwegian Wood", date(1987, 9, 4)),
        ("Kafka on the Shore", date(2002, 9, 12)),
    ],
}


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.commit()
    print("Data cleared.")


def seed_database() -> None:
    """Clear the tables and register the sample library."""
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        clear_data(db)

        book_count = 0
        for name, books in SAMPLE_LIBRARY.items():
            author = register_author(db, name=name)
            for title, published_at in books:
                register_book(
                    db,
                    title=title,
                    author_id=author.id,
                    published_at=published_at,
                )
                book_count += 1

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Authors: {len(SAMPLE_LIBRARY)}")
        print(f"  - Books: {book_count}")
        print(f"\nAPI documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
