"""
SQLAlchemy Models Package

This package contains the database models for the Authors & Books API.

Model Relationships:
- Author -> Book: One-to-Many (an author owns many books,
                  every book references exactly one author)

Import all models here to:
1. Make them available as: from app.models import Author, Book
2. Ensure Alembic discovers them for migrations
"""

from app.models.author import Author
from app.models.book import Book

__all__ = [
    "Author",
    "Book",
]
