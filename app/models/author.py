"""
Author Model

Represents an author in the books database.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): Define relationships between models
"""

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

# TYPE_CHECKING is True only during type checking (mypy, IDE)
# This prevents circular imports at runtime while enabling type hints
if TYPE_CHECKING:
    from app.models.book import Book


class Author(Base):
    """
    Author model representing writers in the system.

    Table: author

    Relationships:
    - books: One-to-Many, the books whose author_id points here

    Constraints:
    - name is unique; registration checks for duplicates before inserting,
      the constraint catches writers that race past that check

    Example:
        author = Author(name="George Orwell")
        db.add(author)
        db.commit()
    """

    __tablename__ = "author"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Author's full name"
    )

    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
    )

    def __repr__(self) -> str:
        """
        Developer-friendly string representation.

            >>> print(Author(id=1, name="George Orwell"))
            Author(id=1, name='George Orwell')
        """
        return f"Author(id={self.id}, name='{self.name}')"
