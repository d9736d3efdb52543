"""
Book Model

Books reference their owning author through author.id.

The (title, author_id) pair is unique. Registration checks this in the
service layer first to produce a clean Duplicate error; the table
constraint is the backstop for concurrent inserts.
"""

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.author import Author


class Book(Base):
    """
    Book model representing books in the library.

    Table: book

    Fields:
    - title: Book title (required, max 255 chars)
    - author_id: Owning author (required, foreign key)
    - published_at: Publication date (required)

    Example:
        book = Book(
            title="1984",
            author_id=1,
            published_at=date(1949, 6, 8),
        )
    """

    __tablename__ = "book"
    __table_args__ = (
        UniqueConstraint("title", "author_id", name="uq_book_title_author_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author_id: Mapped[int] = mapped_column(
        ForeignKey("author.id"),
        index=True,
        nullable=False,
        comment="Owning author"
    )

    # Date (not DateTime) because we only care about the day, not time
    published_at: Mapped[date] = mapped_column(
        Date,
        index=True,
        nullable=False,
        comment="Date of publication"
    )

    author: Mapped["Author"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author_id={self.author_id})"
