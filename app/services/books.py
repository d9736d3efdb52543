"""
Book Service

Search, lookup, registration and update of books.

Search supports:
- title: substring match (LIKE wildcards in the input match literally)
- author_id: exact owning author
- published_from / published_to: inclusive publication date bounds

All filters are optional and combined with AND.
"""

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from enum import Enum

from sqlalchemy import and_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import InstrumentedAttribute, Session

from app.config import get_settings
from app.exceptions import DuplicateError
from app.models import Book
from app.schemas import BookResponse
from app.services.query import (
    contains_condition,
    equals_condition,
    range_conditions,
    to_order_by,
    with_tiebreaker,
)

logger = logging.getLogger(__name__)
settings = get_settings()


class BookColumn(Enum):
    """Columns books can be sorted by."""

    ID = "id"
    TITLE = "title"
    AUTHOR_ID = "author_id"
    PUBLISHED_AT = "published_at"

    @property
    def field(self) -> InstrumentedAttribute:
        return getattr(Book, self.value)


DEFAULT_SORT: dict[BookColumn, bool] = {
    BookColumn.ID: True,
    BookColumn.TITLE: True,
    BookColumn.AUTHOR_ID: True,
}


def search_books(
    db: Session,
    title: str = "",
    author_id: int | None = None,
    published_from: date | None = None,
    published_to: date | None = None,
    sort: Mapping[BookColumn, bool] | None = None,
    offset: int = 0,
    limit: int = settings.search_default_limit,
) -> Sequence[Book]:
    """
    Search books with optional filters, ordering and pagination.

    An empty `sort` falls back to DEFAULT_SORT; id ascending is always
    appended as the final key so pages never overlap.

    Args:
        db: Database session
        title: Substring of the title, empty for no filter
        author_id: Owning author, None for no filter
        published_from: Earliest publication date (inclusive)
        published_to: Latest publication date (inclusive)
        sort: Ordered {column: ascending} mapping
        offset: Rows to skip
        limit: Maximum rows to return

    Returns:
        Matching books, possibly empty
    """
    order = with_tiebreaker(sort or DEFAULT_SORT, BookColumn.ID)

    condition = and_(
        contains_condition(Book.title, title),
        equals_condition(Book.author_id, author_id),
        *range_conditions(Book.published_at, published_from, published_to),
    )

    stmt = (
        select(Book)
        .where(condition)
        .order_by(*to_order_by(order))
        .offset(offset)
        .limit(limit)
    )
    logger.debug(
        f"Searching books: title={title!r} author_id={author_id} "
        f"published={published_from}..{published_to} offset={offset} limit={limit}"
    )
    return db.execute(stmt).scalars().all()


def find_book_by_id(db: Session, book_id: int) -> Book | None:
    """Get a book by ID, or None if it does not exist."""
    return db.get(Book, book_id)


def _check_duplicate(db: Session, title: str, author_id: int) -> None:
    if search_books(db, title=title, author_id=author_id):
        logger.warning(f"Rejected duplicate book: {title!r} by author {author_id}")
        raise DuplicateError(
            f"A book titled '{title}' by author {author_id} already exists"
        )


def register_book(
    db: Session,
    title: str,
    author_id: int,
    published_at: date,
) -> Book:
    """
    Create a new book unless the author already has one with that title.

    A missing author is not checked here: the foreign key rejects it and
    the IntegrityError propagates.

    Raises:
        DuplicateError: if the author already has a book whose title
            contains `title`
    """
    _check_duplicate(db, title, author_id)

    book = Book(title=title, author_id=author_id, published_at=published_at)
    db.add(book)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        _check_duplicate(db, title, author_id)
        raise
    db.refresh(book)

    logger.info(f"Registered book {book.id}: {book.title!r} by author {book.author_id}")
    return book


def update_book(db: Session, book: BookResponse) -> int:
    """
    Overwrite every field of the book with the given id.

    `book` must hold the complete desired state; the router fills in
    fields the client left out from the stored row.

    Returns:
        Number of rows updated (0 if the id does not exist)

    Raises:
        DuplicateError: if another book of the author already has that title
    """
    stmt = (
        update(Book)
        .where(Book.id == book.id)
        .values(
            title=book.title,
            author_id=book.author_id,
            published_at=book.published_at,
        )
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except IntegrityError:
        db.rollback()
        # Either the (title, author_id) constraint or the author foreign key
        clash = select(Book.id).where(
            Book.title == book.title,
            Book.author_id == book.author_id,
            Book.id != book.id,
        )
        if db.execute(clash).first() is not None:
            logger.warning(f"Rejected update of book {book.id}: {book.title!r} taken")
            raise DuplicateError(
                f"A book titled '{book.title}' by author {book.author_id} already exists"
            )
        raise

    logger.info(f"Updated book {book.id} ({result.rowcount} row(s))")
    return result.rowcount
