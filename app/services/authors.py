"""
Author Service

Search, lookup, registration and update of authors.

Routers call these functions with the request's Session; every function
runs its statements on that session and commits its own writes.
"""

import logging
from collections.abc import Mapping, Sequence
from enum import Enum

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import InstrumentedAttribute, Session

from app.config import get_settings
from app.exceptions import DuplicateError
from app.models import Author
from app.schemas import AuthorResponse
from app.services.query import contains_condition, to_order_by, with_tiebreaker

logger = logging.getLogger(__name__)
settings = get_settings()


class AuthorColumn(Enum):
    """Columns authors can be sorted by."""

    ID = "id"
    NAME = "name"

    @property
    def field(self) -> InstrumentedAttribute:
        return getattr(Author, self.value)


DEFAULT_SORT: dict[AuthorColumn, bool] = {
    AuthorColumn.ID: True,
    AuthorColumn.NAME: True,
}


def search_authors(
    db: Session,
    name: str = "",
    sort: Mapping[AuthorColumn, bool] | None = None,
    offset: int = 0,
    limit: int = settings.search_default_limit,
) -> Sequence[Author]:
    """
    Search authors whose name contains `name`.

    An empty `name` matches every author. An empty `sort` falls back to
    DEFAULT_SORT; id ascending is always appended as the final key.

    Args:
        db: Database session
        name: Substring to look for (LIKE wildcards are matched literally)
        sort: Ordered {column: ascending} mapping
        offset: Rows to skip
        limit: Maximum rows to return

    Returns:
        Matching authors, possibly empty
    """
    order = with_tiebreaker(sort or DEFAULT_SORT, AuthorColumn.ID)

    stmt = (
        select(Author)
        .where(contains_condition(Author.name, name))
        .order_by(*to_order_by(order))
        .offset(offset)
        .limit(limit)
    )
    logger.debug(f"Searching authors: name={name!r} offset={offset} limit={limit}")
    return db.execute(stmt).scalars().all()


def find_author_by_id(db: Session, author_id: int) -> Author | None:
    """Get an author by ID, or None if it does not exist."""
    return db.get(Author, author_id)


def _check_duplicate(db: Session, name: str) -> None:
    # Substring match, not equality: "author1" is reported as a duplicate
    # when "author11" already exists.
    if search_authors(db, name=name):
        logger.warning(f"Rejected duplicate author: {name!r}")
        raise DuplicateError(f"An author named '{name}' already exists")


def register_author(db: Session, name: str) -> Author:
    """
    Create a new author unless one with a matching name exists.

    Raises:
        DuplicateError: if an existing author's name contains `name`
    """
    _check_duplicate(db, name)

    author = Author(name=name)
    db.add(author)
    try:
        db.commit()
    except IntegrityError:
        # Another request inserted the same name after our check
        db.rollback()
        _check_duplicate(db, name)
        raise
    db.refresh(author)

    logger.info(f"Registered author {author.id}: {author.name!r}")
    return author


def update_author(db: Session, author: AuthorResponse) -> int:
    """
    Overwrite every field of the author with the given id.

    The caller resolves partial updates beforehand: `author` must hold the
    complete desired state.

    Returns:
        Number of rows updated (0 if the id does not exist)

    Raises:
        DuplicateError: if another author already has the new name
    """
    stmt = (
        update(Author)
        .where(Author.id == author.id)
        .values(name=author.name)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except IntegrityError as exc:
        # name is the only constrained column
        db.rollback()
        logger.warning(f"Rejected rename of author {author.id} to {author.name!r}")
        raise DuplicateError(f"An author named '{author.name}' already exists") from exc

    logger.info(f"Updated author {author.id} ({result.rowcount} row(s))")
    return result.rowcount
