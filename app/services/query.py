"""
Query Building Helpers

Shared building blocks for the search queries of the author and book
services:

- Column: the contract for a sortable/filterable column identifier
- WHERE helpers: optional filters that collapse to TRUE when absent
- ORDER BY helpers: turn a {column: ascending} mapping into clauses

Every WHERE helper returns an always-true condition for a missing
filter, so results can be AND-ed together without special cases:

    stmt = select(Book).where(
        and_(
            contains_condition(Book.title, title),
            equals_condition(Book.author_id, author_id),
            *range_conditions(Book.published_at, published_from, published_to),
        )
    )
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeVar

from sqlalchemy import ColumnElement, UnaryExpression, true
from sqlalchemy.orm import InstrumentedAttribute

T = TypeVar("T")
C = TypeVar("C", bound="Column")

LIKE_ESCAPE = "\\"


class Column(Protocol):
    """
    A logical column a resource can be sorted or filtered by.

    Implementations are enums (see AuthorColumn, BookColumn) whose members
    resolve to the ORM attribute they stand for. The helpers below only
    ever touch `.field`, so they work for any resource.
    """

    @property
    def field(self) -> InstrumentedAttribute: ...


# =============================================================================
# WHERE helpers
# =============================================================================
def true_if_empty(
    value: str | None,
    build: Callable[[str], ColumnElement[bool]],
) -> ColumnElement[bool]:
    """Return TRUE for an empty or missing string, otherwise build(value)."""
    if not value:
        return true()
    return build(value)


def true_if_none(
    value: T | None,
    build: Callable[[T], ColumnElement[bool]],
) -> ColumnElement[bool]:
    """Return TRUE when value is None, otherwise build(value)."""
    if value is None:
        return true()
    return build(value)


def escape_like(value: str) -> str:
    """
    Escape LIKE metacharacters so they match literally.

    The escape character goes first so the backslashes added for "%" and
    "_" are not doubled.

        >>> escape_like("100%_sure")
        '100\\\\%\\\\_sure'
    """
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def contains_condition(field: InstrumentedAttribute, text: str | None) -> ColumnElement[bool]:
    """
    Substring match of `text` against `field`.

    Case sensitivity follows the database collation (SQLite LIKE ignores
    ASCII case, PostgreSQL LIKE does not).
    """
    return true_if_empty(
        text,
        lambda v: field.like(f"%{escape_like(v)}%", escape=LIKE_ESCAPE),
    )


def equals_condition(field: InstrumentedAttribute, value: Any) -> ColumnElement[bool]:
    """Equality filter, TRUE when value is None."""
    return true_if_none(value, lambda v: field == v)


def range_conditions(
    field: InstrumentedAttribute,
    lower: Any = None,
    upper: Any = None,
) -> list[ColumnElement[bool]]:
    """Inclusive lower/upper bounds; each bound is optional on its own."""
    return [
        true_if_none(lower, lambda v: field >= v),
        true_if_none(upper, lambda v: field <= v),
    ]


# =============================================================================
# ORDER BY helpers
# =============================================================================
def to_order_by(sort: Mapping[C, bool]) -> list[UnaryExpression]:
    """Map {column: ascending} to ASC/DESC clauses, preserving order."""
    return [
        column.field.asc() if ascending else column.field.desc()
        for column, ascending in sort.items()
    ]


def with_tiebreaker(sort: Mapping[C, bool], column: C) -> dict[C, bool]:
    """
    Append `column` ascending unless the sort already uses it.

    Rows that tie on every requested key would otherwise come back in
    whatever order the database picks, which can differ between pages.
    """
    result = dict(sort)
    result.setdefault(column, True)
    return result
