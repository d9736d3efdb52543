"""
Sort Parameter Parsing

List endpoints accept a `sort` query parameter such as "-id,title":
a comma-separated list of column tokens, where a leading "-" means
descending order.

    >>> parse_sort("-id,title", {"id": "ID", "title": "TITLE"})
    {'ID': False, 'TITLE': True}
"""

from collections.abc import Mapping
from typing import TypeVar

T = TypeVar("T")

DESCENDING_PREFIX = "-"


def parse_sort(sort: str, columns: Mapping[str, T]) -> dict[T, bool]:
    """
    Convert a sort string into an ordered {column: ascending} mapping.

    Tokens missing from `columns` are dropped without error. If a column
    appears more than once, its first occurrence decides both its position
    and its direction.

    Args:
        sort: Raw query parameter value, e.g. "-published-at,title"
        columns: Accepted tokens and the column each one selects

    Returns:
        Mapping in input order; empty when nothing usable was given
    """
    result: dict[T, bool] = {}

    for segment in sort.split(","):
        token = segment.strip()
        if not token:
            continue

        ascending = True
        if token.startswith(DESCENDING_PREFIX):
            token = token[len(DESCENDING_PREFIX):]
            ascending = False

        column = columns.get(token)
        if column is None:
            continue

        result.setdefault(column, ascending)

    return result
