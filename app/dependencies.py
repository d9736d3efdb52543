"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

WHY Dependency Injection?
=========================
1. Reusability: Write once, use in many routes
2. Testing: Easy to override dependencies in tests (see tests/conftest.py)
3. Separation of Concerns: Routes only translate HTTP to service calls

Dependencies defined here:
- DbSession: per-request database session
- ListParams: sort / offset / limit shared by every list endpoint
- BookFilters: extra filters of the book search
"""

from datetime import date
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def search(db: Session = Depends(get_db)):
#
# You can write:
#   def search(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# List Parameters
# =============================================================================
class ListParams:
    """
    Sorting and pagination parameters for list endpoints.

    - sort: comma-separated column tokens, "-" prefix for descending
    - offset: rows to skip (0-based)
    - limit: rows to return, between 1 and settings.search_max_limit

    Out-of-range values are rejected with 422 rather than clamped.

    Usage in route:
        @router.get("/books")
        def search(db: DbSession, params: ListQuery):
            sort = parse_sort(params.sort, SORT_TOKENS)
    """

    def __init__(
        self,
        sort: str = Query(
            default="",
            description="Comma-separated sort keys, prefix with '-' for descending",
            examples=["-id", "title,-published-at"],
        ),
        offset: int = Query(
            default=0,
            ge=0,
            description="Number of rows to skip",
            examples=[0, 10],
        ),
        limit: int = Query(
            default=settings.search_default_limit,
            ge=1,
            le=settings.search_max_limit,
            description=f"Number of rows to return (max {settings.search_max_limit})",
            examples=[5, 10],
        ),
    ) -> None:
        self.sort = sort
        self.offset = offset
        self.limit = limit


ListQuery = Annotated[ListParams, Depends()]


# =============================================================================
# Book Search Filters
# =============================================================================
class BookSearchParams:
    """
    Filter parameters for the book search.

    All parameters are optional and combined with AND. A filter that is
    present must carry a value: `?author-id=` is rejected with 422.

    Usage:
        GET /books?title=orwell&author-id=1
        GET /books?published-from=1940-01-01&published-to=1960-12-31
    """

    def __init__(
        self,
        title: str = Query(
            default="",
            max_length=255,
            description="Filter by title (partial match)",
            examples=["1984", "pride"],
        ),
        author_id: int | None = Query(
            default=None,
            alias="author-id",
            description="Filter by owning author ID",
            examples=[1, 2],
        ),
        published_from: date | None = Query(
            default=None,
            alias="published-from",
            description="Earliest publication date (inclusive, YYYY-MM-DD)",
            examples=["1940-01-01"],
        ),
        published_to: date | None = Query(
            default=None,
            alias="published-to",
            description="Latest publication date (inclusive, YYYY-MM-DD)",
            examples=["1960-12-31"],
        ),
    ) -> None:
        self.title = title
        self.author_id = author_id
        self.published_from = published_from
        self.published_to = published_to


BookFilters = Annotated[BookSearchParams, Depends()]
