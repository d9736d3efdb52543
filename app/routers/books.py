"""
Books Router

Search, register, fetch and patch books.

Query parameters use kebab-case (author-id, published-from), JSON bodies
use camelCase (authorId, publishedAt).
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from app.dependencies import BookFilters, DbSession, ListQuery
from app.models import Book
from app.schemas import BookCreate, BookResponse, BookUpdate
from app.services import books as book_service
from app.services.books import BookColumn
from app.utils.sorting import parse_sort

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)

# Accepted tokens of the `sort` query parameter
SORT_TOKENS = {
    "id": BookColumn.ID,
    "title": BookColumn.TITLE,
    "author-id": BookColumn.AUTHOR_ID,
    "published-at": BookColumn.PUBLISHED_AT,
}


# =============================================================================
# Helper Functions
# =============================================================================
def get_book_or_404(db: DbSession, book_id: int) -> Book:
    """
    Get a book by ID or raise 404.

    Raises:
        HTTPException: 404 if book not found
    """
    book = book_service.find_book_by_id(db, book_id)

    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Book with id {book_id} not found",
        )

    return book


# =============================================================================
# Endpoints
# =============================================================================
@router.get(
    "",
    response_model=List[BookResponse],
    summary="Search books",
    description="Search books by title, author and publication date range.",
)
def search_books(
    db: DbSession,
    params: ListQuery,
    filters: BookFilters,
) -> List[BookResponse]:
    """
    Search and filter books with sorting and pagination.

    Examples:
        GET /books?title=orwell
        GET /books?author-id=1&sort=-published-at
        GET /books?published-from=1900-01-01&published-to=1960-12-31&limit=5
    """
    books = book_service.search_books(
        db,
        title=filters.title,
        author_id=filters.author_id,
        published_from=filters.published_from,
        published_to=filters.published_to,
        sort=parse_sort(params.sort, SORT_TOKENS),
        offset=params.offset,
        limit=params.limit,
    )
    return [BookResponse.model_validate(book) for book in books]


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new book",
    description="Register a new book. Fails with 409 if the author already has it.",
    responses={
        409: {"description": "The author already has a book with this title"},
    },
)
def register_book(
    book_data: BookCreate,
    db: DbSession,
) -> BookResponse:
    """
    Register a new book.

    Returns:
        The created book, including its store-assigned id
    """
    book = book_service.register_book(
        db,
        title=book_data.title,
        author_id=book_data.author_id,
        published_at=book_data.published_at,
    )
    return BookResponse.model_validate(book)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(
    book_id: int,
    db: DbSession,
) -> BookResponse:
    """Get a single book by its ID."""
    book = get_book_or_404(db, book_id)
    return BookResponse.model_validate(book)


@router.patch(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book",
    description="Change the provided fields of a book; others keep their value.",
    responses={
        409: {"description": "The author already has a book with this title"},
    },
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> None:
    """
    Patch an existing book.

    model_dump(exclude_unset=True, exclude_none=True) keeps only the fields
    the client actually sent with a value; the rest come from the stored row.
    """
    current = BookResponse.model_validate(get_book_or_404(db, book_id))

    changes = book_data.model_dump(exclude_unset=True, exclude_none=True)
    book_service.update_book(db, current.model_copy(update=changes))
