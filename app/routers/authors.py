"""
Authors Router

Search, register, fetch and patch authors, and list an author's books.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from app.dependencies import DbSession, ListQuery
from app.models import Author
from app.routers.books import SORT_TOKENS as BOOK_SORT_TOKENS
from app.schemas import AuthorCreate, AuthorResponse, AuthorUpdate, BookResponse
from app.services import authors as author_service
from app.services import books as book_service
from app.services.authors import AuthorColumn
from app.utils.sorting import parse_sort

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        404: {"description": "Author not found"},
    },
)

# Accepted tokens of the `sort` query parameter
SORT_TOKENS = {
    "id": AuthorColumn.ID,
    "name": AuthorColumn.NAME,
}


def get_author_or_404(db: DbSession, author_id: int) -> Author:
    """Get an author by ID or raise 404."""
    author = author_service.find_author_by_id(db, author_id)

    if author is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Author with id {author_id} not found",
        )
    return author


@router.get(
    "",
    response_model=List[AuthorResponse],
    summary="Search authors",
    description="Search authors by name with sorting and pagination.",
)
def search_authors(
    db: DbSession,
    params: ListQuery,
    name: str = Query(
        default="",
        max_length=255,
        description="Filter by name (partial match)",
        examples=["orwell"],
    ),
) -> List[AuthorResponse]:
    """
    Search authors.

    Examples:
        GET /authors?name=target
        GET /authors?sort=-name,id&offset=10&limit=5
    """
    authors = author_service.search_authors(
        db,
        name=name,
        sort=parse_sort(params.sort, SORT_TOKENS),
        offset=params.offset,
        limit=params.limit,
    )
    return [AuthorResponse.model_validate(a) for a in authors]


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new author",
    description="Register a new author. Fails with 409 if the name is taken.",
    responses={
        409: {"description": "An author with a matching name already exists"},
    },
)
def register_author(
    author_data: AuthorCreate,
    db: DbSession,
) -> AuthorResponse:
    """Register a new author; DuplicateError becomes a 409 in app.main."""
    author = author_service.register_author(db, name=author_data.name)
    return AuthorResponse.model_validate(author)


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
)
def get_author(
    author_id: int,
    db: DbSession,
) -> AuthorResponse:
    """Get a single author by ID."""
    author = get_author_or_404(db, author_id)
    return AuthorResponse.model_validate(author)


@router.patch(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update an author",
    description="Change the provided fields of an author; others keep their value.",
    responses={
        409: {"description": "Another author already has the new name"},
    },
)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    db: DbSession,
) -> None:
    """
    Patch an existing author.

    Fields the client omitted (or sent as null) are filled in from the
    stored author, then the complete author is written back.
    """
    current = AuthorResponse.model_validate(get_author_or_404(db, author_id))

    changes = author_data.model_dump(exclude_unset=True, exclude_none=True)
    author_service.update_author(db, current.model_copy(update=changes))


@router.get(
    "/{author_id}/books",
    response_model=List[BookResponse],
    summary="Get books by author",
    description="List the books owned by an author.",
)
def get_author_books(
    author_id: int,
    db: DbSession,
    params: ListQuery,
) -> List[BookResponse]:
    """Books of one author, sortable with the same tokens as /books."""
    get_author_or_404(db, author_id)

    books = book_service.search_books(
        db,
        author_id=author_id,
        sort=parse_sort(params.sort, BOOK_SORT_TOKENS),
        offset=params.offset,
        limit=params.limit,
    )
    return [BookResponse.model_validate(book) for book in books]
