"""
Book Pydantic Schemas

JSON bodies use camelCase keys (authorId, publishedAt), generated from the
snake_case attribute names. Requests may use either spelling.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author_id: int = Field(
        ...,
        gt=0,
        description="ID of the owning author",
        examples=[1],
    )

    published_at: date = Field(
        ...,
        description="Date of publication",
        examples=["1949-06-08"],
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for registering a new book.

    Example request body:
    {
        "title": "1984",
        "authorId": 1,
        "publishedAt": "1949-06-08"
    }
    """
    pass


class BookUpdate(BaseModel):
    """
    Schema for patching an existing book.

    All fields are optional; omitted (or null) fields keep their stored value.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Book title",
    )

    author_id: int | None = Field(
        default=None,
        gt=0,
        description="ID of the owning author",
    )

    published_at: date | None = Field(
        default=None,
        description="Date of publication",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str | None:
        """Validate title if provided."""
        if v is not None and not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip() if v else v


class BookResponse(BookBase):
    """
    Schema for book responses.

    Built from Book ORM instances via from_attributes=True.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "1984",
                "authorId": 1,
                "publishedAt": "1949-06-08",
            }
        },
    )
