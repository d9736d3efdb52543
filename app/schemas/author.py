"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config: New way to configure models (replaces Config class)
- Field(): Define constraints and metadata
- field_validator: Validate and transform field values
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    WHY a Base schema?
    - DRY principle: Define validation rules once
    - Consistency: Same rules apply everywhere
    """

    name: str = Field(
        ...,  # ... means required (no default)
        min_length=1,
        max_length=255,
        description="Author's full name",
        examples=["George Orwell", "Jane Austen"],
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that name is not just whitespace.

        Raises:
            ValueError: If the name is blank
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """
    Schema for registering a new author.

    Usage in route:
        @router.post("/authors")
        def register(author_data: AuthorCreate):
            ...
    """
    pass


class AuthorUpdate(BaseModel):
    """
    Schema for patching an existing author.

    Omitted (or null) fields keep their stored value.
    """

    name: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author's full name",
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        """Validate name if provided."""
        if v is not None and not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip() if v else v


class AuthorResponse(AuthorBase):
    """
    Schema for author responses (what the API returns).

    from_attributes=True allows building this schema straight from an
    Author ORM instance:

        AuthorResponse.model_validate(author)
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
                "name": "George Orwell",
            }
        },
    )
