"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Validation: Different rules for create vs update vs response
3. Decoupling: Database schema can evolve independently of API
4. Documentation: Schemas generate OpenAPI documentation

Schema Naming Convention:
- XxxBase: Shared fields between create/response
- XxxCreate: Fields required when registering a new record
- XxxUpdate: Fields allowed when patching (all optional)
- XxxResponse: The entity as returned by the API, also the full state
  handed to the update services
"""

from app.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorResponse,
    AuthorUpdate,
)
from app.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
]
