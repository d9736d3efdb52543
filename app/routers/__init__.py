"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Routers are thin adapters: they parse HTTP input into typed parameters,
call the service layer, and map results to status codes.

Router Structure:
- authors.py: /authors/* endpoints
- books.py: /books/* endpoints

Each router is imported and registered in main.py.
"""

from app.routers.authors import router as authors_router
from app.routers.books import router as books_router

__all__ = [
    "authors_router",
    "books_router",
]
