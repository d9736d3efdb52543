"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Authors & Books API.

We use SYNCHRONOUS SQLAlchemy: every service call is a handful of
single-table statements, so a plain Session per request is enough.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Services commit on success; failures propagate to the exception handlers
4. Close session when request ends

This is implemented using FastAPI's dependency injection (get_db).
"""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size / max_overflow: connection pool sizing (server databases only)
# - pool_pre_ping: Test connection health before using (prevents stale connections)
# - echo: Log all SQL statements (useful for debugging, disable in production)

def build_engine(database_url: str, **kwargs: Any) -> Engine:
    """
    Create an engine for the given URL.

    SQLite does not take pool sizing arguments, and only enforces foreign
    keys when asked to on every new connection.
    """
    url = make_url(database_url)
    options: dict[str, Any] = {"echo": settings.debug, "pool_pre_ping": True}

    if url.get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow

    options.update(kwargs)
    new_engine = create_engine(url, **options)

    if url.get_backend_name() == "sqlite":
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)

    return new_engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = build_engine(settings.database_url)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: services decide when to commit
# - autoflush=False: Don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    - Code before yield: create the session
    - yield: provide it to the route handler
    - finally: close it when the request ends, even on errors

    Usage in Routes:
        @router.get("/authors")
        def search(db: DbSession):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Development and test helper. In production, use Alembic migrations instead.
    """
    Base.metadata.create_all(bind=engine)
