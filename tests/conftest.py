"""
pytest Fixtures for the Authors & Books API Tests

FIXTURE SCOPES used here:
- session: the SQLite engine (expensive to create, shared by all tests)
- function: the database session and test client (isolation between tests)

Each test runs inside an outer transaction that is rolled back afterwards,
so tables start empty for every test, the same way the API tests of the
service clear both tables around each case.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, build_engine, get_db
from app.main import app
from app.models import Author, Book


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the connection alive for the entire session.
    Without it, SQLite in-memory database would disappear between connections.
    build_engine turns on foreign key enforcement for every connection.
    """
    engine = build_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session joins an outer transaction; commits made by the services
    stay inside it and everything is rolled back when the test ends.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# COMMITTING DATABASE FIXTURES
# =============================================================================
# Services roll back the session when the database rejects a write, which
# would also end the outer transaction above. Tests of those paths use a
# throwaway file database where every commit is real.

@pytest.fixture
def file_engine(tmp_path) -> Generator:
    """SQLite database file that lives for a single test."""
    engine = build_engine(
        f"sqlite:///{tmp_path}/library.db",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()


@pytest.fixture
def file_session(file_engine) -> Generator[Session, None, None]:
    """Session on the file database, used to insert test rows."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)()

    yield session

    session.close()


@pytest.fixture
def committing_client(file_engine) -> Generator[TestClient, None, None]:
    """
    Test client whose requests each get their own session on the file
    database, the same way get_db hands them out in production.
    """
    FileSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)

    def override_get_db():
        db = FileSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
# Rows are inserted directly with explicit ids, bypassing the services.

def insert_authors(db: Session, *rows: tuple[int, str]) -> list[Author]:
    """Insert (id, name) rows into the author table."""
    authors = [Author(id=author_id, name=name) for author_id, name in rows]
    db.add_all(authors)
    db.commit()
    return authors


def insert_books(db: Session, *rows: tuple[int, str, int, date]) -> list[Book]:
    """Insert (id, title, author_id, published_at) rows into the book table."""
    books = [
        Book(id=book_id, title=title, author_id=author_id, published_at=published_at)
        for book_id, title, author_id, published_at in rows
    ]
    db.add_all(books)
    db.commit()
    return books


@pytest.fixture
def three_authors(db_session: Session) -> list[Author]:
    """Two authors matching "target" and one that does not."""
    return insert_authors(
        db_session,
        (1, "target1"),
        (2, "target2"),
        (3, "except"),
    )


@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """A single author with id 1."""
    return insert_authors(db_session, (1, "author1"))[0]


@pytest.fixture
def sample_books(db_session: Session) -> list[Book]:
    """
    Five books by two authors.

    id  title       author  published_at
    1   aaaa        1       2020-01-01
    2   cccc        1       2021-06-15
    3   bbbb        1       2022-12-31
    4   dddd        2       2019-03-10
    5   aaaa        2       2023-07-01
    """
    insert_authors(db_session, (1, "author1"), (2, "author2"))
    return insert_books(
        db_session,
        (1, "aaaa", 1, date(2020, 1, 1)),
        (2, "cccc", 1, date(2021, 6, 15)),
        (3, "bbbb", 1, date(2022, 12, 31)),
        (4, "dddd", 2, date(2019, 3, 10)),
        (5, "aaaa", 2, date(2023, 7, 1)),
    )
