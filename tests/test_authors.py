"""
Tests for Authors API Endpoints

Tests for /authors endpoints.
"""

from datetime import date

from fastapi import status
from sqlalchemy import func, select

from app.models import Author
from tests.conftest import insert_authors, insert_books


class TestSearchAuthors:
    """Tests for GET /authors endpoint."""

    def test_search_authors_empty(self, client):
        """Test searching when the table is empty returns an empty list."""
        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_search_authors_without_parameters(self, client, db_session):
        """Test all authors are returned in id order by default."""
        insert_authors(db_session, (1, "author1"), (2, "author2"), (3, "author3"))

        response = client.get("/authors")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {"id": 1, "name": "author1"},
            {"id": 2, "name": "author2"},
            {"id": 3, "name": "author3"},
        ]

    def test_search_authors_by_name(self, client, three_authors):
        """Test the name filter matches substrings."""
        response = client.get("/authors?name=target")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {"id": 1, "name": "target1"},
            {"id": 2, "name": "target2"},
        ]

    def test_search_authors_no_match(self, client, three_authors):
        """Test zero matches is not an error."""
        response = client.get("/authors?name=nobody")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_search_authors_name_wildcards_are_literal(self, client, db_session):
        """Test % and _ in the filter match only themselves."""
        insert_authors(
            db_session,
            (1, "100% fiction"),
            (2, "100 fiction"),
            (3, "a_b"),
            (4, "axb"),
        )

        response = client.get("/authors", params={"name": "100%"})
        assert [a["id"] for a in response.json()] == [1]

        response = client.get("/authors", params={"name": "a_b"})
        assert [a["id"] for a in response.json()] == [3]

    def test_search_authors_sort_descending(self, client, three_authors):
        """Test a leading '-' reverses the order."""
        response = client.get("/authors?sort=-id")

        assert response.status_code == status.HTTP_200_OK
        assert [a["id"] for a in response.json()] == [3, 2, 1]

    def test_search_authors_sort_by_name(self, client, three_authors):
        """Test sorting by name."""
        response = client.get("/authors?sort=name")

        assert [a["name"] for a in response.json()] == ["except", "target1", "target2"]

    def test_search_authors_unknown_sort_ignored(self, client, three_authors):
        """Test unknown sort tokens are dropped and the default order applies."""
        response = client.get("/authors?sort=bogus,-nope")

        assert response.status_code == status.HTTP_200_OK
        assert [a["id"] for a in response.json()] == [1, 2, 3]

    def test_search_authors_limit(self, client, three_authors):
        """Test limit caps the number of rows."""
        response = client.get("/authors?limit=2")

        assert [a["id"] for a in response.json()] == [1, 2]

    def test_search_authors_offset(self, client, three_authors):
        """Test offset skips rows."""
        response = client.get("/authors?offset=1")

        assert [a["id"] for a in response.json()] == [2, 3]

    def test_search_authors_limit_and_offset(self, client, three_authors):
        """Test limit and offset combined."""
        response = client.get("/authors?limit=2&offset=1")

        assert [a["id"] for a in response.json()] == [2, 3]

    def test_search_authors_invalid_pagination(self, client):
        """Test out-of-range pagination is rejected, not clamped."""
        assert client.get("/authors?limit=0").status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert client.get("/authors?limit=11").status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert client.get("/authors?offset=-1").status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestGetAuthor:
    """Tests for GET /authors/{author_id} endpoint."""

    def test_get_author_success(self, client, sample_author):
        """Test getting an author by ID."""
        response = client.get("/authors/1")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": 1, "name": "author1"}

    def test_get_author_not_found(self, client):
        """Test getting a non-existent author returns 404."""
        response = client.get("/authors/12")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()


class TestRegisterAuthor:
    """Tests for POST /authors endpoint."""

    def test_register_author(self, client, db_session):
        """Test registering returns 201 and the store-assigned id."""
        response = client.post("/authors", json={"name": "author1"})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "author1"

        stored = db_session.execute(
            select(Author).where(Author.name == "author1")
        ).scalar_one()
        assert data["id"] == stored.id

    def test_register_duplicate_author(self, client, sample_author, db_session):
        """Test registering an existing name returns 409 and inserts nothing."""
        response = client.post("/authors", json={"name": "author1"})

        assert response.status_code == status.HTTP_409_CONFLICT
        count = db_session.execute(select(func.count(Author.id))).scalar()
        assert count == 1

    def test_register_author_substring_of_existing(self, client, db_session):
        """Test a name contained in an existing name also counts as duplicate."""
        insert_authors(db_session, (1, "author11"))

        response = client.post("/authors", json={"name": "author1"})

        assert response.status_code == status.HTTP_409_CONFLICT

    def test_register_author_empty_name(self, client):
        """Test that a blank name is rejected."""
        response = client.post("/authors", json={"name": "   "})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_register_author_name_too_long(self, client):
        """Test that names over 255 characters are rejected."""
        response = client.post("/authors", json={"name": "x" * 256})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestUpdateAuthor:
    """Tests for PATCH /authors/{author_id} endpoint."""

    def test_update_author_name(self, client, sample_author):
        """Test patching the name, then reading it back."""
        response = client.patch("/authors/1", json={"name": "patched"})

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b""

        get_response = client.get("/authors/1")
        assert get_response.json() == {"id": 1, "name": "patched"}

    def test_update_author_empty_body_keeps_values(self, client, sample_author):
        """Test an empty patch leaves the author unchanged."""
        response = client.patch("/authors/1", json={})

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get("/authors/1").json() == {"id": 1, "name": "author1"}

    def test_update_author_not_found(self, client):
        """Test patching a non-existent author returns 404."""
        response = client.patch("/authors/12", json={"name": "patched"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestAuthorBooks:
    """Tests for GET /authors/{author_id}/books endpoint."""

    def test_get_author_books(self, client, db_session):
        """Test only the author's own books are listed."""
        insert_authors(db_session, (1, "author1"), (2, "author2"))
        published = date(2024, 1, 15)
        insert_books(
            db_session,
            (1, "book1", 1, published),
            (2, "book2", 1, published),
            (3, "book3", 2, published),
        )

        response = client.get("/authors/1/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {"id": 1, "title": "book1", "authorId": 1, "publishedAt": "2024-01-15"},
            {"id": 2, "title": "book2", "authorId": 1, "publishedAt": "2024-01-15"},
        ]

    def test_get_author_books_sorted(self, client, sample_books):
        """Test the book sort tokens apply to this endpoint too."""
        response = client.get("/authors/1/books?sort=-published-at")

        assert [b["id"] for b in response.json()] == [3, 2, 1]

    def test_get_author_books_empty(self, client, sample_author):
        """Test an author without books returns an empty list."""
        response = client.get("/authors/1/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_get_author_books_author_not_found(self, client):
        """Test listing books of a non-existent author returns 404."""
        response = client.get("/authors/12/books")

        assert response.status_code == status.HTTP_404_NOT_FOUND
