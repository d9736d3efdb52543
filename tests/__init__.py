"""
Test Suite for the Authors & Books API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: /authors endpoints
- test_books.py: /books endpoints
- test_sorting.py: sort parameter parsing
- test_query.py: WHERE / ORDER BY helpers
- test_services.py: service layer called directly

Running Tests:
    pytest
    pytest --cov=app --cov-report=html
    pytest tests/test_books.py -v
"""
