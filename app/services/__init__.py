"""
Services Package

Business logic separated from HTTP handling:
- Reusable outside the routers (seed script, tests)
- Easier to test in isolation

Current services:
- authors.py: author search, lookup, registration, update
- books.py: book search, lookup, registration, update
- query.py: column abstraction and WHERE / ORDER BY helpers shared by both
"""
