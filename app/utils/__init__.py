"""
Utilities Package

Helper functions used across the application:
- sorting.py: parse the `sort` query parameter into an ordered sort mapping
"""
