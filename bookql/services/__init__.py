"""
Services Package

Persistence logic kept separate from the GraphQL layer so it can be tested
in isolation.

Current services:
- book_store.py: Book entity store (create, find-by-id, find-all)
"""

from bookql.services.book_store import BookStore

__all__ = ["BookStore"]
