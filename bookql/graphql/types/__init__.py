"""
GraphQL Types Package

Strawberry type definitions that map to the SQLAlchemy models.

Types defined here:
- BookType: A stored book
"""

from bookql.graphql.types.book import BookType

__all__ = [
    "BookType",
]
