"""
GraphQL Book Type

Defines the Book type returned by every query and mutation.
"""

import strawberry


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    Maps to the Book SQLAlchemy model. The id is exposed as a GraphQL ID,
    which is serialized as a string.
    """

    id: strawberry.ID
    title: str
    author: str
