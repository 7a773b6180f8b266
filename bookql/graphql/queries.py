"""
GraphQL Query Resolvers

Read operations of the GraphQL API. Each field delegates to the request's
BookResolver and converts the ORM result to a GraphQL type.
"""

import strawberry
from strawberry.types import Info

from bookql.graphql.context import GraphQLContext
from bookql.graphql.errors import parse_id
from bookql.graphql.types.book import BookType
from bookql.models import Book


def book_to_graphql(book: Book) -> BookType:
    """Convert SQLAlchemy Book model to GraphQL BookType."""
    return BookType(
        id=strawberry.ID(str(book.id)),
        title=book.title,
        author=book.author,
    )


@strawberry.type
class Query:
    """GraphQL Query type containing all read operations."""

    @strawberry.field(description="Get every stored book")
    def all_books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        books = info.context.books.all_books()
        return [book_to_graphql(b) for b in books]

    @strawberry.field(description="Get a single book by ID")
    def book_by_id(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
    ) -> BookType | None:
        """
        Get a single book by its ID.

        Returns:
            Book if found, None otherwise

        Raises:
            InvalidIdError: If `id` is not an integer
        """
        book = info.context.books.book_by_id(parse_id(id))

        if book is None:
            return None

        return book_to_graphql(book)
