"""
GraphQL Mutation Resolvers

Write operations of the GraphQL API. Books can only be created; there are
no update or delete mutations.
"""

import strawberry
from strawberry.types import Info

from bookql.graphql.context import GraphQLContext
from bookql.graphql.queries import book_to_graphql
from bookql.graphql.types.book import BookType


@strawberry.type
class Mutation:
    """GraphQL Mutation type containing all write operations."""

    @strawberry.mutation(description="Create a new book")
    def create_book(
        self,
        info: Info[GraphQLContext, None],
        title: str,
        author: str,
    ) -> BookType:
        """
        Create a book and return it with its assigned ID.

        Both arguments are non-null in the schema, so Strawberry rejects
        requests that omit them before this resolver runs.
        """
        book = info.context.books.create_book(title=title, author=author)
        return book_to_graphql(book)
