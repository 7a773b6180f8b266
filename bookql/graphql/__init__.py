"""
GraphQL Package

GraphQL API for books using Strawberry GraphQL, mounted on FastAPI.

Schema:
    type Query {
        allBooks: [Book!]!
        bookById(id: ID!): Book
    }

    type Mutation {
        createBook(title: String!, author: String!): Book!
    }

Example Query:
    query {
        bookById(id: "1") {
            id
            title
            author
        }
    }
"""

import strawberry
from graphql import GraphQLError
from sqlalchemy.exc import SQLAlchemyError
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter

from bookql.config import get_settings
from bookql.graphql.context import get_context
from bookql.graphql.mutations import Mutation
from bookql.graphql.queries import Query

settings = get_settings()

DATABASE_ERROR_MESSAGE = "A database error occurred. Please try again later."


def is_database_error(error: GraphQLError) -> bool:
    """True when the resolver failed with a SQLAlchemy error."""
    return isinstance(error.original_error, SQLAlchemyError)


def build_schema(debug: bool = False) -> strawberry.Schema:
    """
    Build the GraphQL schema.

    Outside debug mode, database errors are replaced by a generic message so
    driver and SQL details never reach clients. Strawberry still logs the
    original exception.
    """
    extensions = []
    if not debug:
        extensions.append(
            lambda: MaskErrors(
                should_mask_error=is_database_error,
                error_message=DATABASE_ERROR_MESSAGE,
            )
        )

    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        extensions=extensions,
    )


# Create the GraphQL schema
schema = build_schema(debug=settings.debug)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide_option,
    )


__all__ = ["schema", "build_schema", "create_graphql_router"]
