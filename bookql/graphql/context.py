"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- Database session for the request
- BookResolver wired to a BookStore on that session

The context is created fresh for each GraphQL request and passed to all
resolvers via the `info` parameter. The session comes from the same get_db
dependency the REST routes use, so it is closed when the request ends and
can be overridden in tests through app.dependency_overrides.
"""

from fastapi import Depends
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from bookql.database import get_db
from bookql.graphql.resolvers import BookResolver
from bookql.services.book_store import BookStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Attributes:
        db: SQLAlchemy database session
        books: Book operations backed by a store on `db`
    """

    def __init__(self, db: Session, books: BookResolver):
        super().__init__()
        self.db = db
        self.books = books


async def get_context(db: Session = Depends(get_db)) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Called by Strawberry for every GraphQL request. FastAPI resolves the
    get_db dependency, and the store and resolver are built explicitly
    around the session it yields.
    """
    return GraphQLContext(db=db, books=BookResolver(BookStore(db)))
