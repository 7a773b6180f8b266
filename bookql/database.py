"""
Database Configuration Module

Sets up synchronous SQLAlchemy 2.0 for the Book store.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session
2. Use session for all database operations in that request
3. Commit on success, rollback on failure (see BookStore.save)
4. Close session when request ends

This is implemented with the get_db() generator dependency, which both the
REST routes and the GraphQL context getter resolve through FastAPI.
"""

from collections.abc import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookql.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
def build_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    Server databases get a sized connection pool with pre-ping so stale
    connections are replaced transparently. SQLite has no server-side pool
    and refuses to share connections across threads unless told otherwise,
    so it only gets check_same_thread=False.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=settings.debug,
        )

    return create_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,  # Verify connections are alive before using
        echo=settings.debug,  # Log SQL in debug mode
    )


engine = build_engine(settings.database_url)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: BookStore.save decides when to commit
# - autoflush=False: no implicit flush before queries

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic reads Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields a new session and closes it when the request ends, even if the
    handler raised.

    Usage:
        from fastapi import Depends
        from bookql.database import get_db

        @router.get("/health")
        def health(db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Intended for development and tests. Production databases are managed
    with Alembic migrations.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and tests only.
    """
    Base.metadata.drop_all(bind=engine)
