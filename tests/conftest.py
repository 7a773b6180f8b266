"""
pytest Fixtures for the Book GraphQL API Tests

FIXTURE SCOPES:
- session scope for the engine (created once)
- function scope for sessions (each test runs in a transaction that is
  rolled back afterwards)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from bookql.database import Base, get_db
from bookql.main import app
from bookql.models import Book

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps the suite fast and self-contained.
# StaticPool keeps the single connection alive for the whole session;
# without it the in-memory database would disappear between connections.


@pytest.fixture(scope="session")
def engine():
    """Create a SQLite in-memory database engine with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite only opens a transaction lazily before DML, which breaks
    # SAVEPOINT. Take over transaction control so BEGIN is emitted when
    # the connection begins.
    @event.listens_for(engine, "connect")
    def disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is bound to a connection whose outer transaction is rolled
    back after the test, so commits made by the code under test (including
    AUTOINCREMENT bookkeeping) never leak into the next test. Session
    commits and rollbacks act on a SAVEPOINT inside that transaction, so a
    rollback in BookStore.save does not end the test transaction.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        join_transaction_mode="create_savepoint",
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test database.

    get_db is overridden, which covers both the REST routes and the GraphQL
    context getter since both resolve their session through it.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(title="Dune", author="Frank Herbert")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create several books, including two with identical fields."""
    books = [
        Book(title="Foundation", author="Isaac Asimov"),
        Book(title="The Hobbit", author="J.R.R. Tolkien"),
        Book(title="1984", author="George Orwell"),
        Book(title="1984", author="George Orwell"),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
