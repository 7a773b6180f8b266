"""
Book Store Service

The entity store for books and the only component that assigns
identifiers. Every operation is a single statement against the `books`
table through the session passed in at construction time.

Failure semantics:
- A missing book is a normal outcome (find_by_id returns None).
- Database faults (lost connection, constraint violation) are raised as the
  original SQLAlchemyError. save() rolls the session back first so a failed
  insert leaves nothing behind. Nothing is retried.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookql.models import Book

logger = logging.getLogger(__name__)


class BookStore:
    """
    Persistence operations for Book records.

    Args:
        db: Database session, owned by the caller (one per request)
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Book]:
        """
        Return every stored book.

        No ORDER BY is applied: the order is whatever the database returns.
        """
        stmt = select(Book)
        return list(self.db.execute(stmt).scalars().all())

    def find_by_id(self, book_id: int) -> Book | None:
        """Return the book with the given id, or None if there is none."""
        stmt = select(Book).where(Book.id == book_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def save(self, book: Book) -> Book:
        """
        Insert a new book and return it with its generated id.

        The insert is committed before returning. On failure the session is
        rolled back and the database error is re-raised unchanged.

        Args:
            book: Transient Book with title and author set and no id

        Returns:
            The same Book instance, now persistent and carrying its id
        """
        try:
            self.db.add(book)
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError:
            self.db.rollback()
            logger.error(f"Failed to save book '{book.title}', rolled back")
            raise

        logger.info(f"Created book {book.id}: '{book.title}' by {book.author}")
        return book
