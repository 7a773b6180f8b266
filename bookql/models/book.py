"""
Book Model

The only entity of the service. A Book is created once and never updated or
deleted through the API, so the model carries no timestamps or relationships.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bookql.database import Base


class Book(Base):
    """
    Book model representing a stored book.

    Table: books

    Fields:
    - id: Generated by the database on insert, never reused
    - title: Book title (required)
    - author: Author name as free text (required)

    Example:
        book = Book(title="Dune", author="Herbert")
    """

    __tablename__ = "books"

    # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT
    # is declared. Other dialects ignore this option.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
