"""
SQLAlchemy Models Package

Importing the models here registers them with Base.metadata, which is what
create_tables() and Alembic autogenerate rely on.
"""

from bookql.models.book import Book

__all__ = [
    "Book",
]
