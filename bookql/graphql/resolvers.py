"""
Book Resolvers

The operations behind the GraphQL schema, written as plain methods with no
Strawberry or FastAPI imports. Each method makes exactly one store call and
returns what the store returned.

The store is passed to the constructor; the GraphQL context getter builds one
BookResolver per request around that request's session.
"""

from bookql.models import Book
from bookql.services.book_store import BookStore


class BookResolver:
    """
    Adapts GraphQL operations to BookStore calls.

    Args:
        store: Entity store used by every operation
    """

    def __init__(self, store: BookStore):
        self.store = store

    def all_books(self) -> list[Book]:
        """Every stored book, in store order."""
        return self.store.find_all()

    def book_by_id(self, book_id: int) -> Book | None:
        """The book with this id, or None."""
        return self.store.find_by_id(book_id)

    def create_book(self, title: str, author: str) -> Book:
        """Persist a new book and return it with its assigned id."""
        book = Book(title=title, author=author)
        return self.store.save(book)
