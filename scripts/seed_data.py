#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books for development.

USAGE:
    # From the project root with the virtualenv activated
    python scripts/seed_data.py

    # Remove existing books first
    python scripts/seed_data.py --clear

Books are inserted through BookStore.save, the same path the createBook
mutation uses, so identifiers are assigned by the database.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookql.database import SessionLocal, create_tables
from bookql.models import Book
from bookql.services.book_store import BookStore

SAMPLE_BOOKS = [
    ("Dune", "Frank Herbert"),
    ("1984", "George Orwell"),
    ("Pride and Prejudice", "Jane Austen"),
    ("The Old Man and the Sea", "Ernest Hemingway"),
    ("Murder on the Orient Express", "Agatha Christie"),
    ("Foundation", "Isaac Asimov"),
    ("The Hobbit", "J.R.R. Tolkien"),
]


def clear_data(db: Session) -> None:
    """Delete every stored book."""
    print("Clearing existing books...")
    db.execute(delete(Book))
    db.commit()
    print("Books cleared.")


def create_books(db: Session) -> list[Book]:
    """Insert the sample books."""
    print("Creating books...")
    store = BookStore(db)
    books = [
        store.save(Book(title=title, author=author))
        for title, author in SAMPLE_BOOKS
    ]
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, deletes existing books before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    # Create tables if they don't exist
    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        for book in books:
            print(f"  [{book.id}] {book.title} - {book.author}")
        print("\nGraphQL endpoint at http://localhost:8001/graphql")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the database with sample books"
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing books before seeding"
    )

    args = parser.parse_args()
    seed_database(clear_existing=args.clear)


if __name__ == "__main__":
    main()
