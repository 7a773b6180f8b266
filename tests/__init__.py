"""
Test Suite for the Book GraphQL API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample books)
- test_book_store.py: BookStore persistence operations
- test_resolvers.py: BookResolver delegation, using a fake store
- test_graphql.py: End-to-end GraphQL queries and mutations over HTTP
- test_app.py: Health/root endpoints and settings validation

Running Tests:
    pytest
    pytest tests/test_graphql.py
    pytest -v
"""
