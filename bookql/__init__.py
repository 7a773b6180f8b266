"""
Book GraphQL API Package

A small GraphQL service over a single Book entity.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and get_db dependency
- dependencies.py: Annotated FastAPI dependency aliases
- main.py: FastAPI application factory
- models/: SQLAlchemy ORM models
- services/: Entity store (persistence operations)
- graphql/: Strawberry schema, context and resolvers
"""

__version__ = "0.1.0"
