"""
Alembic Environment Configuration

Runs migrations for the books database.

The database URL comes from bookql.config.Settings (DATABASE_URL), never from
alembic.ini, so the app and its migrations always target the same database.

COMMANDS:
- alembic upgrade head                           # Apply all migrations
- alembic downgrade -1                           # Rollback one migration
- alembic revision --autogenerate -m "message"   # Create migration from models
- alembic upgrade head --sql                     # Print SQL instead of running it
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from bookql.config import get_settings
from bookql.database import Base
from bookql.models import Book  # noqa: F401 - registers the books table

settings = get_settings()

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# SQLite cannot ALTER most column properties in place; batch mode makes
# Alembic recreate the table instead.
render_as_batch = settings.is_sqlite


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without connecting to the database."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=render_as_batch,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect to the database and apply migrations."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # One-shot process, no pooling
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=render_as_batch,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
