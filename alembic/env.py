"""
Alembic environment for the author and book tables.

The database URL and engine come from the application (app.config /
app.database), so migrations run against exactly what the API connects to.
SQLite targets use batch mode because SQLite cannot ALTER constraints.

    alembic upgrade head
    alembic upgrade head --sql > migration.sql
"""

from logging.config import fileConfig

from sqlalchemy.engine import make_url

from alembic import context

from app import models  # noqa: F401 - registers the tables on Base.metadata
from app.config import get_settings
from app.database import Base, engine

settings = get_settings()

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)

render_as_batch = make_url(settings.database_url).get_backend_name() == "sqlite"


def run_migrations_offline() -> None:
    """Emit the migration SQL for settings.database_url without connecting."""
    context.configure(
        url=settings.database_url,
        target_metadata=Base.metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=render_as_batch,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations through the application's engine."""
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=Base.metadata,
            compare_type=True,
            render_as_batch=render_as_batch,
        )

        with context.begin_transaction():
            context.run_migrations()

    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
