# backend/alembic/env.py
import os
import sys
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context

# Makes the 'player_profile' package importable when env.py runs from backend/alembic/.
sys.path.insert(0, os.path.realpath(os.path.join(os.path.dirname(__file__), '..')))


from player_profile.db.base_class import Base
from player_profile.models.player import Player  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

def get_url() -> str | None:
    db_url_env = os.getenv("DATABASE_URL")
    if db_url_env:
        return db_url_env

    ini_url = config.get_main_option("sqlalchemy.url")
    if ini_url == "PLEASE_SET_DATABASE_URL_ENV_VAR":
        return None
    return ini_url

def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = get_url()
    if url is None:
        raise ValueError(
            "Database URL not found for offline migration. "
            "Set DATABASE_URL environment variable or sqlalchemy.url in alembic.ini."
        )

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    db_config_section_dict = config.get_section(config.config_ini_section)
    if db_config_section_dict is None:
        raise ValueError(
            f"Alembic configuration section '{config.config_ini_section}' "
            "not found in alembic.ini. Cannot configure database for online migrations."
        )

    db_url = get_url()
    if db_url is None:
        raise ValueError(
            "Database URL not found for online migration. "
            "Set DATABASE_URL environment variable or sqlalchemy.url in alembic.ini."
        )
    db_config_section_dict['sqlalchemy.url'] = db_url

    connectable = engine_from_config(
        db_config_section_dict,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
