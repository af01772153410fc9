# backend/player_profile/db/session.py
import logging
from sqlalchemy import create_engine, exc
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from .base_class import Base

# Logger for this module
logger = logging.getLogger(__name__)


def create_db_engine(database_url: str) -> Engine:
    """
    Creates the engine and opens one connection to prove the database is reachable.
    There is no retry: an unreachable database aborts startup.
    """
    kwargs = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        # In-memory SQLite only survives on a single shared connection.
        kwargs = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}

    created_engine = create_engine(database_url, **kwargs)
    try:
        with created_engine.connect():
            logger.info("Database connection successful during creation.")
    except exc.OperationalError as e:
        logger.error(f"Could not connect to the database: {e}")
        created_engine.dispose()
        raise
    return created_engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_tables(engine: Engine) -> None:
    """Auto-migrates the schema: creates any table that does not exist yet."""
    from .. import models  # noqa: F401  registers every model on Base.metadata

    Base.metadata.create_all(bind=engine)
