# backend/player_profile/core/context.py
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ..cache.elo_cache import EloCache, connect_cache
from ..db import session as db_session
from .config import Settings

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Process-wide handles to the external stores. Built once at startup,
    handed to each request through dependencies, released at shutdown.
    """
    engine: Engine
    session_factory: sessionmaker
    cache: Optional[EloCache] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        if not settings.DATABASE_URL:
            raise ValueError("DATABASE_URL is not set in the environment or configuration.")

        engine = db_session.create_db_engine(str(settings.DATABASE_URL))
        db_session.create_tables(engine)
        logger.info("Database tables verified/created successfully.")

        cache = connect_cache(settings.REDIS_ADDR, ttl_seconds=settings.ELO_CACHE_TTL_SECONDS)
        return cls(
            engine=engine,
            session_factory=db_session.create_session_factory(engine),
            cache=cache,
        )

    def close(self) -> None:
        if self.cache is not None:
            self.cache.close()
            logger.info("Elo cache connection closed.")
        self.engine.dispose()
        logger.info("Database engine disposed.")
