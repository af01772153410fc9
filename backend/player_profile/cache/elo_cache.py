# backend/player_profile/cache/elo_cache.py
"""
Advisory side-cache for a player's elo.

Nothing here is allowed to fail a request: every Redis error is logged and
swallowed, and a service started without a reachable Redis simply runs
with ``cache=None``.
"""
import logging
from typing import Optional

import redis

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


def elo_key(player_id) -> str:
    return f"player:{player_id}:elo"


class EloCache:
    def __init__(self, client: redis.Redis, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        self._client = client
        self._ttl_seconds = ttl_seconds

    def get_elo(self, player_id) -> Optional[int]:
        try:
            raw = self._client.get(elo_key(player_id))
        except redis.RedisError as e:
            logger.debug(f"Elo cache read failed for player {player_id}: {e}")
            return None
        if raw is None:
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-integer cached elo for player {player_id}: {raw!r}")
            return None

    def set_elo(self, player_id, elo: int) -> None:
        try:
            self._client.set(elo_key(player_id), elo, ex=self._ttl_seconds)
        except redis.RedisError as e:
            logger.debug(f"Elo cache write failed for player {player_id}: {e}")

    def close(self) -> None:
        try:
            self._client.close()
        except redis.RedisError as e:
            logger.warning(f"Error closing elo cache connection: {e}")


def connect_cache(addr: str, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> Optional[EloCache]:
    """
    Connects to Redis at ``host:port`` and pings it once.
    Returns None, and the service continues without a cache, when the address
    is empty or the ping fails.
    """
    if not addr:
        logger.info("No Redis address configured, running without elo cache.")
        return None

    host, _, port = addr.rpartition(":")
    if not host:
        host, port = addr, "6379"
    try:
        client = redis.Redis(host=host, port=int(port), db=0)
        client.ping()
    except (redis.RedisError, ValueError) as e:
        logger.warning(f"Failed to connect to Redis at {addr}, continuing without cache: {e}")
        return None

    logger.info(f"Connected to Redis at {addr}.")
    return EloCache(client, ttl_seconds=ttl_seconds)
