# File: backend/player_profile/cache/__init__.py

from .elo_cache import EloCache, connect_cache

__all__ = [
    "EloCache",
    "connect_cache",
]
