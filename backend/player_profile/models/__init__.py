# File: backend/player_profile/models/__init__.py

from .player import Player

__all__ = [
    "Player",
]
