# File: backend/player_profile/schemas/__init__.py

from .player import ErrorResponse, Message, Player, PlayerCreate, PlayerUpdate

__all__ = [
    "ErrorResponse",
    "Message",
    "Player",
    "PlayerCreate",
    "PlayerUpdate",
]
