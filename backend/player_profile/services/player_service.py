# backend/player_profile/services/player_service.py
"""
Service layer for player profiles.

Validates the identifying fields, enforces nickname uniqueness on creation,
and wraps every data-access failure with context before handing it up to
the transport layer.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from .. import crud, models, schemas
from ..cache.elo_cache import EloCache
from ..core.exceptions import ConflictError, ProfileError, ValidationError

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(self, db: Session, cache: Optional[EloCache] = None):
        self.db = db
        self.cache = cache

    def get_player_by_id(self, player_id: str) -> models.Player:
        if not player_id:
            raise ValidationError("player ID is required")

        try:
            return crud.crud_player.get_player(self.db, player_id, cache=self.cache)
        except ProfileError as e:
            logger.error(f"Failed to get player by ID {player_id}: {e}")
            raise e.wrap("player not found") from e

    def get_player_by_nickname(self, nickname: str) -> models.Player:
        if not nickname:
            raise ValidationError("nickname is required")

        try:
            return crud.crud_player.get_player_by_nickname(self.db, nickname)
        except ProfileError as e:
            logger.error(f"Failed to get player by nickname '{nickname}': {e}")
            raise e.wrap("player not found") from e

    def create_player(self, player_in: schemas.PlayerCreate) -> models.Player:
        if not player_in.nickname:
            raise ValidationError("nickname is required")

        # Only active players count; a lookup miss or failure both mean "free".
        try:
            crud.crud_player.get_player_by_nickname(self.db, player_in.nickname)
        except ProfileError:
            pass
        else:
            raise ConflictError(f"player with nickname {player_in.nickname} already exists")

        try:
            player = crud.crud_player.create_player(self.db, player_in=player_in)
        except ProfileError as e:
            logger.error(f"Failed to create player '{player_in.nickname}': {e}")
            raise e.wrap("failed to create player") from e

        logger.info(f"Player created: id={player.id} nickname='{player.nickname}'")
        return player

    def update_player(self, player_id: str, updates: schemas.PlayerUpdate) -> models.Player:
        if not player_id:
            raise ValidationError("player ID is required")
        # No uniqueness re-check here, unlike create.
        if updates.nickname is not None and updates.nickname == "":
            raise ValidationError("nickname cannot be empty")

        try:
            player = crud.crud_player.update_player(
                self.db, player_id, player_in=updates, cache=self.cache
            )
        except ProfileError as e:
            logger.error(f"Failed to update player {player_id}: {e}")
            raise e.wrap("failed to update player") from e

        logger.info(f"Player updated: id={player_id}")
        return player

    def delete_player(self, player_id: str) -> None:
        if not player_id:
            raise ValidationError("player ID is required")

        try:
            deleted = crud.crud_player.delete_player(self.db, player_id)
        except ProfileError as e:
            logger.error(f"Failed to delete player {player_id}: {e}")
            raise e.wrap("failed to delete player") from e

        if deleted:
            logger.info(f"Player deleted: id={player_id}")
        else:
            logger.info(f"Delete matched no active player: id={player_id}")
