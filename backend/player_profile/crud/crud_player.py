# backend/player_profile/crud/crud_player.py
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, attributes

from .. import models, schemas
from ..cache.elo_cache import EloCache
from ..core.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)

# Columns holding free-form documents; in-place changes must be flagged.
JSON_DOCUMENT_FIELDS = ("cosmetics", "settings")

PlayerId = Union[uuid.UUID, str]


def _parse_id(player_id: PlayerId) -> Optional[uuid.UUID]:
    if isinstance(player_id, uuid.UUID):
        return player_id
    try:
        return uuid.UUID(str(player_id))
    except ValueError:
        return None


def _store_error(db: Session, e: SQLAlchemyError) -> StoreError:
    db.rollback()
    return StoreError(f"database error: {e}")


def _get_active(db: Session, player_uuid: uuid.UUID) -> Optional[models.Player]:
    return db.scalars(
        select(models.Player).where(
            models.Player.id == player_uuid,
            models.Player.deleted_at.is_(None),
        )
    ).first()


def get_player(db: Session, player_id: PlayerId, cache: Optional[EloCache] = None) -> models.Player:
    """
    Looks up an active player by primary key. The database is always the
    source of truth; the elo cache is only read for telemetry and refreshed
    after a successful lookup.
    """
    player_uuid = _parse_id(player_id)
    if player_uuid is None:
        raise NotFoundError("player not found")

    # Keyed by the parsed UUID so reads and writes agree on the canonical form.
    if cache is not None:
        cached_elo = cache.get_elo(player_uuid)
        if cached_elo is not None:
            logger.debug(f"Elo found in cache for player {player_uuid}: {cached_elo}")

    try:
        player = _get_active(db, player_uuid)
    except SQLAlchemyError as e:
        raise _store_error(db, e) from e
    if player is None:
        raise NotFoundError("player not found")

    if cache is not None:
        cache.set_elo(player.id, player.elo)
    return player


def get_player_by_nickname(db: Session, nickname: str) -> models.Player:
    try:
        player = db.scalars(
            select(models.Player).where(
                models.Player.nickname == nickname,
                models.Player.deleted_at.is_(None),
            )
        ).first()
    except SQLAlchemyError as e:
        raise _store_error(db, e) from e
    if player is None:
        raise NotFoundError("player not found")
    return player


def create_player(db: Session, *, player_in: schemas.PlayerCreate) -> models.Player:
    db_player_data = player_in.model_dump(exclude={"id"})
    db_player = models.Player(**db_player_data)
    # The model default only fires on flush; assign now so callers can log it.
    db_player.id = player_in.id or uuid.uuid4()

    try:
        db.add(db_player)
        db.commit()
        db.refresh(db_player)
    except SQLAlchemyError as e:
        raise _store_error(db, e) from e
    return db_player


def apply_updates(db_player: models.Player, updates: Dict[str, Any]) -> models.Player:
    """Copies the present update fields onto the record. Nothing else is touched."""
    for field, value in updates.items():
        setattr(db_player, field, value)
        if field in JSON_DOCUMENT_FIELDS:
            attributes.flag_modified(db_player, field)
    return db_player


def update_player(
    db: Session,
    player_id: PlayerId,
    *,
    player_in: schemas.PlayerUpdate,
    cache: Optional[EloCache] = None,
) -> models.Player:
    player_uuid = _parse_id(player_id)
    if player_uuid is None:
        raise NotFoundError("player not found")

    try:
        db_player = _get_active(db, player_uuid)
        if db_player is None:
            raise NotFoundError("player not found")

        apply_updates(db_player, player_in.present_fields())
        db.add(db_player)
        db.commit()
        db.refresh(db_player)
    except SQLAlchemyError as e:
        raise _store_error(db, e) from e

    if cache is not None:
        cache.set_elo(db_player.id, db_player.elo)
    return db_player


def delete_player(db: Session, player_id: PlayerId) -> int:
    """
    Soft-deletes the active player with this id and returns the number of rows
    marked (0 when nothing matched, which is not an error).
    """
    player_uuid = _parse_id(player_id)
    if player_uuid is None:
        raise StoreError(f"invalid player id: {player_id}")

    try:
        result = db.execute(
            update(models.Player)
            .where(
                models.Player.id == player_uuid,
                models.Player.deleted_at.is_(None),
            )
            .values(deleted_at=datetime.now(timezone.utc))
        )
        db.commit()
    except SQLAlchemyError as e:
        raise _store_error(db, e) from e
    return result.rowcount
