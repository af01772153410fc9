# backend/player_profile/api/v1/endpoints/profile.py
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from player_profile import schemas
from player_profile.api.dependencies import get_player_service
from player_profile.core.exceptions import ProfileError
from player_profile.services.player_service import PlayerService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=schemas.Player, status_code=status.HTTP_201_CREATED)
def create_player(
    *,
    service: PlayerService = Depends(get_player_service),
    player_in: schemas.PlayerCreate = Body(...),
) -> Any:
    try:
        return service.create_player(player_in)
    except ProfileError as e:
        logger.error(f"Failed to create player: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/nickname/{nickname}", response_model=schemas.Player)
def read_player_by_nickname(
    nickname: str,
    service: PlayerService = Depends(get_player_service),
) -> Any:
    if not nickname:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="nickname is required")

    try:
        return service.get_player_by_nickname(nickname)
    except ProfileError as e:
        logger.error(f"Failed to get player by nickname '{nickname}': {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="player not found")


@router.get("/{player_id}", response_model=schemas.Player)
def read_player(
    player_id: str,
    service: PlayerService = Depends(get_player_service),
) -> Any:
    if not player_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="player ID is required")

    try:
        return service.get_player_by_id(player_id)
    except ProfileError as e:
        logger.error(f"Failed to get player {player_id}: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="player not found")


@router.put("/{player_id}", response_model=schemas.Player)
def update_player(
    *,
    player_id: str,
    service: PlayerService = Depends(get_player_service),
    player_in: schemas.PlayerUpdate = Body(...),
) -> Any:
    if not player_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="player ID is required")

    try:
        return service.update_player(player_id, player_in)
    except ProfileError as e:
        logger.error(f"Failed to update player {player_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.delete("/{player_id}", response_model=schemas.Message)
def delete_player(
    player_id: str,
    service: PlayerService = Depends(get_player_service),
) -> Any:
    if not player_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="player ID is required")

    try:
        service.delete_player(player_id)
    except ProfileError as e:
        logger.error(f"Failed to delete player {player_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return schemas.Message(message="player deleted successfully")
