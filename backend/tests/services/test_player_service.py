# backend/tests/services/test_player_service.py
import uuid
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.orm import Session

from player_profile import schemas
from player_profile.core.exceptions import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from player_profile.services.player_service import PlayerService

CRUD = "player_profile.services.player_service.crud.crud_player"


@pytest.fixture
def service():
    return PlayerService(MagicMock(spec=Session), cache=None)


@patch(f"{CRUD}.create_player")
@patch(f"{CRUD}.get_player_by_nickname")
def test_create_without_nickname_never_touches_store(mock_lookup, mock_create, service):
    with pytest.raises(ValidationError, match="nickname is required"):
        service.create_player(schemas.PlayerCreate(level=4))

    mock_lookup.assert_not_called()
    mock_create.assert_not_called()


@patch(f"{CRUD}.create_player")
@patch(f"{CRUD}.get_player_by_nickname")
def test_create_with_taken_nickname_is_conflict(mock_lookup, mock_create, service):
    mock_lookup.return_value = MagicMock(nickname="nova")

    with pytest.raises(ConflictError, match="player with nickname nova already exists"):
        service.create_player(schemas.PlayerCreate(nickname="nova", elo=2000, region="eu"))

    mock_create.assert_not_called()


@patch(f"{CRUD}.create_player")
@patch(f"{CRUD}.get_player_by_nickname")
def test_create_with_free_nickname_inserts(mock_lookup, mock_create, service):
    mock_lookup.side_effect = NotFoundError("player not found")
    created = MagicMock(id=uuid.uuid4(), nickname="nova")
    mock_create.return_value = created
    player_in = schemas.PlayerCreate(nickname="nova")

    assert service.create_player(player_in) is created
    mock_create.assert_called_once_with(service.db, player_in=player_in)


@patch(f"{CRUD}.create_player")
@patch(f"{CRUD}.get_player_by_nickname")
def test_create_store_failure_is_wrapped_in_kind(mock_lookup, mock_create, service):
    mock_lookup.side_effect = NotFoundError("player not found")
    mock_create.side_effect = StoreError("database error: boom")

    with pytest.raises(StoreError) as exc_info:
        service.create_player(schemas.PlayerCreate(nickname="nova"))

    assert str(exc_info.value) == "failed to create player: database error: boom"


def test_lookups_reject_empty_identifiers(service):
    with pytest.raises(ValidationError, match="player ID is required"):
        service.get_player_by_id("")
    with pytest.raises(ValidationError, match="nickname is required"):
        service.get_player_by_nickname("")
    with pytest.raises(ValidationError, match="player ID is required"):
        service.delete_player("")


@patch(f"{CRUD}.get_player")
def test_get_by_id_wraps_not_found(mock_get, service):
    mock_get.side_effect = NotFoundError("player not found")

    with pytest.raises(NotFoundError) as exc_info:
        service.get_player_by_id("abc")

    assert str(exc_info.value) == "player not found: player not found"


@patch(f"{CRUD}.update_player")
def test_update_rejects_empty_nickname(mock_update, service):
    with pytest.raises(ValidationError, match="nickname cannot be empty"):
        service.update_player("abc", schemas.PlayerUpdate(nickname=""))

    mock_update.assert_not_called()


@patch(f"{CRUD}.get_player_by_nickname")
@patch(f"{CRUD}.update_player")
def test_update_does_not_recheck_nickname_uniqueness(mock_update, mock_lookup, service):
    updates = schemas.PlayerUpdate(nickname="taken")

    service.update_player("abc", updates)

    mock_lookup.assert_not_called()
    mock_update.assert_called_once_with(service.db, "abc", player_in=updates, cache=None)


@patch(f"{CRUD}.delete_player")
def test_delete_wraps_store_error(mock_delete, service):
    mock_delete.side_effect = StoreError("invalid player id: x")

    with pytest.raises(StoreError, match="failed to delete player: invalid player id: x"):
        service.delete_player("x")
