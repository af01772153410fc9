# backend/player_profile/schemas/player.py
import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

# --- Base Schemas ---

class PlayerBase(BaseModel):
    """
    Every client-writable attribute of a player, with the defaults a new player gets.
    """
    nickname: str = ""
    level: int = 1
    rating: int = 1000
    elo: int = 1000
    role: str = Field("", max_length=50)
    region: str = Field("", max_length=50)
    language: str = Field("en", max_length=10)

    wins: int = 0
    losses: int = 0
    rank: str = Field("", max_length=50)

    cosmetics: Optional[Dict[str, Any]] = None
    settings: Optional[Dict[str, Any]] = None

    preferred_mode: str = Field("", max_length=50)
    preferred_role: str = Field("", max_length=50)

CREATE_DEFAULTS: Dict[str, Any] = {
    "nickname": "",
    "level": 1,
    "rating": 1000,
    "elo": 1000,
    "role": "",
    "region": "",
    "language": "en",
    "wins": 0,
    "losses": 0,
    "rank": "",
    "preferred_mode": "",
    "preferred_role": "",
}

# Columns with a store default: a zero value on create means "use the default".
ZERO_MEANS_DEFAULT = ("level", "rating", "elo", "language")

class PlayerCreate(PlayerBase):
    """
    Full player representation accepted on creation.
    The nickname is not required here: an empty one is rejected by the service layer.
    A null field takes its default, as does a zero level, rating, elo or language.
    """
    id: Optional[uuid.UUID] = None
    level: int = Field(1, ge=1)

    @field_validator(*CREATE_DEFAULTS, mode="before")
    @classmethod
    def apply_create_defaults(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return CREATE_DEFAULTS[info.field_name]
        if info.field_name in ZERO_MEANS_DEFAULT and not isinstance(v, bool) and v in (0, ""):
            return CREATE_DEFAULTS[info.field_name]
        return v

# --- Update Schema ---

class PlayerUpdate(BaseModel):
    """
    Partial update. All fields are optional and only the ones present in the
    request body are applied; absent means "leave unchanged", never "reset".
    Does NOT inherit from PlayerBase so no default can leak into an update.
    """
    nickname: Optional[str] = Field(None, max_length=100)
    level: Optional[int] = Field(None, ge=1)
    rating: Optional[int] = None
    elo: Optional[int] = None
    role: Optional[str] = Field(None, max_length=50)
    region: Optional[str] = Field(None, max_length=50)
    language: Optional[str] = Field(None, max_length=10)
    wins: Optional[int] = None
    losses: Optional[int] = None
    rank: Optional[str] = Field(None, max_length=50)
    cosmetics: Optional[Dict[str, Any]] = None
    settings: Optional[Dict[str, Any]] = None
    preferred_mode: Optional[str] = Field(None, max_length=50)
    preferred_role: Optional[str] = Field(None, max_length=50)

    def present_fields(self) -> Dict[str, Any]:
        """Fields explicitly sent by the client. An explicit null counts as absent."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }

# --- Database and Response Schemas ---

class Player(PlayerBase):
    """
    Schema for returning a player to the client. The soft-delete marker is never exposed.
    """
    id: uuid.UUID
    nickname: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class Message(BaseModel):
    message: str

class ErrorResponse(BaseModel):
    error: str
