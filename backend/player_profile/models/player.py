# backend/player_profile/models/player.py
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Integer, String, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from ..db.base_class import Base

# JSONB on PostgreSQL, plain JSON everywhere else (SQLite in tests).
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Player(Base):
    __tablename__ = "players"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    nickname: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)

    # --- Progression ---
    level: Mapped[int] = mapped_column(Integer, default=1, nullable=False, server_default="1")
    rating: Mapped[int] = mapped_column(Integer, default=1000, nullable=False, server_default="1000")
    elo: Mapped[int] = mapped_column(Integer, default=1000, nullable=False, server_default="1000")
    role: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    region: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    language: Mapped[str] = mapped_column(String(10), default="en", nullable=False, server_default="en")

    # --- Stats ---
    wins: Mapped[int] = mapped_column(Integer, default=0, nullable=False, server_default="0")
    losses: Mapped[int] = mapped_column(Integer, default=0, nullable=False, server_default="0")
    rank: Mapped[str] = mapped_column(String(50), default="", nullable=False)

    # --- Free-form documents, schema not enforced ---
    cosmetics: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONDocument, nullable=True)
    settings: Mapped[Optional[Dict[str, Any]]] = mapped_column(JSONDocument, nullable=True)

    # --- Matchmaking preferences ---
    preferred_mode: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    preferred_role: Mapped[str] = mapped_column(String(50), default="", nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)
    # NULL while the player is active.
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True, index=True)

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, nickname='{self.nickname}', elo={self.elo})>"
