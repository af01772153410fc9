# backend/player_profile/api/dependencies.py
from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from player_profile.core.context import AppContext
from player_profile.services.player_service import PlayerService


def get_context(request: Request) -> AppContext:
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise RuntimeError("Application context has not been initialized. The application lifespan manager may have failed.")
    return context


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session for one request.
    """
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_player_service(
    db: Session = Depends(get_db),
    context: AppContext = Depends(get_context),
) -> PlayerService:
    return PlayerService(db, cache=context.cache)
