# backend/tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from player_profile.core.config import settings
from player_profile.db import session as db_session
from player_profile.main import app

# --- TEST DATABASE URL ---
# In-memory SQLite; create_db_engine pins it to one shared connection.
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def override_settings():
    """
    Points the app at the in-memory database with the cache disabled,
    restoring the real settings afterwards.
    """
    saved = (settings.DATABASE_URL, settings.REDIS_ADDR)
    settings.DATABASE_URL = SQLALCHEMY_DATABASE_URL
    settings.REDIS_ADDR = ""
    yield settings
    settings.DATABASE_URL, settings.REDIS_ADDR = saved


@pytest.fixture
def test_client_with_db(override_settings):
    """
    A TestClient running the full lifespan against a fresh in-memory database.
    Each test gets its own database because the lifespan builds a new engine.
    """
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db():
    """A bare SQLAlchemy session on a fresh in-memory database, for data-access tests."""
    engine = db_session.create_db_engine(SQLALCHEMY_DATABASE_URL)
    db_session.create_tables(engine)
    session = db_session.create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def create_player(test_client_with_db):
    """Creates a player through the API and returns its JSON body."""
    def _create(**fields):
        response = test_client_with_db.post("/api/v1/profile", json=fields)
        assert response.status_code == 201, response.text
        return response.json()
    return _create
