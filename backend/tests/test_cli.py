# backend/tests/test_cli.py
from unittest.mock import patch

from player_profile.__main__ import main
from player_profile.core.config import settings


@patch("player_profile.__main__.uvicorn.run")
def test_flags_override_settings(mock_run, override_settings):
    saved_port = settings.PORT
    try:
        main(["--port", "9090", "--db-dsn", "sqlite:///profiles.db", "--redis-addr", "cache:6380"])

        assert settings.PORT == 9090
        assert settings.DATABASE_URL == "sqlite:///profiles.db"
        assert settings.REDIS_ADDR == "cache:6380"
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["port"] == 9090
    finally:
        settings.PORT = saved_port
