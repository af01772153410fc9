# backend/player_profile/__main__.py
"""
Command-line entry point.

Usage:
    player-profile --port 8080 --db-dsn postgresql://... --redis-addr localhost:6379
"""
import argparse
from typing import List, Optional

import uvicorn

from player_profile.core.config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Player Profile Service")
    parser.add_argument("--host", default=settings.HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="HTTP server port")
    parser.add_argument("--db-dsn", default=settings.DATABASE_URL, help="Database connection URL")
    parser.add_argument(
        "--redis-addr",
        default=settings.REDIS_ADDR,
        help="Redis host:port for the elo cache (empty string disables it)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    # Flags override the environment; the app reads settings during its lifespan.
    settings.HOST = args.host
    settings.PORT = args.port
    settings.DATABASE_URL = args.db_dsn
    settings.REDIS_ADDR = args.redis_addr

    uvicorn.run("player_profile.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
