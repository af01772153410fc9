# backend/player_profile/core/logging_config.py
import logging
import sys

from player_profile.core.config import settings  # For LOG_LEVEL


def setup_logging():
    """
    Configures logging for the application.
    Logs to stdout at the level named by the LOG_LEVEL setting.
    """
    log_level_str = settings.LOG_LEVEL.upper()
    numeric_level = getattr(logging, log_level_str, None)

    if not isinstance(numeric_level, int):
        print(
            f"--- LOGGING_CONFIG.PY: Invalid log level: {log_level_str}. Defaulting to INFO. ---",
            flush=True,
        )
        numeric_level = logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()

    # Called once at startup, but clear anyway so a second call doesn't double every line.
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(stream_handler)
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).debug(
        "Logging configured. Root level: %s", logging.getLevelName(root_logger.level)
    )
