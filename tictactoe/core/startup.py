"""
Logging setup for programs embedding the tic-tac-toe engine.
"""
import logging

from tictactoe.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Settings = None) -> int:
    """Configure root logging from settings and return the level applied."""
    settings = settings or default_settings
    if settings.DEBUG:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {settings.LOG_LEVEL!r}")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    logger.debug(f"Logging configured at {logging.getLevelName(level)}")
    return level
