"""Logging setup for applications and the command-line validator."""

import logging
from typing import Optional

from oauth_shapes.config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(settings: Optional[Settings] = None) -> int:
    """Configure root logging from settings and return the level used.

    Library code only creates loggers; call this from entry points.
    """
    settings = settings or get_settings()
    if settings.ENABLE_DEBUG_LOGGING:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
