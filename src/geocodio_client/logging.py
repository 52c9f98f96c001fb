"""Opt-in loguru output for the Geocodio client.

The package disables its own loguru records on import, so a host
application sees nothing from it until setup_logging() or
logger.enable("geocodio_client") is called.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from geocodio_client.config import GeocodioSettings

PACKAGE = "geocodio_client"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(settings: Optional[GeocodioSettings] = None, replace_handlers: bool = True) -> None:
    """
    Turn on client logging and optionally install loguru sinks.

    Args:
        settings: Settings with log level and optional log file. Loaded from
            the environment when omitted.
        replace_handlers: Remove existing loguru handlers first. Pass False
            when the application already configures loguru and only wants
            the client's records enabled.
    """
    settings = settings or GeocodioSettings()
    logger.enable(PACKAGE)

    if not replace_handlers:
        return

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level, format=CONSOLE_FORMAT)

    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.log_file,
            level=settings.log_level,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

    logger.info("Geocodio client logging enabled: level={}, file={}", settings.log_level, settings.log_file)
