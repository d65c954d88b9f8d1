"""Logging configuration for the application."""

import logging
import sys

from shareport.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    # Third-party loggers stay quiet unless something is wrong
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("shareport").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )

