import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(default_level: int = logging.WARNING) -> None:
    """Set up root logging for the command line.

    ``TOMB_LOG_LEVEL`` (e.g. ``debug``) wins over ``default_level`` when it names a real level.
    """
    level = default_level
    override = os.getenv("TOMB_LOG_LEVEL")
    if override:
        named = logging.getLevelName(override.strip().upper())
        if isinstance(named, int):
            level = named
    logging.basicConfig(level=level, format=LOG_FORMAT)
