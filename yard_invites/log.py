"""
Logging setup for the notifier service and CLI.
"""

import logging

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [yard-invites] %(levelname)s %(name)s: %(message)s"


def normalize_level(level: str) -> str:
    """Return a valid logging level name, defaulting to ``INFO`` when unknown."""
    if not level:
        return DEFAULT_LOG_LEVEL

    normalized = level.upper()
    if normalized in logging.getLevelNamesMapping():
        return normalized
    return DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr with a timestamped format."""
    logging.basicConfig(
        level=normalize_level(level),
        format=LOG_FORMAT,
        force=True,
    )
