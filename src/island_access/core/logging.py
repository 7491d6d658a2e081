"""Logging setup shared by the API process and scripts."""

from __future__ import annotations

import logging

from island_access.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | int | None = None) -> None:
    """Install the root handler once; later calls only adjust the level."""
    global _configured
    resolved = level if level is not None else settings.log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()

    if not _configured:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        _configured = True
    else:
        logging.getLogger().setLevel(resolved)

    # SQL echo is handled by the engine itself.
    if not settings.sql_debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
