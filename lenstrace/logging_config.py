"""Logging setup for Lenstrace.

Everything the service logs goes through the ``lenstrace`` logger tree.
Request lines are written by the access middleware in ``lenstrace.main`` on
``lenstrace.access``; uvicorn's own access log is switched off in
``lenstrace.scripts.run`` so each request is logged once.
"""

from __future__ import annotations

import logging
from typing import Final

APP_LOGGER: Final[str] = "lenstrace"

_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT: Final[str] = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int | None, *, debug: bool = False) -> int:
    """Return the numeric level for ``level``.

    Accepts level names ("warning") and numbers ("15"). Without an explicit
    level, or with one logging does not know, DEBUG mode picks DEBUG and
    everything else INFO.
    """
    fallback = logging.DEBUG if debug else logging.INFO
    if level is None:
        return fallback
    if isinstance(level, int):
        return level

    value = level.strip()
    if value.isdigit():
        return int(value)
    numeric = logging.getLevelName(value.upper())
    return numeric if isinstance(numeric, int) else fallback


def configure_logging(level: str | int | None = None, *, debug: bool = False) -> int:
    """Stream ``lenstrace`` logs to stderr and return the level in effect.

    Calling it again only adjusts the level; the handler is installed once.
    """
    resolved = resolve_level(level, debug=debug)

    logger = logging.getLogger(APP_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False
    return resolved


__all__ = ["configure_logging", "resolve_level"]
