"""Serve the Lenstrace API with uvicorn."""

import logging

import uvicorn

from lenstrace.config import config
from lenstrace.logging_config import resolve_level

# Uvicorn only takes these names for its own server log.
_UVICORN_LEVELS = (
    (logging.DEBUG, "debug"),
    (logging.INFO, "info"),
    (logging.WARNING, "warning"),
    (logging.ERROR, "error"),
)


def uvicorn_log_level(level: int) -> str:
    """Return the closest uvicorn level name at or above ``level``."""
    for threshold, name in _UVICORN_LEVELS:
        if level <= threshold:
            return name
    return "critical"


def main() -> None:
    """Run the API on the configured host and port."""
    level = resolve_level(config.LOG_LEVEL, debug=config.DEBUG)
    uvicorn.run(
        "lenstrace.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=False,
        # Requests are logged once, by the app's access middleware.
        access_log=False,
        log_level=uvicorn_log_level(level),
    )


if __name__ == "__main__":
    main()
