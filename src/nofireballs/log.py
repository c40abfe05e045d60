"""Logging helpers.

Library modules only create loggers. Hosts and demos call
configure_logging() once to attach a handler.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: int | str = logging.INFO,
    name: str = "nofireballs",
) -> logging.Logger:
    """Attach a stream handler to the package logger if none is set."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


class PluginLoggerAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Prefixes messages with the plugin title, like host console output."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        title = (self.extra or {}).get("plugin", "plugin")
        return f"[{title}] {msg}", kwargs
