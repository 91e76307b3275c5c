"""Logging utilities for the infographic server."""

from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "repo_infographic"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the repo_infographic hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, level: str = "INFO") -> logging.Logger:
    """Configure the project logger with a stderr handler.

    stdout carries the MCP stdio transport, so nothing may be written there.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(resolved)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when configured twice.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
