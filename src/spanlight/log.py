"""Logging setup shared by the library and the CLI.

The library only ever calls ``get_logger(__name__)``; handlers are installed
by ``setup_logging``, which the CLI calls once at startup. Log output goes to
stderr because stdout carries the rendered HTML.
"""

from __future__ import annotations

import logging
import os
import sys

from yachalk import chalk

ENV_LOG_LEVEL = "SPANLIGHT_LOG_LEVEL"

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Color each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level = record.levelno
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        return chalk.gray(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by SPANLIGHT_LOG_LEVEL, or None if unset/unknown.

    Accepts level names ("DEBUG", "warning") or numbers ("10").
    """
    val = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not val:
        return None
    if val.isdigit():
        return int(val)
    level = logging.getLevelName(val)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the ``spanlight`` logger.

    If ``level`` is None the environment is consulted, then WARNING is used.
    Calling this again replaces the handler instead of stacking a second one.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    logger = logging.getLogger("spanlight")
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
