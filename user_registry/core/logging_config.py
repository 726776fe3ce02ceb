"""Logging configuration for the CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional


ROOT_LOGGER_NAME = "user_registry"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_CLI_HANDLER_ATTR = "_is_user_registry_cli_handler"


def _create_cli_handler() -> logging.Handler:
    """Create a stderr handler marked as owned by the CLI."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _CLI_HANDLER_ATTR, True)
    return handler


def configure_logging(level: int | str = logging.WARNING, logger_name: Optional[str] = None) -> logging.Logger:
    """Bind the package logger to the current ``sys.stderr`` and set *level*.

    A handler attached by an earlier call is replaced, so the logger never
    carries more than one CLI handler.
    """

    logger = logging.getLogger(logger_name or ROOT_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, _CLI_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    logger.addHandler(_create_cli_handler())
    logger.setLevel(level)
    return logger
