"""Runtime configuration read from environment variables and .env files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Tuple

from dotenv import load_dotenv

# Load .env at import time so the CLI and tests pick it up
load_dotenv()


LOG_LEVEL_KEY = "USER_REGISTRY_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _read_log_level(env: Dict[str, str], key: str, default: str) -> Tuple[str, List[str]]:
    msgs: List[str] = []
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default, msgs
    value = raw.strip().upper()
    if value not in _LOG_LEVELS:
        msgs.append(
            f"{key}: unknown level ({raw}), allowed {', '.join(_LOG_LEVELS)} -> using default {default}"
        )
        return default, msgs
    return value, msgs


@dataclass(frozen=True)
class RegistryConfig:
    """Settings of the user-registry CLI.

    Unknown values read from the environment fall back to their defaults and
    are kept in ``warnings``.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    warnings: Tuple[str, ...] = ()

    @staticmethod
    def from_env(env: Dict[str, str] | None = None) -> "RegistryConfig":
        if env is None:
            env = dict(os.environ)
        log_level, msgs = _read_log_level(env, LOG_LEVEL_KEY, DEFAULT_LOG_LEVEL)
        return RegistryConfig(log_level=log_level, warnings=tuple(msgs))

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return logging.getLevelName(self.log_level)

    def validate(self) -> Tuple[List[str], List[str]]:
        """Return ``(warnings, errors)`` for this configuration."""
        warns = list(self.warnings)
        errs: List[str] = []
        if self.log_level not in _LOG_LEVELS:
            errs.append(f"{LOG_LEVEL_KEY}: invalid level {self.log_level}")
        return warns, errs
