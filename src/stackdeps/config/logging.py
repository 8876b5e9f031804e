"""Logging setup for the stackdeps CLI and embedding applications."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import InvalidConfigurationError

LOG_LEVEL_ENV: Final[str] = "STACKDEPS_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``STACKDEPS_LOG_LEVEL`` or ``default``."""

    value = os.getenv(LOG_LEVEL_ENV)
    if value is None or not value.strip():
        return default
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise InvalidConfigurationError(f"Invalid log level for {LOG_LEVEL_ENV}: {value!r}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once.

    An explicit ``level`` wins over the environment. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level if level is not None else resolve_log_level(),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
