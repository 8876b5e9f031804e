"""Application configuration helpers."""

from __future__ import annotations

from .env import env_choice, env_flag, env_str
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import LOG_LEVEL_ENV, configure_logging, resolve_log_level
from .reconciler import DEFAULT_STACK_VERSION, ReconcilerConfig, get_reconciler_config

__all__ = [
    "DEFAULT_STACK_VERSION",
    "LOG_LEVEL_ENV",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ReconcilerConfig",
    "configure_logging",
    "env_choice",
    "env_flag",
    "env_str",
    "get_reconciler_config",
    "resolve_log_level",
]
