"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from enum import StrEnum
from typing import TYPE_CHECKING, TypeVar

from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})

TEnum = TypeVar("TEnum", bound=StrEnum)


def env_flag(name: str, *, default: bool = False) -> bool:
    """Interpret an environment variable as a boolean switch."""

    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise InvalidConfigurationError(f"Invalid boolean for {name}: {value!r}")


def env_choice(name: str, enum_type: type[TEnum], *, default: TEnum) -> TEnum:
    """Return the enum member named by an environment variable, or ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    lookup: Mapping[str, TEnum] = {member.value: member for member in enum_type}
    try:
        return lookup[value.strip().lower()]
    except KeyError:
        allowed = ", ".join(sorted(lookup))
        raise InvalidConfigurationError(
            f"Invalid value for {name}: {value!r} (expected one of: {allowed})"
        ) from None


def env_str(name: str, *, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
