"""Stack version parsing and generation selection."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import zip_longest
from typing import Final

from .enums import StackGeneration

CURRENT_GENERATION_FLOOR: Final[str] = "2.0"

_VERSION_PATTERN = re.compile(r"^(?P<stack>HDP(?P<local>Local)?)-(?P<number>\d+(?:\.\d+)*)$")


class InvalidStackVersionError(ValueError):
    """Raised when a stack version string cannot be parsed."""


def _numeric_parts(version: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in version.split("."))
    except ValueError as exc:
        raise InvalidStackVersionError(f"Invalid version number: {version!r}") from exc


def compare_versions(first: str, second: str) -> int:
    """Compare dotted numeric versions; missing trailing parts count as zero."""

    for left, right in zip_longest(_numeric_parts(first), _numeric_parts(second), fillvalue=0):
        if left != right:
            return 1 if left > right else -1
    return 0


def generation_for(number: str) -> StackGeneration:
    if compare_versions(number, CURRENT_GENERATION_FLOOR) >= 0:
        return StackGeneration.CURRENT
    return StackGeneration.LEGACY


@dataclass(frozen=True, slots=True)
class StackVersion:
    """A stack version such as ``HDP-2.0.5`` or ``HDPLocal-1.3.2``."""

    name: str
    number: str
    is_local: bool = False

    @classmethod
    def parse(cls, text: str) -> StackVersion:
        match = _VERSION_PATTERN.match(text.strip())
        if match is None:
            raise InvalidStackVersionError(f"Invalid stack version: {text!r}")
        return cls(
            name=match.group(0),
            number=match.group("number"),
            is_local=match.group("local") is not None,
        )

    @property
    def generation(self) -> StackGeneration:
        return generation_for(self.number)

    def __str__(self) -> str:
        return self.name
