"""Selector for the stack version the application currently targets."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stackdeps.domain.model import StackVersion

if TYPE_CHECKING:
    from stackdeps.domain.model import StackGeneration

StackVersionListener = Callable[[StackVersion], None]

log = getLogger(__name__)


@dataclass(slots=True)
class ActiveStack:
    """Holds the selected stack version and notifies listeners when it changes.

    ``current_version`` stays empty until a stack is selected; ``version`` then
    falls back to ``default_version``.
    """

    default_version: str
    _current_version: str = field(default="", init=False)
    _listeners: list[StackVersionListener] = field(
        default_factory=list["StackVersionListener"], init=False, repr=False
    )

    def __post_init__(self) -> None:
        StackVersion.parse(self.default_version)

    @property
    def current_version(self) -> str:
        return self._current_version

    @property
    def version(self) -> StackVersion:
        return StackVersion.parse(self._current_version or self.default_version)

    @property
    def generation(self) -> StackGeneration:
        return self.version.generation

    def subscribe(self, listener: StackVersionListener) -> None:
        self._listeners.append(listener)

    def switch_to(self, version: str) -> bool:
        """Select ``version``; returns whether listeners were notified."""

        parsed = StackVersion.parse(version)
        if parsed.name == self._current_version:
            return False
        log.info("Switching active stack from %s to %s", self._current_version or "-", parsed)
        self._current_version = parsed.name
        for listener in tuple(self._listeners):
            listener(parsed)
        return True
