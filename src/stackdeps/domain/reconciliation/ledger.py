"""Ledger of components currently removed from the configuration registries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stackdeps.domain.model import DisabledComponent, StackGeneration


@dataclass(slots=True)
class DisabledComponentLedger:
    """Ordered ledger entries with an index by component name.

    The index keeps a list per name so the legacy accumulate policy can hold
    several entries for one component.
    """

    _entries: list[DisabledComponent] = field(
        default_factory=list["DisabledComponent"], repr=False
    )
    _entries_by_name: dict[str, list[DisabledComponent]] = field(
        default_factory=dict[str, list["DisabledComponent"]], repr=False
    )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DisabledComponent]:
        return iter(self.entries())

    def __contains__(self, component_name: object) -> bool:
        return component_name in self._entries_by_name

    def entries(self) -> tuple[DisabledComponent, ...]:
        return tuple(self._entries)

    def component_names(self) -> tuple[str, ...]:
        return tuple(self._entries_by_name)

    def get(self, component_name: str) -> DisabledComponent | None:
        entries = self._entries_by_name.get(component_name)
        return entries[0] if entries else None

    def entries_for(self, component_name: str) -> tuple[DisabledComponent, ...]:
        return tuple(self._entries_by_name.get(component_name, ()))

    def add(self, entry: DisabledComponent) -> None:
        self._entries.append(entry)
        self._entries_by_name.setdefault(entry.component_name, []).append(entry)

    def extend(self, entries: Iterable[DisabledComponent]) -> None:
        for entry in entries:
            self.add(entry)

    def holds(self, component_name: str, generation: StackGeneration) -> bool:
        """Whether an entry for ``component_name`` was captured from ``generation``."""
        return any(
            entry.generation is generation
            for entry in self._entries_by_name.get(component_name, ())
        )

    def remove(self, entry: DisabledComponent) -> None:
        """Drop ``entry`` (matched by identity); unknown entries are ignored."""
        for position, existing in enumerate(self._entries):
            if existing is entry:
                del self._entries[position]
                break
        else:
            return
        named = self._entries_by_name[entry.component_name]
        named[:] = [existing for existing in named if existing is not entry]
        if not named:
            del self._entries_by_name[entry.component_name]

    def remove_all(self, entries: Iterable[DisabledComponent]) -> None:
        """Drop every entry in ``entries`` with a single rebuild of the indexes."""
        doomed = {id(entry) for entry in entries}
        if not doomed:
            return
        kept = [entry for entry in self._entries if id(entry) not in doomed]
        self._entries.clear()
        self._entries_by_name.clear()
        self.extend(kept)

    def clear(self) -> None:
        self._entries.clear()
        self._entries_by_name.clear()
