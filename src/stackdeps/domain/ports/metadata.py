"""Port for the catalogue of components available in the active stack."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stackdeps.domain.model import CapabilityFlag, ComponentDescriptor


@runtime_checkable
class ComponentMetadataSource(Protocol):
    """Read-only view over the component descriptors of the loaded stack.

    An empty catalogue means the stack definition has not been loaded yet.
    """

    def find_all(self) -> Sequence[ComponentDescriptor]: ...

    def filter_by_flag(self, flag: CapabilityFlag) -> Sequence[ComponentDescriptor]: ...

    def find_by_name(self, component_name: str) -> ComponentDescriptor | None: ...


__all__ = ["ComponentMetadataSource"]
