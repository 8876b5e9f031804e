"""Ports for the configuration registries mutated by the reconciler."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from stackdeps.domain.model import (
        ConfigProperty,
        PropertyFile,
        ReviewComponent,
        ReviewService,
        ServiceConfig,
        StackGeneration,
    )


@runtime_checkable
class ServiceConfigRegistry(Protocol):
    """Service name to configuration categories."""

    def services(self) -> Sequence[ServiceConfig]: ...

    def find_service(self, service_name: str) -> ServiceConfig | None: ...


@runtime_checkable
class PropertyRegistries(Protocol):
    """Flat property lists keyed by stack generation and property file."""

    def records(
        self, generation: StackGeneration, property_file: PropertyFile
    ) -> Sequence[ConfigProperty]: ...

    def remove_category(
        self, generation: StackGeneration, property_file: PropertyFile, category: str
    ) -> list[ConfigProperty]:
        """Remove and return every record whose ``category`` equals ``category``."""
        ...

    def extend(
        self,
        generation: StackGeneration,
        property_file: PropertyFile,
        records: Iterable[ConfigProperty],
    ) -> None: ...


@runtime_checkable
class ReviewConfigRegistry(Protocol):
    """Service name to the component summaries shown for operator review."""

    def services(self) -> Sequence[ReviewService]: ...

    def find_service(self, service_name: str) -> ReviewService | None: ...

    def remove_component(self, service_name: str, component_name: str) -> ReviewComponent | None:
        """Remove and return the summary for ``component_name``, if present."""
        ...

    def append_component(self, service_name: str, component: ReviewComponent) -> bool:
        """Append ``component`` to the service entry; false when the service is unknown."""
        ...


__all__ = ["PropertyRegistries", "ReviewConfigRegistry", "ServiceConfigRegistry"]
