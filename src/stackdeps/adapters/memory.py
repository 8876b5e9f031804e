"""In-memory implementations of the catalogue and registry ports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from stackdeps.domain.model import PropertyFile, StackGeneration

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from stackdeps.domain.model import (
        CapabilityFlag,
        ComponentDescriptor,
        ConfigProperty,
        ReviewComponent,
        ReviewService,
        ServiceConfig,
    )

PropertyKey: TypeAlias = tuple[StackGeneration, PropertyFile]


def _new_property_index() -> dict[PropertyKey, list[ConfigProperty]]:
    return {
        (generation, property_file): []
        for generation in StackGeneration
        for property_file in PropertyFile
    }


@dataclass(slots=True)
class StackComponentCatalog:
    """Component descriptors of the loaded stack, replaced wholesale on each load."""

    _components: list[ComponentDescriptor] = field(
        default_factory=list["ComponentDescriptor"], repr=False
    )
    _components_by_name: dict[str, ComponentDescriptor] = field(
        default_factory=dict[str, "ComponentDescriptor"], repr=False
    )

    def load(self, components: Iterable[ComponentDescriptor]) -> None:
        self._components = list(components)
        self._components_by_name = {}
        for component in self._components:
            self._components_by_name.setdefault(component.component_name, component)

    def clear(self) -> None:
        self.load(())

    def find_all(self) -> Sequence[ComponentDescriptor]:
        return tuple(self._components)

    def filter_by_flag(self, flag: CapabilityFlag) -> Sequence[ComponentDescriptor]:
        return tuple(component for component in self._components if component.has(flag))

    def find_by_name(self, component_name: str) -> ComponentDescriptor | None:
        return self._components_by_name.get(component_name)


@dataclass(slots=True)
class InMemoryServiceConfigRegistry:
    service_configs: list[ServiceConfig] = field(default_factory=list["ServiceConfig"])

    def services(self) -> Sequence[ServiceConfig]:
        return tuple(self.service_configs)

    def find_service(self, service_name: str) -> ServiceConfig | None:
        for service in self.service_configs:
            if service.service_name == service_name:
                return service
        return None


@dataclass(slots=True)
class InMemoryPropertyRegistries:
    """Property lists for every (generation, property file) pair."""

    _records: dict[PropertyKey, list[ConfigProperty]] = field(
        default_factory=_new_property_index, repr=False
    )

    @classmethod
    def from_records(
        cls, records: dict[PropertyKey, Iterable[ConfigProperty]]
    ) -> InMemoryPropertyRegistries:
        registries = cls()
        for (generation, property_file), items in records.items():
            registries.extend(generation, property_file, items)
        return registries

    def records(
        self, generation: StackGeneration, property_file: PropertyFile
    ) -> Sequence[ConfigProperty]:
        return tuple(self._records[generation, property_file])

    def remove_category(
        self, generation: StackGeneration, property_file: PropertyFile, category: str
    ) -> list[ConfigProperty]:
        removed: list[ConfigProperty] = []
        kept: list[ConfigProperty] = []
        for record in self._records[generation, property_file]:
            (removed if record.category == category else kept).append(record)
        self._records[generation, property_file] = kept
        return removed

    def extend(
        self,
        generation: StackGeneration,
        property_file: PropertyFile,
        records: Iterable[ConfigProperty],
    ) -> None:
        self._records[generation, property_file].extend(records)


@dataclass(slots=True)
class InMemoryReviewConfigRegistry:
    review_services: list[ReviewService] = field(default_factory=list["ReviewService"])

    def services(self) -> Sequence[ReviewService]:
        return tuple(self.review_services)

    def find_service(self, service_name: str) -> ReviewService | None:
        for service in self.review_services:
            if service.service_name == service_name:
                return service
        return None

    def remove_component(self, service_name: str, component_name: str) -> ReviewComponent | None:
        service = self.find_service(service_name)
        if service is None:
            return None
        removed: ReviewComponent | None = None
        kept: list[ReviewComponent] = []
        for component in service.service_components:
            if component.component_name == component_name:
                removed = component
            else:
                kept.append(component)
        service.service_components = kept
        return removed

    def append_component(self, service_name: str, component: ReviewComponent) -> bool:
        service = self.find_service(service_name)
        if service is None:
            return False
        service.service_components.append(component)
        return True


@dataclass(slots=True)
class ConfigurationBundle:
    """The three configuration registries loaded together."""

    service_configs: InMemoryServiceConfigRegistry = field(
        default_factory=InMemoryServiceConfigRegistry
    )
    properties: InMemoryPropertyRegistries = field(default_factory=InMemoryPropertyRegistries)
    review_configs: InMemoryReviewConfigRegistry = field(
        default_factory=InMemoryReviewConfigRegistry
    )
