"""Records describing components removed from the configuration registries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import PropertyFile, StackGeneration

if TYPE_CHECKING:
    from .configuration import ConfigCategory, ConfigProperty, ReviewComponent


def _empty_properties() -> dict[PropertyFile, list[ConfigProperty]]:
    return {property_file: [] for property_file in PropertyFile}


@dataclass(eq=False, slots=True, kw_only=True)
class DisabledComponent:
    """Everything removed on behalf of one component, kept to undo the removal.

    Entries may be partial: a component that owns no category, properties or
    review summary yields an entry with empty captures.
    """

    component_name: str
    service_name: str
    generation: StackGeneration
    properties: dict[PropertyFile, list[ConfigProperty]] = field(
        default_factory=_empty_properties
    )
    review_component: ReviewComponent | None = None
    config_category: ConfigCategory | None = None

    @property
    def property_count(self) -> int:
        return sum(len(records) for records in self.properties.values())
