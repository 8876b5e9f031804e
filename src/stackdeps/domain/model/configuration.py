"""Configuration metadata records shared with the UI layer.

The reconciler edits these lists in place; holders of a reference see the change.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False, slots=True, kw_only=True)
class ConfigCategory:
    """Named group of properties of one service, optionally owned by components."""

    name: str
    host_component_names: list[str] | None = None

    def owned_by(self, component_name: str) -> bool:
        return component_name in (self.host_component_names or ())


@dataclass(eq=False, slots=True, kw_only=True)
class ServiceConfig:
    service_name: str
    config_categories: list[ConfigCategory] = field(default_factory=list["ConfigCategory"])

    def category_for(self, component_name: str) -> ConfigCategory | None:
        """Return the first category owned by ``component_name``."""

        for category in self.config_categories:
            if category.owned_by(component_name):
                return category
        return None


@dataclass(eq=False, slots=True, kw_only=True)
class ConfigProperty:
    """One configuration property; identity is the record object itself."""

    category: str
    key: str
    value: str | None = None
    display_name: str | None = None
    service_name: str | None = None
    filename: str | None = None


@dataclass(eq=False, slots=True, kw_only=True)
class ReviewComponent:
    """Component summary shown to an operator before deployment."""

    component_name: str
    display_name: str | None = None
    value: str | None = None


@dataclass(eq=False, slots=True, kw_only=True)
class ReviewService:
    service_name: str
    display_name: str | None = None
    service_components: list[ReviewComponent] = field(
        default_factory=list["ReviewComponent"]
    )
