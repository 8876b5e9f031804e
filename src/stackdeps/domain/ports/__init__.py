"""Domain port definitions for adapters."""

from __future__ import annotations

from .metadata import ComponentMetadataSource
from .registries import PropertyRegistries, ReviewConfigRegistry, ServiceConfigRegistry

__all__ = [
    "ComponentMetadataSource",
    "PropertyRegistries",
    "ReviewConfigRegistry",
    "ServiceConfigRegistry",
]
