"""Domain model for stack components and configuration metadata."""

from __future__ import annotations

from .component import ComponentDescriptor
from .configuration import (
    ConfigCategory,
    ConfigProperty,
    ReviewComponent,
    ReviewService,
    ServiceConfig,
)
from .enums import (
    CapabilityFlag,
    LedgerPolicy,
    PropertyFile,
    RestoreTarget,
    StackGeneration,
)
from .ledger import DisabledComponent
from .stack import (
    InvalidStackVersionError,
    StackVersion,
    compare_versions,
    generation_for,
)

__all__ = [
    "CapabilityFlag",
    "ComponentDescriptor",
    "ConfigCategory",
    "ConfigProperty",
    "DisabledComponent",
    "InvalidStackVersionError",
    "LedgerPolicy",
    "PropertyFile",
    "RestoreTarget",
    "ReviewComponent",
    "ReviewService",
    "ServiceConfig",
    "StackGeneration",
    "StackVersion",
    "compare_versions",
    "generation_for",
]
