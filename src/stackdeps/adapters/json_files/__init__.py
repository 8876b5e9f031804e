"""JSON file adapter for stack definitions and configuration bundles."""

from __future__ import annotations

from .loader import (
    StackFileError,
    load_configuration_bundle,
    load_stack_definition,
    write_configuration_bundle,
)
from .schema import ConfigurationBundleFile, StackDefinitionFile
from .translator import (
    StackDefinition,
    dump_configuration_bundle,
    translate_configuration_bundle,
    translate_stack_definition,
)

__all__ = [
    "ConfigurationBundleFile",
    "StackDefinition",
    "StackDefinitionFile",
    "StackFileError",
    "dump_configuration_bundle",
    "load_configuration_bundle",
    "load_stack_definition",
    "translate_configuration_bundle",
    "translate_stack_definition",
    "write_configuration_bundle",
]
