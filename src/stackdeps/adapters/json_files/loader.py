"""Read and write stack definition and configuration bundle files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from stackdeps.domain.model import InvalidStackVersionError

from .schema import ConfigurationBundleFile, StackDefinitionFile
from .translator import (
    StackDefinition,
    dump_configuration_bundle,
    translate_configuration_bundle,
    translate_stack_definition,
)

if TYPE_CHECKING:
    from pathlib import Path

    from stackdeps.adapters.memory import ConfigurationBundle

log = getLogger(__name__)

TModel = TypeVar("TModel", bound=BaseModel)


class StackFileError(ValueError):
    """Raised when a stack or configuration file cannot be read or validated."""


def _read_model(path: Path, model: type[TModel]) -> TModel:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StackFileError(f"Cannot read {path}: {exc}") from exc
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise StackFileError(f"Invalid {model.__name__} in {path}: {exc}") from exc


def load_stack_definition(path: Path) -> StackDefinition:
    payload = _read_model(path, StackDefinitionFile)
    try:
        definition = translate_stack_definition(payload)
    except InvalidStackVersionError as exc:
        raise StackFileError(f"Invalid stack definition in {path}: {exc}") from exc
    log.debug(
        "Loaded stack %s from %s: components=%s",
        definition.version,
        path,
        len(definition.components),
    )
    return definition


def load_configuration_bundle(path: Path) -> ConfigurationBundle:
    bundle = translate_configuration_bundle(_read_model(path, ConfigurationBundleFile))
    log.debug(
        "Loaded configuration bundle from %s: services=%s",
        path,
        len(bundle.service_configs.services()),
    )
    return bundle


def write_configuration_bundle(bundle: ConfigurationBundle, path: Path) -> None:
    payload = dump_configuration_bundle(bundle)
    path.write_text(payload.model_dump_json(indent=2) + "\n", encoding="utf-8")
    log.debug("Wrote configuration bundle to %s", path)
