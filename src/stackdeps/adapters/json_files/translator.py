"""Translate file models into domain records and back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stackdeps.adapters.memory import (
    ConfigurationBundle,
    InMemoryPropertyRegistries,
    InMemoryReviewConfigRegistry,
    InMemoryServiceConfigRegistry,
)
from stackdeps.domain.model import (
    ComponentDescriptor,
    ConfigCategory,
    ConfigProperty,
    PropertyFile,
    ReviewComponent,
    ReviewService,
    ServiceConfig,
    StackGeneration,
    StackVersion,
)

from .schema import (
    ConfigCategoryModel,
    ConfigPropertyModel,
    ConfigurationBundleFile,
    PropertyFilesModel,
    ReviewComponentModel,
    ReviewServiceModel,
    ServiceConfigModel,
)

if TYPE_CHECKING:
    from .schema import StackComponentModel, StackDefinitionFile


@dataclass(frozen=True, slots=True)
class StackDefinition:
    version: StackVersion
    components: tuple[ComponentDescriptor, ...]


def translate_stack_definition(payload: StackDefinitionFile) -> StackDefinition:
    return StackDefinition(
        version=StackVersion.parse(payload.version),
        components=tuple(_build_component(component) for component in payload.components),
    )


def translate_configuration_bundle(payload: ConfigurationBundleFile) -> ConfigurationBundle:
    properties = InMemoryPropertyRegistries()
    for generation, files in payload.properties.items():
        properties.extend(
            generation,
            PropertyFile.GLOBAL,
            (_build_property(item) for item in files.global_properties),
        )
        properties.extend(
            generation,
            PropertyFile.SITE,
            (_build_property(item) for item in files.site_properties),
        )

    return ConfigurationBundle(
        service_configs=InMemoryServiceConfigRegistry(
            [_build_service_config(service) for service in payload.service_configs]
        ),
        properties=properties,
        review_configs=InMemoryReviewConfigRegistry(
            [_build_review_service(service) for service in payload.review_configs]
        ),
    )


def dump_configuration_bundle(bundle: ConfigurationBundle) -> ConfigurationBundleFile:
    return ConfigurationBundleFile(
        service_configs=[
            ServiceConfigModel(
                service_name=service.service_name,
                config_categories=[
                    ConfigCategoryModel(
                        name=category.name,
                        host_component_names=(
                            list(category.host_component_names)
                            if category.host_component_names is not None
                            else None
                        ),
                    )
                    for category in service.config_categories
                ],
            )
            for service in bundle.service_configs.services()
        ],
        properties={
            generation: PropertyFilesModel(
                global_properties=[
                    _dump_property(record)
                    for record in bundle.properties.records(generation, PropertyFile.GLOBAL)
                ],
                site_properties=[
                    _dump_property(record)
                    for record in bundle.properties.records(generation, PropertyFile.SITE)
                ],
            )
            for generation in StackGeneration
        },
        review_configs=[
            ReviewServiceModel(
                service_name=service.service_name,
                display_name=service.display_name,
                service_components=[
                    ReviewComponentModel(
                        component_name=component.component_name,
                        display_name=component.display_name,
                        value=component.value,
                    )
                    for component in service.service_components
                ],
            )
            for service in bundle.review_configs.services()
        ],
    )


def _build_component(component: StackComponentModel) -> ComponentDescriptor:
    return ComponentDescriptor(**component.model_dump())


def _build_service_config(service: ServiceConfigModel) -> ServiceConfig:
    return ServiceConfig(
        service_name=service.service_name,
        config_categories=[
            ConfigCategory(name=category.name, host_component_names=category.host_component_names)
            for category in service.config_categories
        ],
    )


def _build_property(item: ConfigPropertyModel) -> ConfigProperty:
    return ConfigProperty(**item.model_dump())


def _dump_property(record: ConfigProperty) -> ConfigPropertyModel:
    return ConfigPropertyModel(
        category=record.category,
        key=record.key,
        value=record.value,
        display_name=record.display_name,
        service_name=record.service_name,
        filename=record.filename,
    )


def _build_review_service(service: ReviewServiceModel) -> ReviewService:
    return ReviewService(
        service_name=service.service_name,
        display_name=service.display_name,
        service_components=[
            ReviewComponent(**component.model_dump()) for component in service.service_components
        ],
    )
