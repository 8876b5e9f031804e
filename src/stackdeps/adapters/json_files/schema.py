"""Pydantic models for stack definition and configuration bundle files."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from stackdeps.domain.model import StackGeneration  # noqa: TC001


class FileBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class StackComponentModel(FileBaseModel):
    component_name: str
    service_name: str
    is_reassignable: bool = False
    is_restartable: bool = False
    is_deletable: bool = False
    is_rollin_restart_allowed: bool = False
    is_decommission_allowed: bool = False
    is_addable_to_host: bool = False
    is_slave: bool = False
    is_master: bool = False
    is_client: bool = False


class StackDefinitionFile(FileBaseModel):
    version: str
    components: list[StackComponentModel] = Field(default_factory=list["StackComponentModel"])


class ConfigCategoryModel(FileBaseModel):
    name: str
    host_component_names: list[str] | None = None


class ServiceConfigModel(FileBaseModel):
    service_name: str
    config_categories: list[ConfigCategoryModel] = Field(
        default_factory=list["ConfigCategoryModel"]
    )


class ConfigPropertyModel(FileBaseModel):
    category: str
    key: str
    value: str | None = None
    display_name: str | None = None
    service_name: str | None = None
    filename: str | None = None


class PropertyFilesModel(FileBaseModel):
    global_properties: list[ConfigPropertyModel] = Field(
        default_factory=list["ConfigPropertyModel"]
    )
    site_properties: list[ConfigPropertyModel] = Field(
        default_factory=list["ConfigPropertyModel"]
    )


class ReviewComponentModel(FileBaseModel):
    component_name: str
    display_name: str | None = None
    value: str | None = None


class ReviewServiceModel(FileBaseModel):
    service_name: str
    display_name: str | None = None
    service_components: list[ReviewComponentModel] = Field(
        default_factory=list["ReviewComponentModel"]
    )


class ConfigurationBundleFile(FileBaseModel):
    service_configs: list[ServiceConfigModel] = Field(default_factory=list["ServiceConfigModel"])
    properties: dict[StackGeneration, PropertyFilesModel] = Field(
        default_factory=dict["StackGeneration", "PropertyFilesModel"]
    )
    review_configs: list[ReviewServiceModel] = Field(default_factory=list["ReviewServiceModel"])
