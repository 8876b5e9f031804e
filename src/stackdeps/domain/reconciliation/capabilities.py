"""Capability index over the active stack's component catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from stackdeps.domain.model import CapabilityFlag

if TYPE_CHECKING:
    from stackdeps.domain.ports import ComponentMetadataSource


@dataclass(frozen=True, slots=True, kw_only=True)
class ComponentCapabilities:
    """Component names per capability flag, in catalogue order."""

    all_components: tuple[str, ...] = ()
    reassignable: tuple[str, ...] = ()
    restartable: tuple[str, ...] = ()
    deletable: tuple[str, ...] = ()
    rollin_restart_allowed: tuple[str, ...] = ()
    decommission_allowed: tuple[str, ...] = ()
    addable_to_host: tuple[str, ...] = ()
    slaves: tuple[str, ...] = ()
    masters: tuple[str, ...] = ()
    clients: tuple[str, ...] = ()


FIELDS_BY_FLAG: Final[dict[CapabilityFlag, str]] = {
    CapabilityFlag.REASSIGNABLE: "reassignable",
    CapabilityFlag.RESTARTABLE: "restartable",
    CapabilityFlag.DELETABLE: "deletable",
    CapabilityFlag.ROLLIN_RESTART_ALLOWED: "rollin_restart_allowed",
    CapabilityFlag.DECOMMISSION_ALLOWED: "decommission_allowed",
    CapabilityFlag.ADDABLE_TO_HOST: "addable_to_host",
    CapabilityFlag.SLAVE: "slaves",
    CapabilityFlag.MASTER: "masters",
    CapabilityFlag.CLIENT: "clients",
}


def index_capabilities(source: ComponentMetadataSource) -> ComponentCapabilities:
    """Compute the capability subsets from the current catalogue contents."""

    subsets = {
        field_name: tuple(
            descriptor.component_name for descriptor in source.filter_by_flag(flag)
        )
        for flag, field_name in FIELDS_BY_FLAG.items()
    }
    return ComponentCapabilities(
        all_components=tuple(descriptor.component_name for descriptor in source.find_all()),
        **subsets,
    )


@dataclass(slots=True)
class CapabilityIndex:
    """Recomputes capability subsets on every call; nothing is cached."""

    source: ComponentMetadataSource

    def capabilities(self) -> ComponentCapabilities:
        return index_capabilities(self.source)
