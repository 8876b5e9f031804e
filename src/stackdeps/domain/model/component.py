"""Stack component descriptors."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import CapabilityFlag


@dataclass(frozen=True, slots=True, kw_only=True)
class ComponentDescriptor:
    """One deployable unit of the active stack.

    A *minimal* descriptor only carries ``component_name`` and ``service_name``;
    all capability flags then default to false.
    """

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

    @classmethod
    def minimal(cls, component_name: str, service_name: str) -> ComponentDescriptor:
        return cls(component_name=component_name, service_name=service_name)

    def has(self, flag: CapabilityFlag) -> bool:
        return bool(getattr(self, flag.value))
