"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class StackGeneration(StrEnum):
    """Stack major-version family; property files are laid out per generation."""

    LEGACY = "legacy"
    CURRENT = "current"


class PropertyFile(StrEnum):
    GLOBAL = "global_properties"
    SITE = "site_properties"


class CapabilityFlag(StrEnum):
    """Boolean capability attributes carried by component descriptors."""

    REASSIGNABLE = "is_reassignable"
    RESTARTABLE = "is_restartable"
    DELETABLE = "is_deletable"
    ROLLIN_RESTART_ALLOWED = "is_rollin_restart_allowed"
    DECOMMISSION_ALLOWED = "is_decommission_allowed"
    ADDABLE_TO_HOST = "is_addable_to_host"
    SLAVE = "is_slave"
    MASTER = "is_master"
    CLIENT = "is_client"


class LedgerPolicy(StrEnum):
    """How the disable pass treats components that already have a ledger entry."""

    # one entry per component; repeated passes are idempotent
    DEDUPLICATE = "deduplicate"
    # legacy behaviour: still-missing components are disabled again on every pass
    ACCUMULATE = "accumulate"


class RestoreTarget(StrEnum):
    """Which generation's property registries receive restored records."""

    ACTIVE = "active"
    CAPTURED = "captured"
