"""Reconciler configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from stackdeps.domain.model import LedgerPolicy, RestoreTarget

from .env import env_choice, env_flag, env_str

DEFAULT_STACK_VERSION: Final[str] = "HDP-2.0.5"

SKIP_ENV: Final[str] = "STACKDEPS_SKIP_RECONCILE"
LEDGER_POLICY_ENV: Final[str] = "STACKDEPS_LEDGER_POLICY"
RESTORE_TARGET_ENV: Final[str] = "STACKDEPS_RESTORE_TARGET"
DEFAULT_STACK_VERSION_ENV: Final[str] = "STACKDEPS_DEFAULT_STACK_VERSION"


@dataclass(frozen=True, slots=True)
class ReconcilerConfig:
    """Switches controlling how the dependency reconciler behaves.

    ``skip`` disables reconciliation entirely (used by test harnesses that load
    registries without a real stack).
    """

    skip: bool = False
    ledger_policy: LedgerPolicy = LedgerPolicy.DEDUPLICATE
    restore_target: RestoreTarget = RestoreTarget.ACTIVE
    default_stack_version: str = DEFAULT_STACK_VERSION


def get_reconciler_config() -> ReconcilerConfig:
    return ReconcilerConfig(
        skip=env_flag(SKIP_ENV),
        ledger_policy=env_choice(
            LEDGER_POLICY_ENV, LedgerPolicy, default=LedgerPolicy.DEDUPLICATE
        ),
        restore_target=env_choice(
            RESTORE_TARGET_ENV, RestoreTarget, default=RestoreTarget.ACTIVE
        ),
        default_stack_version=env_str(DEFAULT_STACK_VERSION_ENV, default=DEFAULT_STACK_VERSION),
    )
