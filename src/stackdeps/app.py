"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stackdeps.adapters.json_files import (
    load_configuration_bundle,
    load_stack_definition,
    write_configuration_bundle,
)
from stackdeps.adapters.memory import StackComponentCatalog
from stackdeps.config import get_reconciler_config
from stackdeps.domain.active_stack import ActiveStack
from stackdeps.domain.reconciliation import (
    CapabilityIndex,
    ComponentCapabilities,
    ReconcileResult,
    StackDependencyReconciler,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from stackdeps.adapters.json_files import StackDefinition
    from stackdeps.adapters.memory import ConfigurationBundle
    from stackdeps.config import ReconcilerConfig


log = getLogger(__name__)


@dataclass(slots=True)
class StackSession:
    """Wires a configuration bundle, the stack catalogue and the reconciler together."""

    bundle: ConfigurationBundle
    catalog: StackComponentCatalog
    active_stack: ActiveStack
    reconciler: StackDependencyReconciler
    _last_result: ReconcileResult = field(
        default_factory=lambda: ReconcileResult(skipped=True), init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.reconciler.subscribe(self._record)

    @property
    def capability_index(self) -> CapabilityIndex:
        return CapabilityIndex(self.catalog)

    def activate(self, definition: StackDefinition) -> ReconcileResult:
        """Load ``definition`` into the catalogue and select its version.

        A version change triggers reconciliation through the active stack; an
        unchanged version reconciles directly so a new catalogue is still applied.
        """

        self.catalog.load(definition.components)
        self._last_result = ReconcileResult(skipped=True)
        if self.active_stack.switch_to(definition.version.name):
            return self._last_result
        return self.reconciler.reconcile()

    def _record(self, result: ReconcileResult) -> None:
        self._last_result = result


def build_session(
    bundle: ConfigurationBundle,
    *,
    config: ReconcilerConfig | None = None,
) -> StackSession:
    effective_config = config or get_reconciler_config()
    catalog = StackComponentCatalog()
    active_stack = ActiveStack(default_version=effective_config.default_stack_version)
    reconciler = StackDependencyReconciler(
        metadata=catalog,
        service_configs=bundle.service_configs,
        properties=bundle.properties,
        review_configs=bundle.review_configs,
        ledger_policy=effective_config.ledger_policy,
        restore_target=effective_config.restore_target,
        skip=effective_config.skip,
    )
    reconciler.bind(active_stack)
    return StackSession(
        bundle=bundle,
        catalog=catalog,
        active_stack=active_stack,
        reconciler=reconciler,
    )


def reconcile_stack_files(
    *,
    config_path: Path,
    stack_paths: Sequence[Path],
    output_path: Path | None = None,
    config: ReconcilerConfig | None = None,
) -> StackSession:
    """Apply each stack file in order to the configuration bundle at ``config_path``."""

    session = build_session(load_configuration_bundle(config_path), config=config)
    log.info(
        "Starting reconciliation: bundle=%s, stacks=%s, policy=%s, restore=%s",
        config_path,
        len(stack_paths),
        session.reconciler.ledger_policy,
        session.reconciler.restore_target,
    )

    for stack_path in stack_paths:
        definition = load_stack_definition(stack_path)
        result = session.activate(definition)
        log.info(
            "Stack %s: skipped=%s, disabled=%s, enabled=%s",
            definition.version,
            result.skipped,
            result.disabled,
            result.enabled,
        )

    if output_path is not None:
        write_configuration_bundle(session.bundle, output_path)
        log.info("Wrote reconciled configuration to %s", output_path)

    log.info(
        "Finished reconciliation: disabled components=%s",
        list(session.reconciler.ledger.component_names()),
    )
    return session


def describe_capabilities(stack_path: Path) -> ComponentCapabilities:
    """Return the capability index of the stack definition at ``stack_path``."""

    catalog = StackComponentCatalog()
    catalog.load(load_stack_definition(stack_path).components)
    return CapabilityIndex(catalog).capabilities()
