"""Dependency reconciler between the stack catalogue and configuration registries.

A pass runs in three steps:
1) disable: every component referenced by a configuration category but missing
   from the catalogue has its properties and review summary removed
2) enable: ledger entries whose component is back in the catalogue are restored
3) the entries created by step 1 join the ledger

Step 2 only sees the ledger as it was before step 1, so a component is never
disabled and restored within the same pass.

Property registries are kept per stack generation. A component that is still
missing after a generation switch is disabled again against the new
generation's registries, so the ledger can hold one entry per generation.

Missing services, categories or review summaries are silent no-ops: the
registries may be partially loaded while a stack switch is in flight.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from stackdeps.domain.model import (
    ComponentDescriptor,
    DisabledComponent,
    LedgerPolicy,
    PropertyFile,
    RestoreTarget,
    StackGeneration,
)

from .ledger import DisabledComponentLedger

if TYPE_CHECKING:
    from stackdeps.domain.active_stack import ActiveStack
    from stackdeps.domain.model import StackVersion
    from stackdeps.domain.ports import (
        ComponentMetadataSource,
        PropertyRegistries,
        ReviewConfigRegistry,
        ServiceConfigRegistry,
    )

GenerationProvider = Callable[[], StackGeneration]

log = getLogger(__name__)


def _current_generation() -> StackGeneration:
    return StackGeneration.CURRENT


@dataclass(slots=True)
class ReconcileResult:
    """Outcome of one reconciliation pass."""

    generation: StackGeneration | None = None
    disabled: list[str] = field(default_factory=list[str])
    enabled: list[str] = field(default_factory=list[str])
    skipped: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.disabled or self.enabled)


PassObserver = Callable[[ReconcileResult], None]


@dataclass(slots=True, kw_only=True)
class StackDependencyReconciler:
    """Keep configuration registries consistent with the active stack's components."""

    metadata: ComponentMetadataSource
    service_configs: ServiceConfigRegistry
    properties: PropertyRegistries
    review_configs: ReviewConfigRegistry
    ledger: DisabledComponentLedger = field(default_factory=DisabledComponentLedger)
    generation_provider: GenerationProvider = _current_generation
    ledger_policy: LedgerPolicy = LedgerPolicy.DEDUPLICATE
    restore_target: RestoreTarget = RestoreTarget.ACTIVE
    skip: bool = False
    _observers: list[PassObserver] = field(
        default_factory=list["PassObserver"], init=False, repr=False
    )
    _in_progress: bool = field(default=False, init=False, repr=False)

    def bind(self, active_stack: ActiveStack) -> None:
        """Follow ``active_stack``: read its generation and reconcile on every switch."""

        self.generation_provider = lambda: active_stack.generation
        active_stack.subscribe(self._on_stack_switched)

    def subscribe(self, observer: PassObserver) -> None:
        """Register ``observer``; it is called once after each completed pass."""

        self._observers.append(observer)

    def reconcile(self) -> ReconcileResult:
        if self._in_progress:
            log.warning("Reconciliation already running; ignoring re-entrant call")
            return ReconcileResult(skipped=True)
        if self.skip:
            log.debug("Reconciliation disabled; skipping pass")
            return ReconcileResult(skipped=True)
        if not self.metadata.find_all():
            # catalogue not loaded yet: treating it as authoritative would disable everything
            log.debug("Stack catalogue is empty; skipping pass")
            return ReconcileResult(skipped=True)

        self._in_progress = True
        try:
            result = self._run_pass(self.generation_provider())
        finally:
            self._in_progress = False

        if result.changed:
            log.info(
                "Reconciled stack components: generation=%s, disabled=%s, enabled=%s, ledger=%s",
                result.generation,
                result.disabled,
                result.enabled,
                len(self.ledger),
            )
        for observer in tuple(self._observers):
            observer(result)
        return result

    def disable_component(
        self,
        component: ComponentDescriptor,
        generation: StackGeneration | None = None,
    ) -> DisabledComponent:
        """Remove ``component``'s properties and review summary; return what was removed."""

        effective_generation = (
            generation if generation is not None else self.generation_provider()
        )
        entry = DisabledComponent(
            component_name=component.component_name,
            service_name=component.service_name,
            generation=effective_generation,
        )

        service = self.service_configs.find_service(component.service_name)
        category = service.category_for(component.component_name) if service else None
        if category is not None:
            entry.config_category = category
            for property_file in PropertyFile:
                entry.properties[property_file] = self.properties.remove_category(
                    effective_generation, property_file, category.name
                )

        entry.review_component = self.review_configs.remove_component(
            component.service_name, component.component_name
        )
        log.info(
            "Disabled %s/%s: category=%s, properties=%s, review=%s",
            entry.service_name,
            entry.component_name,
            category.name if category else None,
            entry.property_count,
            entry.review_component is not None,
        )
        return entry

    def enable_component(
        self,
        entry: DisabledComponent,
        generation: StackGeneration | None = None,
    ) -> None:
        """Put the records captured in ``entry`` back into the registries.

        Under ``RestoreTarget.ACTIVE`` the records go to the active generation,
        unless the ledger also holds a capture of the same component from the
        active generation. That capture refills the active registries, so this
        one returns to the generation it was taken from.
        """

        active = generation if generation is not None else self.generation_provider()
        target = self._restore_target(entry, active)

        for property_file, records in entry.properties.items():
            if records:
                self.properties.extend(target, property_file, records)

        if entry.review_component is not None and not self.review_configs.append_component(
            entry.service_name, entry.review_component
        ):
            log.debug("No review entry for service %s; summary not restored", entry.service_name)
        log.info(
            "Enabled %s/%s: generation=%s, properties=%s",
            entry.service_name,
            entry.component_name,
            target,
            entry.property_count,
        )

    def _run_pass(self, generation: StackGeneration) -> ReconcileResult:
        result = ReconcileResult(generation=generation)
        pending: list[DisabledComponent] = []

        for service in self.service_configs.services():
            for category in service.config_categories:
                for component_name in category.host_component_names or ():
                    if self.metadata.find_by_name(component_name) is not None:
                        continue
                    if self._already_disabled(component_name, generation, pending):
                        continue
                    descriptor = ComponentDescriptor.minimal(component_name, service.service_name)
                    pending.append(self.disable_component(descriptor, generation))
                    result.disabled.append(component_name)

        returning = [
            entry
            for entry in self.ledger.entries()
            if self.metadata.find_by_name(entry.component_name) is not None
        ]
        for entry in returning:
            self.enable_component(entry, generation)
            result.enabled.append(entry.component_name)
        self.ledger.remove_all(returning)

        self.ledger.extend(pending)
        return result

    def _already_disabled(
        self,
        component_name: str,
        generation: StackGeneration,
        pending: list[DisabledComponent],
    ) -> bool:
        if self.ledger_policy is LedgerPolicy.ACCUMULATE:
            return False
        if self.ledger.holds(component_name, generation):
            return True
        return any(
            entry.component_name == component_name and entry.generation is generation
            for entry in pending
        )

    def _restore_target(self, entry: DisabledComponent, active: StackGeneration) -> StackGeneration:
        if self.restore_target is RestoreTarget.CAPTURED:
            return entry.generation
        if entry.generation is not active and self.ledger.holds(entry.component_name, active):
            return entry.generation
        return active

    def _on_stack_switched(self, version: StackVersion) -> None:
        log.debug("Active stack switched to %s", version)
        self.reconcile()
