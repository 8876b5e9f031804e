from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from stackdeps.config import (
    DEFAULT_STACK_VERSION,
    ReconcilerConfig,
)
from stackdeps.domain.model import LedgerPolicy, RestoreTarget, StackGeneration
from stackdeps.domain.reconciliation import StackDependencyReconciler
from tests.support.stacks import make_bundle, make_catalog

if TYPE_CHECKING:
    from collections.abc import Callable

    from stackdeps.adapters.memory import ConfigurationBundle, StackComponentCatalog


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "STACKDEPS_SKIP_RECONCILE",
        "STACKDEPS_LEDGER_POLICY",
        "STACKDEPS_RESTORE_TARGET",
        "STACKDEPS_DEFAULT_STACK_VERSION",
        "STACKDEPS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def bundle() -> ConfigurationBundle:
    return make_bundle()


@pytest.fixture
def catalog() -> StackComponentCatalog:
    return make_catalog()


@pytest.fixture
def reconciler_factory(
    bundle: ConfigurationBundle,
    catalog: StackComponentCatalog,
) -> Callable[..., StackDependencyReconciler]:
    def factory(
        *,
        ledger_policy: LedgerPolicy = LedgerPolicy.DEDUPLICATE,
        restore_target: RestoreTarget = RestoreTarget.ACTIVE,
        generation: StackGeneration = StackGeneration.CURRENT,
        skip: bool = False,
    ) -> StackDependencyReconciler:
        return StackDependencyReconciler(
            metadata=catalog,
            service_configs=bundle.service_configs,
            properties=bundle.properties,
            review_configs=bundle.review_configs,
            generation_provider=lambda: generation,
            ledger_policy=ledger_policy,
            restore_target=restore_target,
            skip=skip,
        )

    return factory


@pytest.fixture
def reconciler(
    reconciler_factory: Callable[..., StackDependencyReconciler],
) -> StackDependencyReconciler:
    return reconciler_factory()


@pytest.fixture
def reconciler_config() -> ReconcilerConfig:
    return ReconcilerConfig(default_stack_version=DEFAULT_STACK_VERSION)


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"
