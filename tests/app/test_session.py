from __future__ import annotations

from typing import TYPE_CHECKING

from stackdeps.adapters.json_files import (
    StackDefinition,
    load_configuration_bundle,
    load_stack_definition,
)
from stackdeps.adapters.memory import StackComponentCatalog
from stackdeps.app import (
    StackSession,
    build_session,
    describe_capabilities,
    reconcile_stack_files,
)
from stackdeps.config import ReconcilerConfig
from stackdeps.domain.active_stack import ActiveStack
from stackdeps.domain.model import PropertyFile, StackGeneration
from stackdeps.domain.reconciliation import StackDependencyReconciler
from tests.support.stacks import property_keys, registry_snapshot, review_names

if TYPE_CHECKING:
    from pathlib import Path


def test_switching_stacks_disables_and_restores_components(
    data_dir: Path,
    reconciler_config: ReconcilerConfig,
) -> None:
    bundle = load_configuration_bundle(data_dir / "configuration_bundle.json")
    original = registry_snapshot(bundle)
    session = build_session(bundle, config=reconciler_config)

    first = session.activate(load_stack_definition(data_dir / "stack_hdp2.json"))
    assert not first.skipped
    assert not first.changed

    ha = session.activate(load_stack_definition(data_dir / "stack_hdp2_ha.json"))
    assert ha.generation is StackGeneration.CURRENT
    assert ha.disabled == ["SECONDARY_NAMENODE"]
    assert "snamenode_host" not in property_keys(
        bundle, StackGeneration.CURRENT, PropertyFile.GLOBAL
    )
    assert "JOURNALNODE" in session.capability_index.capabilities().slaves
    assert review_names(bundle, "HDFS") == ["NAMENODE", "DATANODE"]

    back = session.activate(load_stack_definition(data_dir / "stack_hdp2.json"))
    assert back.enabled == ["SECONDARY_NAMENODE"]
    assert registry_snapshot(bundle) == original
    assert len(session.reconciler.ledger) == 0


def test_legacy_stack_restores_into_active_generation(
    data_dir: Path,
    reconciler_config: ReconcilerConfig,
) -> None:
    bundle = load_configuration_bundle(data_dir / "configuration_bundle.json")
    session = build_session(bundle, config=reconciler_config)
    session.activate(load_stack_definition(data_dir / "stack_hdp2_ha.json"))

    legacy = session.activate(load_stack_definition(data_dir / "stack_hdp1.json"))

    assert legacy.generation is StackGeneration.LEGACY
    assert legacy.disabled == ["RESOURCEMANAGER", "NODEMANAGER"]
    assert legacy.enabled == ["SECONDARY_NAMENODE"]
    legacy_global = property_keys(bundle, StackGeneration.LEGACY, PropertyFile.GLOBAL)
    assert legacy_global.count("snamenode_host") == 2
    assert "snamenode_host" not in property_keys(
        bundle, StackGeneration.CURRENT, PropertyFile.GLOBAL
    )
    assert review_names(bundle, "YARN") == []
    assert set(session.reconciler.ledger.component_names()) == {"RESOURCEMANAGER", "NODEMANAGER"}


def test_component_missing_on_both_generations_round_trips_without_duplicates(
    data_dir: Path,
    reconciler_config: ReconcilerConfig,
) -> None:
    bundle = load_configuration_bundle(data_dir / "configuration_bundle.json")
    original = registry_snapshot(bundle)
    session = build_session(bundle, config=reconciler_config)
    session.activate(load_stack_definition(data_dir / "stack_hdp2_ha.json"))
    hdp1 = load_stack_definition(data_dir / "stack_hdp1.json")
    hdp1_without_snn = StackDefinition(
        version=hdp1.version,
        components=tuple(
            component
            for component in hdp1.components
            if component.component_name != "SECONDARY_NAMENODE"
        ),
    )

    legacy = session.activate(hdp1_without_snn)

    assert legacy.generation is StackGeneration.LEGACY
    assert legacy.disabled == ["SECONDARY_NAMENODE", "RESOURCEMANAGER", "NODEMANAGER"]
    for generation in StackGeneration:
        assert "snamenode_host" not in property_keys(bundle, generation, PropertyFile.GLOBAL)
    assert "dfs.secondary.http.address" not in property_keys(
        bundle, StackGeneration.LEGACY, PropertyFile.SITE
    )

    back = session.activate(load_stack_definition(data_dir / "stack_hdp2.json"))

    assert sorted(back.enabled) == [
        "NODEMANAGER",
        "RESOURCEMANAGER",
        "SECONDARY_NAMENODE",
        "SECONDARY_NAMENODE",
    ]
    for generation in StackGeneration:
        assert property_keys(bundle, generation, PropertyFile.GLOBAL).count("snamenode_host") == 1
    assert registry_snapshot(bundle) == original
    assert len(session.reconciler.ledger) == 0


def test_activating_same_version_still_reconciles_new_catalogue(
    data_dir: Path,
    reconciler_config: ReconcilerConfig,
) -> None:
    bundle = load_configuration_bundle(data_dir / "configuration_bundle.json")
    session = build_session(bundle, config=reconciler_config)
    definition = load_stack_definition(data_dir / "stack_hdp2.json")
    session.activate(definition)

    reduced = StackDefinition(
        version=definition.version,
        components=tuple(
            component
            for component in definition.components
            if component.component_name != "DATANODE"
        ),
    )
    result = session.activate(reduced)

    assert not result.skipped
    assert result.disabled == ["DATANODE"]


def test_skip_configuration_prevents_changes(data_dir: Path) -> None:
    bundle = load_configuration_bundle(data_dir / "configuration_bundle.json")
    original = registry_snapshot(bundle)
    session = build_session(bundle, config=ReconcilerConfig(skip=True))

    result = session.activate(load_stack_definition(data_dir / "stack_hdp2_ha.json"))

    assert result.skipped
    assert registry_snapshot(bundle) == original


def test_reconcile_stack_files_writes_output(
    data_dir: Path,
    tmp_path: Path,
    reconciler_config: ReconcilerConfig,
) -> None:
    output = tmp_path / "reconciled.json"

    session = reconcile_stack_files(
        config_path=data_dir / "configuration_bundle.json",
        stack_paths=[data_dir / "stack_hdp2.json", data_dir / "stack_hdp2_ha.json"],
        output_path=output,
        config=reconciler_config,
    )

    assert session.reconciler.ledger.component_names() == ("SECONDARY_NAMENODE",)
    written = load_configuration_bundle(output)
    assert review_names(written, "HDFS") == ["NAMENODE", "DATANODE"]


def test_describe_capabilities(data_dir: Path) -> None:
    capabilities = describe_capabilities(data_dir / "stack_hdp2.json")

    assert capabilities.clients == ("HDFS_CLIENT",)
    assert capabilities.slaves == ("DATANODE", "NODEMANAGER")
    assert capabilities.masters == ("NAMENODE", "SECONDARY_NAMENODE", "RESOURCEMANAGER")


def test_session_built_directly_reports_switch_results(data_dir: Path) -> None:
    bundle = load_configuration_bundle(data_dir / "configuration_bundle.json")
    catalog = StackComponentCatalog()
    active_stack = ActiveStack(default_version="HDP-2.0.5")
    reconciler = StackDependencyReconciler(
        metadata=catalog,
        service_configs=bundle.service_configs,
        properties=bundle.properties,
        review_configs=bundle.review_configs,
    )
    reconciler.bind(active_stack)
    session = StackSession(
        bundle=bundle,
        catalog=catalog,
        active_stack=active_stack,
        reconciler=reconciler,
    )

    result = session.activate(load_stack_definition(data_dir / "stack_hdp2_ha.json"))

    assert not result.skipped
    assert result.disabled == ["SECONDARY_NAMENODE"]
