"""Reconciliation of configuration registries against the active stack.

The reconciler removes configuration that belongs to components missing from
the loaded stack definition and keeps enough state in a ledger to restore it
when a later stack provides the component again.
"""

from __future__ import annotations

from .capabilities import CapabilityIndex, ComponentCapabilities, index_capabilities
from .engine import PassObserver, ReconcileResult, StackDependencyReconciler
from .ledger import DisabledComponentLedger

__all__ = [
    "CapabilityIndex",
    "ComponentCapabilities",
    "DisabledComponentLedger",
    "PassObserver",
    "ReconcileResult",
    "StackDependencyReconciler",
    "index_capabilities",
]
