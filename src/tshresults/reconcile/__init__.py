"""Pairing reconciliation."""

from tshresults.reconcile.reconciler import (
    PairingReconciler,
    ReconciliationReport,
    build_result,
    order_by_start,
    validate_boards,
    validate_starts,
)

__all__ = [
    "PairingReconciler",
    "ReconciliationReport",
    "build_result",
    "order_by_start",
    "validate_boards",
    "validate_starts",
]
