"""Catalog reconciliation."""

from brokersync.reconcile.reconciler import Reconciler

__all__ = ["Reconciler"]
