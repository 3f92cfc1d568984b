# Path: captioner/sync/__init__.py
# Purpose: Package initializer for gallery/caption reconciliation.
# Layer: captioner/sync.
# Details: Exposes the pure merge of directory membership with stored caption text.

from .reconcile import as_mapping, reconcile, reconcile_with_report

__all__ = ["as_mapping", "reconcile", "reconcile_with_report"]
