# Path: captioner/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: captioner/models.
# Details: Exposes dataclasses shared by scanning, reconciliation, storage, and editing layers.

from .domain import CaptionRecord, SyncReport, ViewerSpec, WorkingList

__all__ = ["CaptionRecord", "SyncReport", "ViewerSpec", "WorkingList"]
