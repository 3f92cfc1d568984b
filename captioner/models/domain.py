# Path: captioner/models/domain.py
# Purpose: Define domain models shared across scanning, reconciliation, storage, and editing workflows.
# Layer: captioner/models.
# Details: Lightweight dataclasses keep the working list easy to pass between the pipeline stages.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass
class CaptionRecord:
    """Caption text attached to one image of the gallery."""

    filename: str
    caption: str = ""

    def label(self) -> str:
        """Return the one-line label shown in the gallery listing."""

        return f"{self.filename}: {self.caption}"


WorkingList = List[CaptionRecord]


@dataclass(frozen=True)
class ViewerSpec:
    """External command used to preview an image; args are already unescaped."""

    command: str
    args: Tuple[str, ...] = ()

    def argv(self, image_path: Path) -> List[str]:
        """Return the full command line for previewing ``image_path``."""

        return [self.command, *self.args, str(image_path)]


@dataclass
class SyncReport:
    """Summary of what a reconciliation changed compared to the stored captions."""

    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    orphaned_captions: Dict[str, str] = field(default_factory=dict)
