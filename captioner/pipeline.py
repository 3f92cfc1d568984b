# Path: captioner/pipeline.py
# Purpose: Orchestrate one captioning run: scan, load, reconcile, edit, save.
# Layer: captioner.
# Details: Owns the working list for the run and lends it to the edit session and the caption store.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from config.settings import AppSettings
from captioner.indexing.scanner import ImageScanner
from captioner.models.domain import WorkingList
from captioner.session.display import ConsoleDisplay, SessionDisplay
from captioner.session.editor import EditSession
from captioner.store.caption_store import CaptionStore
from captioner.sync.reconcile import reconcile_with_report
from captioner.viewer.launcher import PopenLauncher, ViewerLauncher

logger = logging.getLogger(__name__)


class CaptionPipeline:
    """High-level service bridging the CLI with scanning, storage, and the editing session."""

    def __init__(
        self,
        settings: AppSettings,
        scanner: Optional[ImageScanner] = None,
        store: Optional[CaptionStore] = None,
        display: Optional[SessionDisplay] = None,
        launcher: Optional[ViewerLauncher] = None,
    ) -> None:
        self.settings = settings
        self.scanner = scanner or ImageScanner(settings.gallery_dir, settings.supported_extensions)
        self.store = store or CaptionStore.for_output_type(settings.output_type)
        self.display = display
        self.launcher = launcher
        self.viewer = settings.viewer_spec()

    def run(self) -> Path:
        """
        Execute the run and return the path of the written caption file.

        External calls:
        - captioner/indexing/scanner.py::ImageScanner.list_images - gallery membership.
        - captioner/store/caption_store.py::CaptionStore.load / save - caption persistence.
        - captioner/session/editor.py::EditSession.run - interactive editing when enabled.
        """

        output_path = self.settings.output_path(self.store.serializer.extension)
        records = self.synchronize(output_path)
        if self.settings.edit:
            self.edit(records)
        self.store.save(output_path, records)
        return output_path

    def synchronize(self, output_path: Path) -> WorkingList:
        """Build the working list from the gallery and the existing caption file."""

        listing = self.scanner.list_images()
        if output_path.exists():
            logger.info('Caption file "%s" already exists, reading file.', output_path.name)
            previous = self.store.load(output_path)
        else:
            logger.info("Generating new captions.")
            previous = {}

        records, report = reconcile_with_report(listing, previous)
        if previous and report.added:
            logger.info("Appending the following new images: [%s]", ", ".join(report.added))
        for filename, caption in report.orphaned_captions.items():
            logger.warning("Dropping caption for missing image %s: %r", filename, caption)
        logger.info("%d image(s) in gallery %s", len(records), self.settings.gallery_dir)
        return records

    def edit(self, records: WorkingList) -> int:
        """Run the interactive session over ``records``; return the number of commits."""

        if not records:
            logger.info("No images to caption in %s", self.settings.gallery_dir)
            return 0
        display = self.display or ConsoleDisplay(describe=self.scanner.describe)
        session = EditSession(
            records,
            display,
            gallery_dir=self.settings.gallery_dir,
            viewer=self.viewer,
            launcher=self.launcher or PopenLauncher(),
        )
        return session.run()
