# Path: captioner/session/editor.py
# Purpose: Drive the interactive caption editing session.
# Layer: captioner/session.
# Details: A synchronous state machine fed by a blocking read/dispatch/render loop over a SessionDisplay.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from captioner.errors import SpawnError
from captioner.models.domain import ViewerSpec, WorkingList
from captioner.viewer.launcher import PopenLauncher, ViewerLauncher

from .display import SessionDisplay
from .state import Browsing, Exiting, Intent, SessionEvent, SessionState, ViewingAndEditing

logger = logging.getLogger(__name__)


class EditSession:
    """Walk the working list and commit caption edits into it.

    The session is the only code that mutates ``records`` and it does so only
    on COMMIT. At most one viewer process is associated with the session; it is
    started when editing begins and asked to terminate whenever editing ends.
    """

    def __init__(
        self,
        records: WorkingList,
        display: SessionDisplay,
        gallery_dir: Path,
        viewer: Optional[ViewerSpec] = None,
        launcher: Optional[ViewerLauncher] = None,
    ) -> None:
        self.records = records
        self.display = display
        self.gallery_dir = Path(gallery_dir)
        self.viewer = viewer
        self.launcher = launcher if launcher is not None else PopenLauncher()
        self.state: SessionState = Browsing(0) if records else Exiting()
        self.commits = 0
        self._viewer_handle: Any = None

    @property
    def finished(self) -> bool:
        return isinstance(self.state, Exiting)

    def run(self) -> int:
        """Process user events until the user quits; return the number of commits.

        An interrupt is handled as QUIT so committed captions are still saved.
        """

        with self.display.activate():
            try:
                while not self.finished:
                    self.display.render(self.state, self.records)
                    self.dispatch(self.display.read_event(self.state))
            except KeyboardInterrupt:
                logger.warning("Editing interrupted; keeping %d committed caption(s).", self.commits)
            finally:
                self._release_viewer()
                self.state = Exiting()
        logger.info("Editing session finished with %d committed caption(s).", self.commits)
        return self.commits

    def dispatch(self, event: SessionEvent) -> SessionState:
        """Apply one event to the current state and return the new state."""

        state = self.state
        if event.intent is Intent.QUIT:
            self._release_viewer()
            self.state = Exiting()
        elif isinstance(state, Browsing):
            self.state = self._on_browsing(state, event)
        elif isinstance(state, ViewingAndEditing):
            self.state = self._on_editing(state, event)
        return self.state

    def _on_browsing(self, state: Browsing, event: SessionEvent) -> SessionState:
        if event.intent is Intent.NEXT:
            return Browsing(self._clamp(state.index + 1))
        if event.intent is Intent.PREVIOUS:
            return Browsing(self._clamp(state.index - 1))
        if event.intent is Intent.BEGIN_EDIT:
            index = state.index if event.index is None else event.index
            if not 0 <= index < len(self.records):
                self.display.notify(f"No image number {index + 1}.")
                return state
            self._launch_viewer(index)
            return ViewingAndEditing(index, self.records[index].caption)
        return state

    def _on_editing(self, state: ViewingAndEditing, event: SessionEvent) -> SessionState:
        if event.intent is Intent.TEXT:
            return ViewingAndEditing(state.index, event.text)
        if event.intent is Intent.APPEND:
            return ViewingAndEditing(state.index, state.buffer + event.text)
        if event.intent is Intent.BACKSPACE:
            return ViewingAndEditing(state.index, state.buffer[:-1])
        if event.intent is Intent.COMMIT:
            record = self.records[state.index]
            record.caption = state.buffer
            self.commits += 1
            logger.debug("Committed caption for %s", record.filename)
            self._release_viewer()
            return Browsing(self._clamp(state.index + event.step))
        if event.intent is Intent.CANCEL:
            self._release_viewer()
            return Browsing(state.index)
        return state

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.records) - 1))

    def _launch_viewer(self, index: int) -> None:
        self._release_viewer()
        if self.viewer is None:
            return
        image_path = (self.gallery_dir / self.records[index].filename).resolve()
        try:
            self._viewer_handle = self.launcher.spawn(self.viewer.argv(image_path))
        except SpawnError as exc:
            logger.warning("%s", exc)
            self.display.notify(f"{exc} (continuing without a preview)")

    def _release_viewer(self) -> None:
        handle, self._viewer_handle = self._viewer_handle, None
        if handle is not None and self.launcher.is_running(handle):
            self.launcher.terminate(handle)
