# Path: captioner/viewer/launcher.py
# Purpose: Launch and stop external image viewer processes.
# Layer: captioner/viewer.
# Details: Viewers run detached from the terminal so captions can be typed while the image is shown.

from __future__ import annotations

import logging
import subprocess
from typing import Any, Protocol, Sequence

from captioner.errors import SpawnError

logger = logging.getLogger(__name__)


class ViewerLauncher(Protocol):
    """Spawn and terminate viewer processes on behalf of an editing session."""

    def spawn(self, argv: Sequence[str]) -> Any:
        """Start the viewer and return an opaque handle, raising SpawnError on failure."""

    def is_running(self, handle: Any) -> bool:
        """Return True while the process behind ``handle`` has not exited."""

    def terminate(self, handle: Any) -> None:
        """Ask the process behind ``handle`` to exit if it is still running."""


class PopenLauncher:
    """ViewerLauncher backed by ``subprocess.Popen``.

    The viewer is never awaited while it runs. ``terminate`` sends a polite
    termination request first and kills the process only if it does not exit
    within ``terminate_timeout`` seconds.
    """

    def __init__(self, terminate_timeout: float = 2.0) -> None:
        self.terminate_timeout = terminate_timeout

    def spawn(self, argv: Sequence[str]) -> subprocess.Popen:
        logger.debug("Launching viewer: %s", list(argv))
        try:
            return subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as exc:
            raise SpawnError(f"Unable to launch image viewer '{argv[0]}': {exc}") from exc

    def is_running(self, handle: subprocess.Popen) -> bool:
        return handle.poll() is None

    def terminate(self, handle: subprocess.Popen) -> None:
        if not self.is_running(handle):
            return
        logger.debug("Terminating viewer pid=%s", handle.pid)
        handle.terminate()
        try:
            handle.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("Viewer pid=%s ignored termination, killing it.", handle.pid)
            handle.kill()
            handle.wait()
