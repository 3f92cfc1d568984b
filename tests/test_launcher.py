"""
Tests for the subprocess-backed viewer launcher.
"""

import sys

import pytest

from captioner.errors import SpawnError
from captioner.viewer.launcher import PopenLauncher


class TestPopenLauncher:
    """Tests for PopenLauncher."""

    def test_missing_binary_raises_spawn_error(self):
        with pytest.raises(SpawnError, match="no-such-viewer-binary"):
            PopenLauncher().spawn(["no-such-viewer-binary", "image.jpg"])

    def test_terminate_running_process(self):
        launcher = PopenLauncher(terminate_timeout=5)
        handle = launcher.spawn([sys.executable, "-c", "import time; time.sleep(60)"])
        try:
            assert launcher.is_running(handle)
            launcher.terminate(handle)
            assert not launcher.is_running(handle)
        finally:
            if handle.poll() is None:
                handle.kill()
                handle.wait()

    def test_terminate_finished_process_is_noop(self):
        launcher = PopenLauncher()
        handle = launcher.spawn([sys.executable, "-c", "pass"])
        handle.wait()

        launcher.terminate(handle)

        assert handle.returncode == 0
