"""
Pytest configuration and shared fixtures for gallery captioner tests.

Provides temporary galleries with real image files plus scripted
stand-ins for the session display and the viewer launcher.
"""

from contextlib import contextmanager
from pathlib import Path

import pytest
from PIL import Image

from captioner.errors import SpawnError
from captioner.session.state import Intent, SessionEvent


def write_image(directory: Path, name: str, size=(8, 6)) -> Path:
    """Write a small solid-colour image and return its path."""
    path = directory / name
    fmt = "JPEG" if path.suffix.lower() in {".jpg", ".jpeg"} else "PNG"
    Image.new("RGB", size, (200, 80, 40)).save(path, format=fmt)
    return path


@pytest.fixture
def gallery(tmp_path):
    """
    Provide a gallery directory holding a.jpg and b.jpg.

    Returns:
        Path to the gallery directory
    """
    write_image(tmp_path, "a.jpg")
    write_image(tmp_path, "b.jpg")
    return tmp_path


class ScriptedDisplay:
    """SessionDisplay that replays a fixed list of events."""

    def __init__(self, events):
        self.events = list(events)
        self.notices = []
        self.rendered = []
        self.active = False
        self.activations = 0

    @contextmanager
    def activate(self):
        self.active = True
        self.activations += 1
        try:
            yield
        finally:
            self.active = False

    def render(self, state, records):
        self.rendered.append(state)

    def notify(self, message):
        self.notices.append(message)

    def read_event(self, state):
        if not self.events:
            return SessionEvent(Intent.QUIT)
        event = self.events.pop(0)
        if isinstance(event, BaseException):
            raise event
        return event


class FakeHandle:
    def __init__(self, argv):
        self.argv = list(argv)
        self.running = True


class FakeLauncher:
    """ViewerLauncher recording spawned and terminated viewers."""

    def __init__(self, fail=False):
        self.fail = fail
        self.spawned = []
        self.terminated = []

    def spawn(self, argv):
        if self.fail:
            raise SpawnError(f"Unable to launch image viewer '{argv[0]}': not found")
        handle = FakeHandle(argv)
        self.spawned.append(handle)
        return handle

    def is_running(self, handle):
        return handle.running

    def terminate(self, handle):
        handle.running = False
        self.terminated.append(handle)


@pytest.fixture
def launcher():
    return FakeLauncher()
