# Path: captioner/errors.py
# Purpose: Define the error taxonomy raised by the captioning pipeline.
# Layer: captioner.
# Details: Fatal errors propagate to the CLI; SpawnError is handled inside the editing session.

from __future__ import annotations

from pathlib import Path
from typing import Optional


class CaptionerError(Exception):
    """Base class for all errors reported to the user."""


class DirectoryNotFound(CaptionerError):
    """The gallery directory does not exist or is not a directory."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"Gallery directory not found: {directory}")
        self.directory = directory


class PermissionDenied(CaptionerError):
    """The gallery directory cannot be listed."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"Permission denied while reading gallery directory: {directory}")
        self.directory = directory


class NotFound(CaptionerError):
    """A caption file was required but does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Caption file not found: {path}")
        self.path = path


class MalformedInput(CaptionerError):
    """The persisted caption file does not have the expected record shape."""

    def __init__(self, path: Path, reason: str, line: Optional[int] = None) -> None:
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"Malformed caption file {location}: {reason}")
        self.path = path
        self.line = line


class IOFailure(CaptionerError):
    """Writing the caption file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Unable to write captions to {path}: {reason}")
        self.path = path


class SpawnError(CaptionerError):
    """The image viewer could not be launched."""


class InvalidArgument(CaptionerError):
    """A configuration value cannot be used."""
