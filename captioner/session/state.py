# Path: captioner/session/state.py
# Purpose: Define the states and user events of the caption editing session.
# Layer: captioner/session.
# Details: States are immutable values; the session replaces its current state on every transition.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Browsing:
    """The user is moving through the gallery listing."""

    index: int


@dataclass(frozen=True)
class ViewingAndEditing:
    """The user is editing the caption of one image; ``buffer`` holds uncommitted text."""

    index: int
    buffer: str


@dataclass(frozen=True)
class Exiting:
    """Terminal state; the session loop stops."""


SessionState = Union[Browsing, ViewingAndEditing, Exiting]


class Intent(Enum):
    NEXT = "next"
    PREVIOUS = "previous"
    BEGIN_EDIT = "begin_edit"
    TEXT = "text"
    APPEND = "append"
    BACKSPACE = "backspace"
    COMMIT = "commit"
    CANCEL = "cancel"
    QUIT = "quit"


@dataclass(frozen=True)
class SessionEvent:
    """A discrete user intent.

    ``text`` carries the new buffer for TEXT and the characters for APPEND.
    ``step`` is the navigation applied after a COMMIT (-1, 0 or +1).
    ``index`` optionally selects the image for BEGIN_EDIT.
    """

    intent: Intent
    text: str = ""
    step: int = 0
    index: Optional[int] = None

    @classmethod
    def commit(cls, step: int = 0) -> "SessionEvent":
        return cls(Intent.COMMIT, step=step)

    @classmethod
    def set_text(cls, text: str) -> "SessionEvent":
        return cls(Intent.TEXT, text=text)
