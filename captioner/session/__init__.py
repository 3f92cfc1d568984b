# Path: captioner/session/__init__.py
# Purpose: Package initializer for the interactive caption editing session.
# Layer: captioner/session.
# Details: Exposes the session state machine, its states and events, and the console display.

from .display import ConsoleDisplay, SessionDisplay
from .editor import EditSession
from .state import Browsing, Exiting, Intent, SessionEvent, SessionState, ViewingAndEditing

__all__ = [
    "Browsing",
    "ConsoleDisplay",
    "EditSession",
    "Exiting",
    "Intent",
    "SessionDisplay",
    "SessionEvent",
    "SessionState",
    "ViewingAndEditing",
]
