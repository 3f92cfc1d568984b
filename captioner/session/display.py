# Path: captioner/session/display.py
# Purpose: Render the editing session in a terminal and translate typed lines into session events.
# Layer: captioner/session.
# Details: ConsoleDisplay is line oriented so it works over plain stdin/stdout and in tests with StringIO.

from __future__ import annotations

import sys
from collections import deque
from contextlib import contextmanager
from typing import Callable, ContextManager, Deque, Iterator, List, Optional, Protocol, TextIO

from captioner.models.domain import WorkingList

from .state import Browsing, Intent, SessionEvent, SessionState, ViewingAndEditing

BROWSE_HELP = "[n]ext  [p]rev  [e]dit (or Enter)  <number> edit image  [q]uit"
EDIT_HELP = (
    "Type a caption and press Enter to save and move on. "
    "Enter alone keeps the current text. /stay /prev /clear /cancel /quit. "
    "Start a line with // to enter it literally, e.g. ///quit saves the caption '/quit'."
)

BROWSE_COMMANDS = {
    "n": Intent.NEXT,
    "next": Intent.NEXT,
    "p": Intent.PREVIOUS,
    "prev": Intent.PREVIOUS,
    "e": Intent.BEGIN_EDIT,
    "edit": Intent.BEGIN_EDIT,
    "": Intent.BEGIN_EDIT,
    "q": Intent.QUIT,
    "quit": Intent.QUIT,
}


class SessionDisplay(Protocol):
    """Render session state and yield discrete user events."""

    def activate(self) -> ContextManager[None]:
        """Context manager bracketing the interactive phase."""

    def render(self, state: SessionState, records: WorkingList) -> None:
        """Show the current state to the user."""

    def notify(self, message: str) -> None:
        """Show a transient, non-fatal message."""

    def read_event(self, state: SessionState) -> SessionEvent:
        """Block until the user produces the next event."""


class ConsoleDisplay:
    """SessionDisplay reading commands line by line from a text stream."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        describe: Optional[Callable[[str], Optional[str]]] = None,
        window: int = 5,
    ) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.describe = describe
        self.window = window
        self._pending: Deque[SessionEvent] = deque()

    @contextmanager
    def activate(self) -> Iterator[None]:
        self._write("Caption Editor")
        self._pending.clear()
        try:
            yield
        finally:
            self._pending.clear()
            self._write("Leaving caption editor.")

    def render(self, state: SessionState, records: WorkingList) -> None:
        if isinstance(state, Browsing):
            self._render_listing(state.index, records)
        elif isinstance(state, ViewingAndEditing):
            record = records[state.index]
            details = self.describe(record.filename) if self.describe else None
            suffix = f" ({details})" if details else ""
            self._write(f"Editing caption for image {record.filename}{suffix}")
            self._write(f"Current: {state.buffer}")
            self._write(EDIT_HELP)

    def notify(self, message: str) -> None:
        self._write(f"! {message}")

    def read_event(self, state: SessionState) -> SessionEvent:
        if self._pending:
            return self._pending.popleft()
        prompt = "caption> " if isinstance(state, ViewingAndEditing) else "> "
        while not self._pending:
            line = self._read_line(prompt)
            if line is None:
                return SessionEvent(Intent.QUIT)
            if isinstance(state, ViewingAndEditing):
                self._pending.extend(self._parse_edit_line(line))
            else:
                event = self._parse_browse_line(line.strip())
                if event is None:
                    self.notify(f"Unknown command '{line.strip()}'. {BROWSE_HELP}")
                    continue
                self._pending.append(event)
        return self._pending.popleft()

    @staticmethod
    def _parse_browse_line(command: str) -> Optional[SessionEvent]:
        if command.isdigit():
            return SessionEvent(Intent.BEGIN_EDIT, index=int(command) - 1)
        intent = BROWSE_COMMANDS.get(command.lower())
        if intent is None:
            return None
        return SessionEvent(intent)

    @staticmethod
    def _parse_edit_line(line: str) -> List[SessionEvent]:
        if line.startswith("//"):
            return [SessionEvent.set_text(line[2:]), SessionEvent.commit(step=1)]
        command = line.strip()
        if command == "":
            return [SessionEvent.commit(step=1)]
        if command == "/stay":
            return [SessionEvent.commit(step=0)]
        if command == "/prev":
            return [SessionEvent.commit(step=-1)]
        if command == "/clear":
            return [SessionEvent.set_text("")]
        if command == "/cancel":
            return [SessionEvent(Intent.CANCEL)]
        if command == "/quit":
            return [SessionEvent(Intent.QUIT)]
        return [SessionEvent.set_text(line), SessionEvent.commit(step=1)]

    def _render_listing(self, index: int, records: WorkingList) -> None:
        start = max(0, index - self.window)
        end = min(len(records), index + self.window + 1)
        self._write("")
        for position in range(start, end):
            marker = ">" if position == index else " "
            self._write(f"{marker} {position + 1:>4}. {records[position].label()}")
        self._write(f"[{index + 1}/{len(records)}] {BROWSE_HELP}")

    def _read_line(self, prompt: str) -> Optional[str]:
        self.stdout.write(prompt)
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except KeyboardInterrupt:
            self._write("")
            return None
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()
