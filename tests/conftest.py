"""Pytest configuration: a recording drawing backend and scripted keys."""

from pathlib import Path
from typing import Iterable, Optional

import pytest

from todo_panels.cli.core.input import InputReader, KeyEvent
from todo_panels.cli.core.terminal import Style, TerminalSize


def key_events(text: str) -> list[KeyEvent]:
    """Decode typed text ("s\\rq", arrow escapes...) into key events."""
    reader = InputReader(fd=0)
    reader.feed(text)
    events = []
    while reader.pending:
        event = reader.read(timeout=0)
        if event is not None:
            events.append(event)
    return events


class RecordingBackend:
    """
    In-memory DrawingBackend.

    Keeps every draw call of the last presented frame as
    (row, col, text, style) and replays scripted key events. Running out
    of keys behaves like a closed terminal.
    """

    def __init__(self, rows: int = 24, cols: int = 80, keys: Iterable[KeyEvent] = ()) -> None:
        self.rows = rows
        self.cols = cols
        self.keys = list(keys)
        self.frames = 0
        self.draws: list[tuple[int, int, str, Style]] = []
        self.presented: list[tuple[int, int, str, Style]] = []
        self._pos = (0, 0)

    def move_to(self, row: int, col: int) -> None:
        self._pos = (row, col)

    def draw_text(self, text: str, style: Style) -> None:
        row, col = self._pos
        self.draws.append((row, col, text, style))
        self._pos = (row, col + len(text))

    def clear(self) -> None:
        self.draws = []

    def present(self) -> None:
        self.frames += 1
        self.presented = list(self.draws)

    def size(self) -> TerminalSize:
        return TerminalSize(self.rows, self.cols)

    def read_key(self) -> KeyEvent:
        if not self.keys:
            raise EOFError
        return self.keys.pop(0)

    def row_text(self, row: int) -> str:
        """Text of one screen row as presented, assembled left to right."""
        parts = sorted((col, text) for r, col, text, _ in self.presented if r == row)
        return "".join(text for _, text in parts)

    def style_at(self, row: int, col: int) -> Optional[Style]:
        """Style of the draw call that starts exactly at (row, col)."""
        for r, c, _, style in self.presented:
            if (r, c) == (row, col):
                return style
        return None


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    """State file with two todo items and one done item."""
    path = tmp_path / "todo.txt"
    path.write_text("TODO: a\nTODO: b\nDONE: c\n", encoding="utf-8")
    return path
