"""Low-level terminal operations - the drawing backend used by the session."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Protocol, TextIO, runtime_checkable

from todo_panels.config import TerminalConfig
from todo_panels.cli.core.input import InputReader, KeyEvent


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Style(Enum):
    """Visual attribute of drawn text."""
    REGULAR = "regular"
    HIGHLIGHTED = "highlighted"


@runtime_checkable
class DrawingBackend(Protocol):
    """What the UI layer needs from a character-grid display."""

    def move_to(self, row: int, col: int) -> None:
        """Move the draw position (0-indexed)."""
        ...

    def draw_text(self, text: str, style: Style) -> None:
        """Draw text at the draw position."""
        ...

    def clear(self) -> None:
        ...

    def present(self) -> None:
        """Make everything drawn since the last present visible."""
        ...

    def size(self) -> TerminalSize:
        ...

    def read_key(self) -> KeyEvent:
        """Block until a key is pressed."""
        ...


class Terminal:
    """
    ANSI terminal backend.

    Drawing calls are buffered and written in one go by present(), so a
    full redraw every frame does not flicker.
    """

    def __init__(
        self,
        config: Optional[TerminalConfig] = None,
        out: Optional[TextIO] = None,
        input_reader: Optional[InputReader] = None,
    ) -> None:
        self.config = config or TerminalConfig()
        self._out = out or sys.stdout
        self._input = input_reader
        self._buffer: list[str] = []
        self._sgr = {
            Style.REGULAR: self.config.color_scheme.regular.to_sgr(),
            Style.HIGHLIGHTED: self.config.color_scheme.highlighted.to_sgr(),
        }

    def size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size()
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self._buffer.append(self._sgr[Style.REGULAR] + '\x1b[2J\x1b[H')

    def move_to(self, row: int, col: int) -> None:
        self._buffer.append(f'\x1b[{row + 1};{col + 1}H')

    def draw_text(self, text: str, style: Style) -> None:
        self._buffer.append(f"{self._sgr[style]}{text}{self._sgr[Style.REGULAR]}")

    def present(self) -> None:
        self._out.write(''.join(self._buffer))
        self._out.flush()
        self._buffer.clear()

    def read_key(self) -> KeyEvent:
        if self._input is None:
            self._input = InputReader()
        return self._input.read_blocking()

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        import termios
        import tty
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            yield
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    @contextmanager
    def alternate_screen(self) -> Iterator[None]:
        """Use alternate screen buffer (preserves scrollback)."""
        self._write('\x1b[?1049h')
        try:
            yield
        finally:
            self._write('\x1b[?1049l')

    @contextmanager
    def managed_mode(self) -> Iterator[None]:
        """Full TUI mode: alternate screen, configured cursor, raw input."""
        with self.alternate_screen():
            if not self.config.cursor_visible:
                self._write('\x1b[?25l')
            try:
                with self.raw_mode():
                    yield
            finally:
                self._write('\x1b[?25h\x1b[0m')
