"""Keyboard input handling with event abstraction."""

from __future__ import annotations

import os
import select
import sys
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw escape sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


class InputReader:
    """
    Keyboard reader for a terminal in raw mode.

    Uses os.read() to bypass Python's I/O buffering and properly
    handle escape sequences that may arrive split across reads.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
    }

    def __init__(self, fd: Optional[int] = None) -> None:
        self._buffer = ""
        self._fd = sys.stdin.fileno() if fd is None else fd

    def feed(self, data: str) -> None:
        """Queue input as if it had been read from the terminal."""
        self._buffer += data

    @property
    def pending(self) -> bool:
        """Whether buffered input is waiting to be decoded."""
        return bool(self._buffer)

    def read(self, timeout: Optional[float] = 0.1) -> Optional[KeyEvent]:
        """
        Read a single key event.

        Returns None if no input arrived within timeout, or if the input
        was a control character with no meaning. A timeout of None
        waits indefinitely. Raises EOFError once the input is closed or
        the terminal fails (hangup, bad descriptor).
        """
        if self._buffer:
            return self._process_buffer()

        if not self._has_input(timeout):
            return None

        self._read_available()

        if self._buffer:
            return self._process_buffer()

        return None

    def read_blocking(self) -> KeyEvent:
        """Read a key event, blocking until one is available."""
        while True:
            event = self.read(timeout=None)
            if event is not None:
                return event

    def _read_available(self) -> None:
        """Read all currently available input into buffer using os.read."""
        data = self._read_chunk()
        if data is None:
            return
        if not data:
            raise EOFError("terminal input closed")
        self._buffer += data.decode('utf-8', errors='replace')

        # A lone escape may be the start of a sequence still in flight
        if self._buffer == '\x1b':
            self._wait_for_escape_sequence()

    def _read_chunk(self) -> Optional[bytes]:
        """One os.read(); None if nothing was ready. A failing terminal counts as closed."""
        try:
            return os.read(self._fd, 1024)
        except BlockingIOError:
            return None
        except OSError as e:
            raise EOFError(f"terminal input failed: {e}") from e

    def _wait_for_escape_sequence(self) -> None:
        """Wait up to 100ms for the rest of an escape sequence."""
        deadline = time.monotonic() + 0.1

        while time.monotonic() < deadline:
            wait_time = min(deadline - time.monotonic(), 0.025)
            if wait_time <= 0:
                break

            if self._has_input(wait_time):
                data = self._read_chunk()
                if not data:
                    return
                self._buffer += data.decode('utf-8', errors='replace')

                rest = self._buffer[1:]
                if rest and (rest[-1].isalpha() or rest[-1] == '~' or rest in self.SEQUENCES):
                    return

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        if not self._buffer:
            return None

        head = self._buffer[0]

        if head in self.SIMPLE_KEYS:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=self.SIMPLE_KEYS[head], raw=head)

        if head == '\x1b':
            return self._parse_escape_sequence()

        if head.isprintable():
            self._buffer = self._buffer[1:]
            return KeyEvent(char=head, raw=head)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]

        end_idx = 0
        if rest.startswith('O') and len(rest) >= 2:
            # SS3: exactly one final character after the O
            end_idx = 2
        else:
            for i, ch in enumerate(rest):
                if ch == '\x1b':
                    end_idx = i
                    break
                if ch.isalpha() or ch == '~':
                    end_idx = i + 1
                    break
                end_idx = i + 1

        if end_idx == 0:
            self._buffer = self._buffer[1:]
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        seq = rest[:end_idx]
        self._buffer = self._buffer[1 + end_idx:]
        return KeyEvent(key=self.SEQUENCES.get(seq), raw='\x1b' + seq)

    def _has_input(self, timeout: Optional[float]) -> bool:
        """Check if input is available within timeout. An unusable fd counts as closed input."""
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except (ValueError, OSError) as e:
            raise EOFError(f"terminal input unavailable: {e}") from e
        return bool(ready)
