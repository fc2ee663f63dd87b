"""Load task state files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from todo_panels.core.state import AppState

logger = logging.getLogger("todo_panels.io")

TODO_PREFIX = "TODO: "
DONE_PREFIX = "DONE: "


class StateFileError(ValueError):
    """A state file line that cannot be loaded: no known prefix, or not UTF-8."""

    def __init__(self, path: Path, line_number: int, line: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        reason = reason or f"expected {TODO_PREFIX!r} or {DONE_PREFIX!r} prefix"
        super().__init__(f"{path}:{line_number}: {reason}, got {line!r}")


def parse_state(text: str, path: str | Path = "<string>") -> AppState:
    """
    Parse state file contents.

    Each line is "TODO: <title>" or "DONE: <title>". Anything else,
    including a blank line, raises StateFileError naming the 1-based
    line number; no partial state is returned. If every line ends in
    "\\r" the file is CRLF and that "\\r" is dropped; otherwise titles
    are kept verbatim.
    """
    path = Path(path)
    todo: list[str] = []
    done: list[str] = []

    lines = text.split('\n')
    if lines[-1] == "":
        lines.pop()  # after the final newline

    if lines and all(line.endswith('\r') for line in lines):
        lines = [line[:-1] for line in lines]

    for number, line in enumerate(lines, start=1):
        if line.startswith(TODO_PREFIX):
            todo.append(line[len(TODO_PREFIX):])
        elif line.startswith(DONE_PREFIX):
            done.append(line[len(DONE_PREFIX):])
        else:
            raise StateFileError(path, number, line)

    return AppState.from_titles(todo, done)


def _decode(data: bytes, path: Path) -> str:
    """Decode file bytes as UTF-8, reporting the offending line as a StateFileError."""
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        start = data.rfind(b'\n', 0, e.start) + 1
        end = data.find(b'\n', e.start)
        line = data[start:end if end != -1 else len(data)].rstrip(b'\r')
        raise StateFileError(
            Path(path),
            data.count(b'\n', 0, e.start) + 1,
            line.decode('utf-8', errors='replace'),
            f"not valid UTF-8 ({e.reason})",
        ) from e


def load_state(path: str | Path) -> AppState:
    """
    Load application state from disk.

    A missing file yields empty lists; it is created on the next save.
    Other OS errors propagate.
    """
    path = Path(path)

    try:
        with open(path, 'rb') as f:
            data = f.read()
    except FileNotFoundError:
        logger.info("%s does not exist yet, starting with empty lists", path)
        return AppState()

    state = parse_state(_decode(data, path), path)
    logger.info("Loaded %d todo and %d done items from %s", len(state.todo), len(state.done), path)
    return state
