"""Save task state files."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from todo_panels.core.state import AppState
from todo_panels.io.reader import TODO_PREFIX, DONE_PREFIX

logger = logging.getLogger("todo_panels.io")


def format_state(state: AppState) -> str:
    """Render state as file contents: every todo line, then every done line."""
    lines = [f"{TODO_PREFIX}{title}\n" for title in state.todo.items]
    lines.extend(f"{DONE_PREFIX}{title}\n" for title in state.done.items)
    return ''.join(lines)


def save_state(state: AppState, path: str | Path) -> None:
    """
    Write state to disk, replacing the file.

    The contents go to a temporary file next to path which is then
    renamed over it, so a failed write leaves the old file intact.
    """
    path = Path(path)
    tmp_path: Optional[Path] = None

    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding='utf-8',
            newline='',
            delete=False,
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(format_state(state))
            tmp.flush()
            os.fsync(tmp.fileno())
        if path.exists():
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()

    logger.info("Saved %d todo and %d done items to %s", len(state.todo), len(state.done), path)
