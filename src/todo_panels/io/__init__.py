"""File I/O for task state files."""

from todo_panels.io.reader import load_state, parse_state, StateFileError
from todo_panels.io.writer import save_state, format_state

__all__ = ["load_state", "parse_state", "StateFileError", "save_state", "format_state"]
