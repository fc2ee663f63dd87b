"""Core TUI infrastructure - terminal I/O, input handling, layout."""

from todo_panels.cli.core.terminal import DrawingBackend, Style, Terminal, TerminalSize
from todo_panels.cli.core.input import InputReader, KeyEvent, Key
from todo_panels.cli.core.layout import (
    Frame,
    LayoutEngine,
    LayoutError,
    Orientation,
    Vec2,
)
from todo_panels.cli.core.ui import Ui, UiError

__all__ = [
    "DrawingBackend",
    "Style",
    "Terminal",
    "TerminalSize",
    "InputReader",
    "KeyEvent",
    "Key",
    "Frame",
    "LayoutEngine",
    "LayoutError",
    "Orientation",
    "Vec2",
    "Ui",
    "UiError",
]
