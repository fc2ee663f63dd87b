"""Immediate-mode widgets drawn through a DrawingBackend."""

from __future__ import annotations

from typing import Optional

from todo_panels.cli.core.layout import LayoutEngine, Orientation, Vec2
from todo_panels.cli.core.terminal import DrawingBackend, Style


class UiError(RuntimeError):
    """Widget calls made in the wrong context (a bug in the caller)."""


def fit(text: str, width: int) -> str:
    """Pad or cut text to exactly width columns."""
    if width <= 0:
        return ""
    if len(text) > width:
        return text[:width - 1] + "…"
    return text.ljust(width)


class Ui:
    """
    Draws labels and lists at positions computed by a LayoutEngine.

    A list context tracks which element is highlighted; elements may
    only be emitted inside one, and lists do not nest.
    """

    def __init__(self, backend: DrawingBackend) -> None:
        self.backend = backend
        self.layout = LayoutEngine()
        self._list_cursor: Optional[int] = None
        self._in_list = False

    def begin(self, origin: Vec2, orientation: Orientation = Orientation.VERTICAL) -> None:
        self.layout.begin(origin, orientation)

    def end(self) -> Vec2:
        return self.layout.end()

    def begin_layout(self, orientation: Orientation) -> None:
        self.layout.begin_child(orientation)

    def end_layout(self) -> Vec2:
        return self.layout.end_child()

    def label(self, text: str, style: Style = Style.REGULAR, width: Optional[int] = None) -> Vec2:
        """Draw one line of text; returns where it was drawn."""
        if width is not None:
            text = fit(text, width)
        pos = self.layout.place_widget(Vec2(len(text), 1))
        self.backend.move_to(pos.y, pos.x)
        self.backend.draw_text(text, style)
        return pos

    def begin_list(self, cursor: Optional[int]) -> None:
        """Open a list whose element at cursor is highlighted (None: none is)."""
        if self._in_list:
            raise UiError("Nested lists are not allowed")
        self._in_list = True
        self._list_cursor = cursor

    def list_element(self, text: str, index: int, width: Optional[int] = None) -> Vec2:
        if not self._in_list:
            raise UiError("List elements can only be drawn inside a list")
        style = Style.HIGHLIGHTED if index == self._list_cursor else Style.REGULAR
        return self.label(text, style, width)

    def end_list(self) -> None:
        if not self._in_list:
            raise UiError("end_list() called without an open list")
        self._in_list = False
        self._list_cursor = None
