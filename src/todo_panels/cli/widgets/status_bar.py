"""Status bar widget for displaying info and shortcuts."""

from __future__ import annotations

from dataclasses import dataclass

from todo_panels.cli.core.layout import Orientation, Vec2
from todo_panels.cli.core.terminal import Style
from todo_panels.cli.core.ui import Ui, fit


@dataclass
class Shortcut:
    """A keyboard shortcut to display."""
    key: str
    label: str


class StatusBarWidget:
    """Bottom status bar: info text on the left, shortcut hints on the right."""

    def __init__(self) -> None:
        self._left_text: str = ""
        self._center_text: str = ""
        self._shortcuts: list[Shortcut] = []

    def set_left(self, text: str) -> None:
        """Set left-aligned text."""
        self._left_text = text

    def set_center(self, text: str) -> None:
        """Set center text (e.g., item counts)."""
        self._center_text = text

    def set_shortcuts(self, shortcuts: list[Shortcut]) -> None:
        """Set keyboard shortcuts to display."""
        self._shortcuts = shortcuts

    def segments(self, width: int) -> list[tuple[str, Style]]:
        """Split the bar into styled runs that together span exactly width columns."""
        # Build shortcuts from right, only include what fits
        shortcut_parts: list[tuple[str, Style]] = []
        shortcuts_len = 0

        for sc in reversed(self._shortcuts):
            key_part = f" {sc.key} "
            label_part = f"{sc.label} "
            part_len = len(key_part) + len(label_part)

            # Reserve space for left text + some padding
            if shortcuts_len + part_len + 20 < width:
                shortcut_parts[0:0] = [(key_part, Style.HIGHLIGHTED), (label_part, Style.REGULAR)]
                shortcuts_len += part_len
            else:
                break

        left_center = f" {self._left_text}"
        if self._center_text:
            left_center += f"  {self._center_text}"

        left_center = fit(left_center, max(0, width - shortcuts_len))
        if not left_center:
            return shortcut_parts
        return [(left_center, Style.REGULAR)] + shortcut_parts

    def draw(self, ui: Ui, row: int, width: int) -> None:
        """Draw the bar as a row of labels starting at (row, 0)."""
        ui.begin(Vec2(0, row), Orientation.HORIZONTAL)
        for text, style in self.segments(width):
            ui.label(text, style)
        ui.end()
