"""Immediate-mode layout engine.

Callers describe a frame as nested rows and columns of widgets; the
engine hands back the grid position of each widget as it is placed:

    engine.begin(Vec2(0, 0), Orientation.HORIZONTAL)
    engine.begin_child(Orientation.VERTICAL)
    engine.place_widget(Vec2(10, 1))   # -> Vec2(0, 0)
    engine.place_widget(Vec2(10, 1))   # -> Vec2(0, 1)
    engine.end_child()
    engine.begin_child(Orientation.VERTICAL)
    engine.place_widget(Vec2(10, 1))   # -> Vec2(10, 0)
    engine.end_child()
    engine.end()                       # -> Vec2(20, 2)

Nothing survives between frames. The whole description is rebuilt on
every render, so the only persistent state is whatever the caller keeps.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LayoutError(RuntimeError):
    """Unbalanced or out-of-context layout calls (a bug in the caller)."""


class Orientation(Enum):
    """Direction in which a frame stacks its children."""
    VERTICAL = "vertical"      # downward
    HORIZONTAL = "horizontal"  # rightward


@dataclass(frozen=True)
class Vec2:
    """Grid vector: x is the column (or width), y the row (or height)."""
    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)


@dataclass
class Frame:
    """One open layout region."""
    orientation: Orientation
    anchor: Vec2
    size: Vec2 = Vec2()

    def available_pos(self) -> Vec2:
        """Where the next widget or child frame starts."""
        if self.orientation is Orientation.VERTICAL:
            return self.anchor + Vec2(0, self.size.y)
        return self.anchor + Vec2(self.size.x, 0)

    def add_widget(self, size: Vec2) -> None:
        """Grow to the bounding box of the current contents plus size."""
        if self.orientation is Orientation.VERTICAL:
            self.size = Vec2(max(self.size.x, size.x), self.size.y + size.y)
        else:
            self.size = Vec2(self.size.x + size.x, max(self.size.y, size.y))


class LayoutEngine:
    """Stack of open frames. Only the top frame accepts widgets."""

    def __init__(self) -> None:
        self._frames: list[Frame] = []

    @property
    def depth(self) -> int:
        return len(self._frames)

    def begin(self, origin: Vec2, orientation: Orientation) -> None:
        """Open the root frame at origin."""
        if self._frames:
            raise LayoutError("begin() called while a layout is already open")
        self._frames.append(Frame(orientation, origin))

    def begin_child(self, orientation: Orientation) -> None:
        """Open a frame at the top frame's next available position."""
        if not self._frames:
            raise LayoutError("begin_child() called outside of a layout")
        anchor = self._frames[-1].available_pos()
        self._frames.append(Frame(orientation, anchor))

    def end_child(self) -> Vec2:
        """Close the top frame and fold its size into its parent."""
        if len(self._frames) < 2:
            raise LayoutError("end_child() called without an open child frame")
        child = self._frames.pop()
        self._frames[-1].add_widget(child.size)
        return child.size

    def place_widget(self, size: Vec2) -> Vec2:
        """Reserve room for a widget in the top frame and return its position."""
        if not self._frames:
            raise LayoutError("place_widget() called outside of a layout")
        frame = self._frames[-1]
        pos = frame.available_pos()
        frame.add_widget(size)
        return pos

    def end(self) -> Vec2:
        """Close the root frame and return its final size."""
        if len(self._frames) != 1:
            raise LayoutError(
                f"end() expects exactly the root frame to be open, found {len(self._frames)} frames"
            )
        return self._frames.pop().size
