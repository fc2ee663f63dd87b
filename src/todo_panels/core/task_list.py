"""TaskList - an ordered list of task titles with a cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TaskList:
    """
    Ordered task titles plus the index of the selected one.

    The cursor is only meaningful while the list is non-empty. Every
    operation checks it against the current length first, so an empty
    list (or a cursor left past the end by delete_at_cursor) turns
    operations into no-ops instead of errors.
    """
    items: list[str] = field(default_factory=list)
    cursor: int = 0

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current(self) -> Optional[str]:
        """Title under the cursor, or None if the cursor addresses nothing."""
        if 0 <= self.cursor < len(self.items):
            return self.items[self.cursor]
        return None

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_down(self) -> None:
        if self.cursor + 1 < len(self.items):
            self.cursor += 1

    def drag_up(self) -> None:
        """Swap the selected item with the one above, keeping it selected."""
        if 0 < self.cursor < len(self.items):
            i = self.cursor
            self.items[i - 1], self.items[i] = self.items[i], self.items[i - 1]
            self.cursor -= 1

    def drag_down(self) -> None:
        """Swap the selected item with the one below, keeping it selected."""
        if self.cursor + 1 < len(self.items):
            i = self.cursor
            self.items[i], self.items[i + 1] = self.items[i + 1], self.items[i]
            self.cursor += 1

    def transfer_to(self, other: TaskList) -> None:
        """
        Move the selected item to the end of another list.

        The destination cursor is untouched. The source cursor is clamped
        to the new last item when it ends up past the end.
        """
        if self.cursor < len(self.items):
            other.items.append(self.items.pop(self.cursor))
            self.clamp_cursor()

    def delete_at_cursor(self) -> None:
        """
        Remove the selected item.

        Unlike transfer_to, the cursor is left where it was: deleting the
        last item leaves it one past the end. Call clamp_cursor() before
        reading it again.
        """
        if self.cursor < len(self.items):
            del self.items[self.cursor]

    def clamp_cursor(self) -> None:
        """Pull a cursor that ran past the end back onto the last item."""
        if self.items and self.cursor >= len(self.items):
            self.cursor = len(self.items) - 1
