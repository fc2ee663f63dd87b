"""Application state: the todo and done lists and which one has focus."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from todo_panels.core.task_list import TaskList


class Focus(Enum):
    """Which panel receives navigation and mutation commands."""
    TODO = "todo"
    DONE = "done"

    def toggle(self) -> Focus:
        return Focus.DONE if self is Focus.TODO else Focus.TODO


@dataclass
class AppState:
    """Both task lists plus the focus flag."""
    todo: TaskList = field(default_factory=TaskList)
    done: TaskList = field(default_factory=TaskList)
    focus: Focus = Focus.TODO

    @classmethod
    def from_titles(cls, todo: list[str], done: list[str]) -> AppState:
        return cls(todo=TaskList(list(todo)), done=TaskList(list(done)))

    @property
    def focused(self) -> TaskList:
        """The list under focus."""
        return self.todo if self.focus is Focus.TODO else self.done

    @property
    def unfocused(self) -> TaskList:
        """The list without focus (destination of transfers)."""
        return self.done if self.focus is Focus.TODO else self.todo

    def toggle_focus(self) -> None:
        self.focus = self.focus.toggle()

    def transfer(self) -> None:
        """Move the focused list's selected item to the other list."""
        self.focused.transfer_to(self.unfocused)

    def delete(self) -> None:
        """Delete the focused list's selected item and re-clamp its cursor."""
        self.focused.delete_at_cursor()
        self.focused.clamp_cursor()
