"""Reusable TUI widgets."""

from todo_panels.cli.widgets.status_bar import StatusBarWidget, Shortcut

__all__ = [
    "StatusBarWidget",
    "Shortcut",
]
