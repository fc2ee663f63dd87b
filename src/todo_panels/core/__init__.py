"""Core data structures - task lists and application state."""

from todo_panels.core.task_list import TaskList
from todo_panels.core.state import AppState, Focus

__all__ = ["TaskList", "AppState", "Focus"]
