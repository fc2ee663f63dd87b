"""
todo-panels: a TODO and a DONE list side by side in the terminal

Quick Start:
    $ todo-panels ~/todo.txt

    >>> import todo_panels
    >>> state = todo_panels.load_state("todo.txt")
    >>> state.todo.transfer_to(state.done)
    >>> todo_panels.save_state(state, "todo.txt")

The state file holds one item per line, "TODO: <title>" or
"DONE: <title>", todo items first.
"""

import logging

__version__ = "0.1.0"

# Core types
from todo_panels.core.task_list import TaskList
from todo_panels.core.state import AppState, Focus

# I/O
from todo_panels.io.reader import load_state, StateFileError
from todo_panels.io.writer import save_state

logging.getLogger("todo_panels").addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "TaskList",
    "AppState",
    "Focus",
    # I/O
    "load_state",
    "save_state",
    "StateFileError",
]
