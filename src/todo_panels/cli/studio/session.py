"""Interactive todo/done session."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from todo_panels.config import TerminalConfig
from todo_panels.core.state import AppState, Focus
from todo_panels.core.task_list import TaskList
from todo_panels.io.writer import save_state
from todo_panels.cli.core.input import KeyEvent
from todo_panels.cli.core.layout import Orientation, Vec2
from todo_panels.cli.core.shortcuts import ShortcutContext, ShortcutRegistry, create_default_shortcuts
from todo_panels.cli.core.terminal import DrawingBackend, Style, Terminal
from todo_panels.cli.core.ui import Ui
from todo_panels.cli.widgets.status_bar import Shortcut, StatusBarWidget

logger = logging.getLogger("todo_panels.session")

STATUS_BAR_HEIGHT = 1
PANEL_HEADER_HEIGHT = 2  # title + rule

MARKS = {Focus.TODO: "[ ]", Focus.DONE: "[x]"}


class Session:
    """
    Two-panel todo list session.

    Layout:
        +--------------------+--------------------+
        | [TODO]             |  DONE              |
        | ------------------ | ------------------ |
        | - [ ] item         | - [x] item         |
        +--------------------+--------------------+
        | Status Bar (file, counts, shortcuts)    |
        +-----------------------------------------+

    Each loop iteration draws one full frame, then blocks for one key.
    Quitting (or losing the terminal input) saves the state to path.
    """

    def __init__(
        self,
        state: AppState,
        path: Path,
        backend: DrawingBackend,
        shortcuts: Optional[ShortcutRegistry] = None,
    ) -> None:
        self.running = False
        self.state = state
        self.path = Path(path)
        self.backend = backend
        self.ui = Ui(backend)
        self.status_bar = StatusBarWidget()
        self._shortcuts = shortcuts or create_default_shortcuts()
        self._show_help = False

    @property
    def context(self) -> ShortcutContext:
        return ShortcutContext.HELP if self._show_help else ShortcutContext.PANELS

    def run(self) -> None:
        """Main loop: render, read a key, dispatch; save on the way out."""
        self.running = True

        while self.running:
            self.render()
            try:
                event = self.backend.read_key()
            except EOFError:
                logger.warning("Input closed, leaving session")
                break
            self.handle_key(event)

        save_state(self.state, self.path)

    def handle_key(self, event: KeyEvent) -> bool:
        """Apply the command bound to event. Returns True if one was."""
        shortcut = self._shortcuts.match(event, self.context)
        if shortcut is None:
            logger.debug("Ignoring key %r", event.raw)
            return False

        logger.debug("%s (focus: %s)", shortcut.id, self.state.focus.value)
        getattr(self, shortcut.handler)()
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        self.state.focused.move_up()

    def move_down(self) -> None:
        self.state.focused.move_down()

    def drag_up(self) -> None:
        self.state.focused.drag_up()

    def drag_down(self) -> None:
        self.state.focused.drag_down()

    def transfer(self) -> None:
        self.state.transfer()

    def delete(self) -> None:
        self.state.delete()

    def toggle_focus(self) -> None:
        self.state.toggle_focus()

    def toggle_help(self) -> None:
        self._show_help = not self._show_help

    def quit(self) -> None:
        self.running = False

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> None:
        """Describe and draw one full frame."""
        size = self.backend.size()
        content_height = max(0, size.rows - STATUS_BAR_HEIGHT)

        self.backend.clear()
        if self._show_help:
            self._render_help(size.cols, content_height)
        else:
            self._render_panels(size.cols, content_height)

        self._update_status_bar()
        self.status_bar.draw(self.ui, size.rows - 1, size.cols)
        self.backend.present()

    def _render_panels(self, cols: int, height: int) -> None:
        panel_width = cols // 2
        self.ui.begin(Vec2(0, 0), Orientation.HORIZONTAL)
        self._render_panel(Focus.TODO, self.state.todo, panel_width, height)
        self._render_panel(Focus.DONE, self.state.done, panel_width, height)
        self.ui.end()

    def _render_panel(self, which: Focus, tasks: TaskList, width: int, height: int) -> None:
        focused = self.state.focus is which
        title = which.name

        self.ui.begin_layout(Orientation.VERTICAL)
        # No room for the header above the status bar
        if height >= PANEL_HEADER_HEIGHT:
            self.ui.label(f"[{title}]" if focused else f" {title} ", Style.REGULAR, width)
            self.ui.label("-" * max(0, width - 1), Style.REGULAR, width)

        self.ui.begin_list(tasks.cursor if focused else None)
        for index in visible_range(tasks, height - PANEL_HEADER_HEIGHT):
            self.ui.list_element(f"- {MARKS[which]} {tasks.items[index]}", index, width)
        self.ui.end_list()

        self.ui.end_layout()

    def _render_help(self, cols: int, height: int) -> None:
        lines = ["Keyboard shortcuts", ""]
        lines.extend(self._shortcuts.generate_help_text(ShortcutContext.PANELS))

        self.ui.begin(Vec2(0, 0), Orientation.VERTICAL)
        for line in lines[:height]:
            self.ui.label(line, Style.REGULAR, cols)
        self.ui.end()

    def _update_status_bar(self) -> None:
        self.status_bar.set_shortcuts([
            Shortcut(key, label) for key, label in self._shortcuts.get_status_bar_hints(self.context)
        ])
        self.status_bar.set_left(self.path.name)
        self.status_bar.set_center(f"{len(self.state.todo)} todo, {len(self.state.done)} done")


def visible_range(tasks: TaskList, height: int) -> range:
    """Indices of the items that fit in height rows, scrolled to keep the cursor on screen."""
    if height <= 0:
        return range(0)
    scroll = max(0, min(tasks.cursor, len(tasks) - 1) - height + 1)
    return range(scroll, min(len(tasks), scroll + height))


def run_session(path: Path, state: AppState, config: Optional[TerminalConfig] = None) -> None:
    """Launch the session on the real terminal."""
    terminal = Terminal(config)
    session = Session(state, path, terminal)
    with terminal.managed_mode():
        session.run()
