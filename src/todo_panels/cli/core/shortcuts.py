"""Centralized keyboard shortcut registry.

Single source of truth for the session's key commands. The same
definitions drive dispatch, the status bar hints and the help overlay.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from todo_panels.cli.core.input import Key, KeyEvent


class ShortcutContext(Enum):
    """Context in which a shortcut is active."""
    GLOBAL = auto()   # Always available
    PANELS = auto()   # Browsing the todo/done panels
    HELP = auto()     # Help overlay is showing


@dataclass
class ShortcutDef:
    """Definition of a keyboard shortcut.

    Attributes:
        id: Unique identifier for the shortcut
        keys: Keys/chars that trigger this shortcut (chars are case-sensitive)
        label: Short label for status bar; empty keeps it out of the bar
        description: Longer description for the help overlay
        context: Context(s) where this shortcut is active
        handler: Name of the Session method to call
        category: Category for grouping in the help overlay
    """
    id: str
    keys: list[str | Key]
    label: str
    description: str
    context: list[ShortcutContext] = field(default_factory=lambda: [ShortcutContext.GLOBAL])
    handler: str = ""
    category: str = "General"

    def matches(self, event: KeyEvent) -> bool:
        """Check if a key event matches this shortcut."""
        for key in self.keys:
            if isinstance(key, Key):
                if event.key == key:
                    return True
            elif event.char == key:
                return True
        return False

    @property
    def key_display(self) -> str:
        """Get display string for the keys."""
        return "/".join(_key_to_display(k) if isinstance(k, Key) else k for k in self.keys)


def _key_to_display(key: Key) -> str:
    display_map = {
        Key.UP: "↑",
        Key.DOWN: "↓",
        Key.ENTER: "Enter",
        Key.ESCAPE: "Esc",
        Key.TAB: "Tab",
    }
    return display_map.get(key, key.name)


class ShortcutRegistry:
    """Central registry for all keyboard shortcuts.

    Example:
        registry = create_default_shortcuts()
        shortcut = registry.match(event, ShortcutContext.PANELS)
        if shortcut:
            getattr(session, shortcut.handler)()
    """

    def __init__(self) -> None:
        self._shortcuts: dict[str, ShortcutDef] = {}
        self._by_context: dict[ShortcutContext, list[ShortcutDef]] = {
            ctx: [] for ctx in ShortcutContext
        }

    def register(self, shortcut: ShortcutDef) -> None:
        self._shortcuts[shortcut.id] = shortcut
        for ctx in shortcut.context:
            self._by_context[ctx].append(shortcut)

    def register_many(self, shortcuts: list[ShortcutDef]) -> None:
        for shortcut in shortcuts:
            self.register(shortcut)

    def get(self, shortcut_id: str) -> Optional[ShortcutDef]:
        return self._shortcuts.get(shortcut_id)

    def all_shortcuts(self) -> list[ShortcutDef]:
        return list(self._shortcuts.values())

    def match(self, event: KeyEvent, context: ShortcutContext) -> Optional[ShortcutDef]:
        """Find the shortcut for an event in context, falling back to GLOBAL."""
        for ctx in (context, ShortcutContext.GLOBAL):
            for shortcut in self._by_context[ctx]:
                if shortcut.matches(event):
                    return shortcut
        return None

    def get_for_context(self, context: ShortcutContext) -> list[ShortcutDef]:
        """Shortcuts for a context followed by the global ones."""
        result = list(self._by_context[context])
        if context != ShortcutContext.GLOBAL:
            result.extend(self._by_context[ShortcutContext.GLOBAL])
        return result

    def generate_help_text(self, context: ShortcutContext) -> list[str]:
        """Help overlay lines, grouped by category."""
        by_category: dict[str, list[ShortcutDef]] = {}
        for shortcut in self.get_for_context(context):
            by_category.setdefault(shortcut.category, []).append(shortcut)

        lines: list[str] = []
        for category, shortcuts in by_category.items():
            lines.append(f"  {category.upper()}")
            for shortcut in shortcuts:
                lines.append(f"    {shortcut.key_display:<14}{shortcut.description}")
            lines.append("")

        return lines[:-1] if lines else lines

    def get_status_bar_hints(self, context: ShortcutContext) -> list[tuple[str, str]]:
        """(key_display, label) pairs for shortcuts that have a label."""
        return [
            (shortcut.key_display, shortcut.label)
            for shortcut in self.get_for_context(context)
            if shortcut.label
        ]


def create_default_shortcuts() -> ShortcutRegistry:
    """Create the registry with every session command."""
    registry = ShortcutRegistry()

    registry.register_many([
        ShortcutDef(
            id="cursor_up",
            keys=["w", Key.UP],
            label="",
            description="Select the item above",
            context=[ShortcutContext.PANELS],
            handler="move_up",
            category="Navigation",
        ),
        ShortcutDef(
            id="cursor_down",
            keys=["s", Key.DOWN],
            label="",
            description="Select the item below",
            context=[ShortcutContext.PANELS],
            handler="move_down",
            category="Navigation",
        ),
        ShortcutDef(
            id="focus",
            keys=[Key.TAB],
            label="Switch",
            description="Switch between TODO and DONE",
            context=[ShortcutContext.PANELS],
            handler="toggle_focus",
            category="Navigation",
        ),
    ])

    registry.register_many([
        ShortcutDef(
            id="drag_up",
            keys=["W"],
            label="",
            description="Move the selected item up",
            context=[ShortcutContext.PANELS],
            handler="drag_up",
            category="Editing",
        ),
        ShortcutDef(
            id="drag_down",
            keys=["S"],
            label="",
            description="Move the selected item down",
            context=[ShortcutContext.PANELS],
            handler="drag_down",
            category="Editing",
        ),
        ShortcutDef(
            id="transfer",
            keys=[Key.ENTER],
            label="Done/Undo",
            description="Move the selected item to the other list",
            context=[ShortcutContext.PANELS],
            handler="transfer",
            category="Editing",
        ),
        ShortcutDef(
            id="delete",
            keys=["d"],
            label="Delete",
            description="Delete the selected item",
            context=[ShortcutContext.PANELS],
            handler="delete",
            category="Editing",
        ),
    ])

    registry.register_many([
        ShortcutDef(
            id="close_help",
            keys=[Key.ESCAPE],
            label="",
            description="Close help",
            context=[ShortcutContext.HELP],
            handler="toggle_help",
            category="General",
        ),
        ShortcutDef(
            id="help",
            keys=["?"],
            label="Help",
            description="Show/hide help",
            handler="toggle_help",
            category="General",
        ),
        ShortcutDef(
            id="quit",
            keys=["q"],
            label="Quit",
            description="Save and quit",
            handler="quit",
            category="General",
        ),
    ])

    return registry
