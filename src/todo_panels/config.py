"""Terminal appearance configuration.

Colour pairs and cursor visibility are passed explicitly to the Terminal
constructor instead of being registered as global terminal state. Values
can be overridden from a YAML file:

    cursor_visible: false
    colors:
      regular: {fg: 37, bg: 40, bold: false}
      highlighted: {fg: 30, bg: 47}
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

import yaml

USER_CONFIG_PATH = Path.home() / ".config" / "todo-panels" / "config.yaml"


class ConfigError(ValueError):
    """Invalid configuration file contents."""


@dataclass(frozen=True)
class Attr:
    """SGR foreground/background codes for one visual attribute."""
    fg: int = 37
    bg: int = 40
    bold: bool = False

    def to_sgr(self) -> str:
        parts = ['1' if self.bold else '22', str(self.fg), str(self.bg)]
        return f"\x1b[{';'.join(parts)}m"


@dataclass(frozen=True)
class ColorScheme:
    """Attributes for regular and highlighted text."""
    regular: Attr = field(default_factory=lambda: Attr(fg=37, bg=40))
    highlighted: Attr = field(default_factory=lambda: Attr(fg=30, bg=47))


@dataclass(frozen=True)
class TerminalConfig:
    """Everything the drawing backend needs at construction time."""
    color_scheme: ColorScheme = field(default_factory=ColorScheme)
    cursor_visible: bool = False


def _parse_attr(name: str, raw: Any, default: Attr) -> Attr:
    if not isinstance(raw, dict):
        raise ConfigError(f"colors.{name} must be a mapping, got {raw!r}")

    unknown = set(raw) - {"fg", "bg", "bold"}
    if unknown:
        raise ConfigError(f"Unknown keys in colors.{name}: {', '.join(sorted(unknown))}")

    for key in ("fg", "bg"):
        if key in raw and (not isinstance(raw[key], int) or isinstance(raw[key], bool)):
            raise ConfigError(f"colors.{name}.{key} must be an SGR color code, got {raw[key]!r}")
    if "bold" in raw and not isinstance(raw["bold"], bool):
        raise ConfigError(f"colors.{name}.bold must be true or false, got {raw['bold']!r}")

    return replace(default, **raw)


def parse_config(data: Any) -> TerminalConfig:
    """Build a TerminalConfig from already-parsed YAML data."""
    if data is None:
        return TerminalConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    unknown = set(data) - {"cursor_visible", "colors"}
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    config = TerminalConfig()

    if "cursor_visible" in data:
        if not isinstance(data["cursor_visible"], bool):
            raise ConfigError(f"cursor_visible must be true or false, got {data['cursor_visible']!r}")
        config = replace(config, cursor_visible=data["cursor_visible"])

    colors = data.get("colors") or {}
    if not isinstance(colors, dict):
        raise ConfigError(f"colors must be a mapping, got {colors!r}")
    unknown = set(colors) - {"regular", "highlighted"}
    if unknown:
        raise ConfigError(f"Unknown keys in colors: {', '.join(sorted(unknown))}")

    scheme = config.color_scheme
    if "regular" in colors:
        scheme = replace(scheme, regular=_parse_attr("regular", colors["regular"], scheme.regular))
    if "highlighted" in colors:
        scheme = replace(scheme, highlighted=_parse_attr("highlighted", colors["highlighted"], scheme.highlighted))

    return replace(config, color_scheme=scheme)


def load_config(path: Optional[Path] = None) -> TerminalConfig:
    """
    Load configuration from a YAML file.

    With no path, the user config file is read if it exists; otherwise
    defaults are returned. An explicit path that does not exist is an error.
    """
    if path is None:
        if not USER_CONFIG_PATH.exists():
            return TerminalConfig()
        path = USER_CONFIG_PATH

    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e

    try:
        return parse_config(data)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e
