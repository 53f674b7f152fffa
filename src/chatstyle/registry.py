"""Named template and theme registries.

Templates are markup strings with placeholders.  Themes are generator
functions that take a palette mapping and return stylesheet text.  Both
registries fall back to their ``default`` entry for unknown names.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import RegistryError, TemplateNotFound, ThemeNotFound
from chatstyle.syslog import SyslogSeverity, log_syslog_message
from chatstyle.text import convert_to_single_line

__all__ = [
    "DEFAULT_TEMPLATES",
    "DEFAULT_THEMES",
    "TemplateRegistry",
    "ThemeGenerator",
    "ThemeRegistry",
    "build_table_rows",
]

ThemeGenerator = Callable[[Mapping[str, Any]], str]

T = TypeVar("T")

_CELL_STYLE = "padding: 8px; text-align: left;"

DEFAULT_TEMPLATES: dict[str, str] = {
    "default": (
        '<table border="1" style="border-collapse: collapse; width: 50%;">'
        "<thead><tr>"
        f'<th style="{_CELL_STYLE}">Key</th>'
        f'<th style="{_CELL_STYLE}">Value</th>'
        "</tr></thead>"
        "<tbody>{{tableRows}}</tbody>"
        "</table>"
    ),
    "chatAlert": (
        '<div class="alert-message">'
        "<h3>{{title}}</h3>"
        "<p>{{description}}</p>"
        '<div class="alert-command"><p>{{command}}</p></div>'
        "<p>{{remark}}</p>"
        "</div>"
    ),
}


def _default_theme(palette: Mapping[str, Any]) -> str:
    return ""


def _chat_alert_theme(palette: Mapping[str, Any]) -> str:
    bg_color = palette.get("bg_color", "#b8defd")
    title_color = palette.get("title_color", "#2516f5")
    return f"""
        :root {{
            --alert-bg: {bg_color};
            --alert-title-color: {title_color};
            --alert-command-bg: #ffffff;
            --alert-command-border: 1px solid #cccccc;
        }}
        h3 {{
            color: var(--alert-title-color);
            margin: 0;
            font-size: 1.2em;
        }}
        p {{
            margin: 0;
            overflow-wrap: break-word;
        }}
        .alert-message {{
            border: 1px solid black;
            background-color: var(--alert-bg);
            padding: 5px 10px;
            border-radius: 10px;
        }}
        .alert-command {{
            margin: 8px 0;
            padding: 5px;
            background-color: var(--alert-command-bg);
            border: var(--alert-command-border);
            border-radius: 5px;
            font-family: monospace;
        }}
    """


DEFAULT_THEMES: dict[str, ThemeGenerator] = {
    "default": _default_theme,
    "chatAlert": _chat_alert_theme,
}


def _escape_cell(value: Any) -> str:
    return str(value).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def build_table_rows(content: Mapping[str, Any]) -> str:
    """Render *content* as ``<tr>`` rows for the key/value table template."""
    return "".join(
        f'<tr><td style="{_CELL_STYLE}">{_escape_cell(k)}</td>'
        f'<td style="{_CELL_STYLE}">{_escape_cell(v)}</td></tr>'
        for k, v in content.items()
    )


class _Registry(ABC, Generic[T]):
    """Last-writer-wins name lookup with a ``default`` fallback."""

    kind = "entry"
    not_found: type[RegistryError] = RegistryError

    def __init__(self, defaults: Mapping[str, T], settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings
        self._defaults = dict(defaults)
        self._lock = threading.Lock()
        self._entries: dict[str, T] = {}
        self.init()

    @abstractmethod
    def _accepts(self, value: object) -> bool:
        """Return True if *value* may be stored in this registry."""

    def init(self) -> None:
        """Restore the built-in entries."""
        with self._lock:
            self._entries.update(self._defaults)

    def names(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._entries

    def lookup(self, name: str) -> T:
        """Return the entry for *name*, or the ``default`` entry.

        Raises:
            RegistryError: if neither *name* nor ``default`` is registered.
        """
        with self._lock:
            entry = self._entries.get(name)
            if entry is None:
                entry = self._entries.get("default")
        if entry is None:
            raise self.not_found(name)
        return entry

    def set(self, entries: Mapping[str, T]) -> None:
        """Replace every entry with *entries*."""
        with self._lock:
            self._entries = dict(entries)

    def add(self, entries: Mapping[str, T]) -> None:
        """Add or update entries; invalid ones are logged and skipped."""
        tag = f"{type(self).__name__}.add"
        if not isinstance(entries, Mapping):
            log_syslog_message(
                self._settings, SyslogSeverity.ERROR, tag, "40000", f"Invalid {self.kind} map provided."
            )
            return
        for name, value in entries.items():
            if not self._accepts(value):
                log_syslog_message(
                    self._settings,
                    SyslogSeverity.ERROR,
                    tag,
                    "40000",
                    f"Invalid {self.kind} '{name}' ignored.",
                )
                continue
            with self._lock:
                self._entries[name] = value

    def remove(self, name: str) -> None:
        with self._lock:
            self._entries.pop(name, None)


class TemplateRegistry(_Registry[str]):
    """Named markup templates."""

    kind = "template"
    not_found = TemplateNotFound

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        super().__init__(DEFAULT_TEMPLATES, settings)

    def _accepts(self, value: object) -> bool:
        return isinstance(value, str)

    def get(self, name: str = "default") -> str:
        return self.lookup(name)


class ThemeRegistry(_Registry[ThemeGenerator]):
    """Named theme generators producing stylesheet text."""

    kind = "theme"
    not_found = ThemeNotFound

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        super().__init__(DEFAULT_THEMES, settings)

    def _accepts(self, value: object) -> bool:
        return callable(value)

    def get(self, name: str = "default", palette: Mapping[str, Any] | None = None) -> str:
        """Run the theme generator for *name* and return single-line stylesheet text."""
        generator = self.lookup(name)
        return convert_to_single_line(generator(palette or {}), self._settings)
