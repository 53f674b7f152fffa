"""Rule set model: stylesheet declarations grouped by selector category."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ROOT_FUNCTION = ":root"


@dataclass
class StyleBlock:
    """Declarations filed under one class or id selector."""

    styles: dict[str, str] = field(default_factory=dict)


@dataclass
class ElementRule:
    """Declarations for a tag, plus per-child-tag overrides.

    ``children`` maps a child tag to the styles it receives when nested
    directly under this tag.  The stylesheet parser never fills it; the
    cascade still consults it.
    """

    styles: dict[str, str] = field(default_factory=dict)
    children: dict[str, StyleBlock] = field(default_factory=dict)


@dataclass
class FunctionEntry:
    """One declaration block of a function selector such as ``:root``."""

    target: str | None = None
    args: list[str] = field(default_factory=list)
    styles: dict[str, str] = field(default_factory=dict)


@dataclass
class RuleSet:
    """A stylesheet split into its selector categories."""

    universal: dict[str, str] = field(default_factory=dict)
    elements: dict[str, ElementRule] = field(default_factory=dict)
    classes: dict[str, StyleBlock] = field(default_factory=dict)
    ids: dict[str, StyleBlock] = field(default_factory=dict)
    functions: dict[str, list[FunctionEntry]] = field(default_factory=dict)

    def variables(self) -> dict[str, str]:
        """Collect style variables declared under ``:root``, later blocks winning."""
        table: dict[str, str] = {}
        for entry in self.functions.get(ROOT_FUNCTION, []):
            table.update(entry.styles)
        return table

    def to_dict(self) -> dict[str, Any]:
        return {
            "universal": dict(self.universal),
            "elements": {
                tag: {
                    "styles": dict(rule.styles),
                    "children": {k: {"styles": dict(v.styles)} for k, v in rule.children.items()},
                }
                for tag, rule in self.elements.items()
            },
            "classes": {k: {"styles": dict(v.styles)} for k, v in self.classes.items()},
            "ids": {k: {"styles": dict(v.styles)} for k, v in self.ids.items()},
            "functions": {
                name: [
                    {"target": e.target, "args": list(e.args), "styles": dict(e.styles)}
                    for e in entries
                ]
                for name, entries in self.functions.items()
            },
        }
