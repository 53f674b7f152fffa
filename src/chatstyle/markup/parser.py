"""Regex tokenizer and stack-based tree builder for chat markup.

Markup is split into two kinds of atoms: tags (``<tag ...>`` / ``</tag>``)
and the text runs between them.  Atoms are trimmed and empty ones dropped.
A stack seeded with a synthetic root tracks the open elements; closing tags
pop the stack without comparing tag names, so only a net imbalance is
reported.  Void elements such as ``<br>`` need an explicit closer.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import MarkupError
from chatstyle.model.diagnostic import Diagnostic, Severity
from chatstyle.model.node import Element, Node, Props, Text, tree_to_dicts
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = ["MarkupParser", "ParsedMarkup", "parse_inline_style", "parse_markup", "tokenize"]

_ATOM_RE = re.compile(r"</?\w+[^>]*>|[^<>]+")
_OPEN_TAG_RE = re.compile(r"^<(\w+)([^>]*)>$")
_CLOSE_TAG_RE = re.compile(r"^</(\w+)\s*>$")
_ATTR_RE = re.compile(r"""([\w-]+)\s*=\s*["']([^"']+)["']""")

_TAG = "MarkupParser.parse"


@dataclass(frozen=True)
class ParsedMarkup:
    """Top-level nodes plus any problems found while building them."""

    nodes: list[Node]
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def well_formed(self) -> bool:
        return not any(d.is_error for d in self.diagnostics)

    def raise_for_errors(self) -> None:
        """Raise MarkupError if any error diagnostic was recorded."""
        errors = [str(d) for d in self.diagnostics if d.is_error]
        if errors:
            raise MarkupError("; ".join(errors))


def tokenize(markup: str) -> list[str]:
    """Split *markup* into trimmed, non-empty tag and text atoms."""
    atoms = (m.group(0).strip() for m in _ATOM_RE.finditer(markup))
    return [a for a in atoms if a]


def parse_inline_style(value: str) -> dict[str, str]:
    """Split a ``style`` attribute into declarations, dropping empty halves."""
    style: dict[str, str] = {}
    for declaration in value.split(";"):
        key, _, val = declaration.partition(":")
        key, val = key.strip(), val.strip()
        if key and val:
            style[key] = val
    return style


def _parse_props(attributes: str) -> Props:
    props = Props()
    for match in _ATTR_RE.finditer(attributes):
        key, value = match.group(1), match.group(2)
        if key == "style":
            props.inline_style = parse_inline_style(value)
        elif key == "class":
            props.classes = value.split()
        elif key == "id":
            props.id = value
        else:
            props.attrs[key] = value
    return props


class MarkupParser:
    """Builds an ordered node tree from a markup string."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def parse(self, markup: str) -> list[Node]:
        """Parse *markup* and return its top-level nodes."""
        return self.parse_document(markup).nodes

    def parse_document(self, markup: str) -> ParsedMarkup:
        """Parse *markup*, returning the nodes together with diagnostics.

        Malformed input never raises: the partial tree built so far is
        returned and each problem is logged and reported as a diagnostic.
        """
        if not isinstance(markup, str):
            self._debug("Invalid Argument: 'markup' is not a string, returning no nodes.")
            return ParsedMarkup(
                nodes=[],
                diagnostics=[
                    Diagnostic("invalid_argument", Severity.WARNING, "markup is not a string")
                ],
            )

        diagnostics: list[Diagnostic] = []
        root = Element(tag="#root")
        stack: list[Element] = [root]

        for atom in tokenize(markup):
            opening = _OPEN_TAG_RE.match(atom)
            if opening:
                tag, attributes = opening.groups()
                node = Element(tag=tag, props=_parse_props(attributes))
                stack[-1].append(node)
                stack.append(node)
            elif _CLOSE_TAG_RE.match(atom):
                if len(stack) == 1:
                    diagnostics.append(
                        Diagnostic("unmatched_close", Severity.ERROR, f"Closing tag {atom} has no open element.")
                    )
                    continue
                stack.pop()
            else:
                stack[-1].append(Text(content=atom))

        if len(stack) != 1:
            unclosed = ", ".join(f"<{e.tag}>" for e in stack[1:])
            diagnostics.append(
                Diagnostic("unclosed_tags", Severity.ERROR, f"Unclosed HTML tags detected during parsing: {unclosed}")
            )

        if _ATOM_RE.sub("", markup).strip():
            diagnostics.append(
                Diagnostic("stray_brackets", Severity.WARNING, "Stray '<' or '>' characters were dropped.")
            )

        for diagnostic in diagnostics:
            log_syslog_message(
                self._settings,
                SyslogSeverity.ERROR if diagnostic.is_error else SyslogSeverity.WARN,
                _TAG,
                "50000",
                diagnostic.message,
            )

        if self._settings.verbose:
            self._debug(json.dumps(tree_to_dicts(root.children)))

        return ParsedMarkup(nodes=root.children, diagnostics=diagnostics)

    def _debug(self, message: str) -> None:
        if self._settings.verbose:
            log_syslog_message(self._settings, SyslogSeverity.DEBUG, _TAG, "70000", message)


def parse_markup(markup: str, settings: Settings = DEFAULT_SETTINGS) -> list[Node]:
    """Parse *markup* into a list of top-level nodes."""
    return MarkupParser(settings).parse(markup)
