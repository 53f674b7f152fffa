"""Serialize a (styled) node tree back into markup."""

from __future__ import annotations

import json
import re

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.model.node import Element, Node, Text
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = ["MarkupSerializer", "serialize_markup", "style_to_string"]

_UPPER_RE = re.compile(r"([A-Z])")

_RESERVED_ATTRS = frozenset({"style", "class", "id"})


def _kebab(key: str) -> str:
    return _UPPER_RE.sub(r"-\1", key).lower()


def _quote(value: str) -> str:
    return str(value).replace('"', "&quot;")


def style_to_string(style: dict[str, str]) -> str:
    """Format a style mapping as ``key: value;`` pairs in mapping order."""
    return " ".join(f"{_kebab(k)}: {v};" for k, v in style.items())


class MarkupSerializer:
    """Walks a node tree and emits markup with inline styles."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def serialize(self, nodes: list[Node]) -> str:
        output = "".join(self._node(n) for n in nodes)
        if self._settings.verbose:
            log_syslog_message(
                self._settings,
                SyslogSeverity.DEBUG,
                "MarkupSerializer.serialize",
                "70000",
                json.dumps(output),
            )
        return output

    def _node(self, node: Node) -> str:
        if isinstance(node, Text):
            return node.content
        return self._element(node)

    def _element(self, node: Element) -> str:
        props = node.props
        # Inline declarations win key-for-key over computed ones.
        combined = {**props.style, **props.inline_style}

        attributes: list[str] = []
        style = style_to_string(combined)
        if style:
            attributes.append(f'style="{_quote(style)}"')
        if props.classes:
            attributes.append(f'class="{_quote(" ".join(props.classes))}"')
        if props.id:
            attributes.append(f'id="{_quote(props.id)}"')
        for key, value in props.attrs.items():
            if key in _RESERVED_ATTRS or value in (None, ""):
                continue
            attributes.append(f'{key}="{_quote(value)}"')

        opening = f"<{node.tag} {' '.join(attributes)}>" if attributes else f"<{node.tag}>"
        inner = "".join(self._node(child) for child in node.children)
        return f"{opening}{inner}</{node.tag}>"


def serialize_markup(nodes: list[Node], settings: Settings = DEFAULT_SETTINGS) -> str:
    """Serialize *nodes* into a markup string."""
    return MarkupSerializer(settings).serialize(nodes)
