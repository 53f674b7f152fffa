"""Small text helpers for note and chat content."""

from __future__ import annotations

import re
from typing import Any

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = [
    "convert_to_single_line",
    "decode_note_content",
    "encode_note_content",
    "parse_data_from_content",
]

_QUOTED_OR_SPACE_RE = re.compile(r"(\"[^\"]*\"|'[^']*')|\s+")

# Order matters: '&' is decoded last and encoded first.
_DECODE_TABLE = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
    ("<br>", "\n"),
    ("&amp;", "&"),
)


def _not_a_string(settings: Settings, tag: str, name: str) -> None:
    if settings.verbose:
        log_syslog_message(
            settings,
            SyslogSeverity.DEBUG,
            tag,
            "70000",
            f"Invalid Argument: '{name}' is not a string, returning input.",
        )


def decode_note_content(text: Any, settings: Settings = DEFAULT_SETTINGS) -> Any:
    """Turn HTML-encoded note text back into plain text."""
    if not isinstance(text, str):
        _not_a_string(settings, "decode_note_content", "text")
        return text
    for entity, plain in _DECODE_TABLE:
        text = text.replace(entity, plain)
    return text


def encode_note_content(
    text: Any, settings: Settings = DEFAULT_SETTINGS, line_break: str = "<br>"
) -> Any:
    """Escape plain text for display: entities, non-breaking spaces, line breaks.

    Text that will go through the markup parser should pass a *line_break*
    other than ``<br>``, which the parser would treat as an unclosed element.
    """
    if not isinstance(text, str):
        _not_a_string(settings, "encode_note_content", "text")
        return text
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
        .replace(" ", "&nbsp;")
        .replace("\n", line_break)
    )


def convert_to_single_line(multiline: Any, settings: Settings = DEFAULT_SETTINGS) -> Any:
    """Collapse whitespace runs to single spaces, leaving quoted text alone."""
    if not isinstance(multiline, str):
        _not_a_string(settings, "convert_to_single_line", "multiline")
        return multiline
    return _QUOTED_OR_SPACE_RE.sub(lambda m: m.group(1) or " ", multiline)


def parse_data_from_content(
    content: Any, pattern: str, settings: Settings = DEFAULT_SETTINGS
) -> Any:
    """Return the first capture group of every match of *pattern* in *content*.

    Empty captures are dropped.  *pattern* is matched with ``re.DOTALL``.
    """
    if not isinstance(content, str):
        _not_a_string(settings, "parse_data_from_content", "content")
        return content
    regex = re.compile(pattern, re.DOTALL)
    found = [(m.group(1) if regex.groups else m.group(0)) or "" for m in regex.finditer(content)]
    return [f for f in found if f]
