"""Markup parsing and serialization."""

from chatstyle.markup.parser import MarkupParser, ParsedMarkup, parse_inline_style, parse_markup, tokenize
from chatstyle.markup.serializer import MarkupSerializer, serialize_markup, style_to_string

__all__ = [
    "MarkupParser",
    "MarkupSerializer",
    "ParsedMarkup",
    "parse_inline_style",
    "parse_markup",
    "serialize_markup",
    "style_to_string",
    "tokenize",
]
