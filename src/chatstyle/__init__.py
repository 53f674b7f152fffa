"""chatstyle: parse, cascade and serialize styled markup for chat messages."""
from __future__ import annotations

__version__ = "0.1.0"

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import (
    ChatstyleError,
    ExpressionError,
    MarkupError,
    RegistryError,
    StylesheetError,
    TemplateNotFound,
    ThemeNotFound,
    TransportError,
)
from chatstyle.model import (
    Diagnostic,
    Element,
    ElementRule,
    ErrorKind,
    FunctionEntry,
    Node,
    Props,
    Result,
    RuleSet,
    Severity,
    Status,
    StyleBlock,
    Text,
)
from chatstyle.placeholders import PlaceholderEngine, substitute
from chatstyle.markup import MarkupParser, MarkupSerializer, parse_markup, serialize_markup
from chatstyle.stylesheet import StylesheetParser, parse_stylesheet
from chatstyle.cascade import CascadeResolver, resolve_styles
from chatstyle.registry import TemplateRegistry, ThemeRegistry
from chatstyle.render import Renderer

__all__ = [
    "__version__",
    # config
    "DEFAULT_SETTINGS",
    "Settings",
    # errors
    "ChatstyleError",
    "ExpressionError",
    "MarkupError",
    "RegistryError",
    "StylesheetError",
    "TemplateNotFound",
    "ThemeNotFound",
    "TransportError",
    # model
    "Diagnostic",
    "Element",
    "ElementRule",
    "ErrorKind",
    "FunctionEntry",
    "Node",
    "Props",
    "Result",
    "RuleSet",
    "Severity",
    "Status",
    "StyleBlock",
    "Text",
    # pipeline
    "PlaceholderEngine",
    "substitute",
    "MarkupParser",
    "MarkupSerializer",
    "parse_markup",
    "serialize_markup",
    "StylesheetParser",
    "parse_stylesheet",
    "CascadeResolver",
    "resolve_styles",
    "TemplateRegistry",
    "ThemeRegistry",
    "Renderer",
]
