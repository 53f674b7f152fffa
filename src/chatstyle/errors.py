"""Error hierarchy for chatstyle."""
from __future__ import annotations


class ChatstyleError(Exception):
    """Base error for all chatstyle errors."""


class MarkupError(ChatstyleError):
    """Raised when markup cannot be turned into a tree."""


class StylesheetError(ChatstyleError):
    """Raised when stylesheet source cannot be parsed."""


class ExpressionError(ChatstyleError):
    """Raised when a ``[[expression]]`` placeholder cannot be evaluated."""

    def __init__(self, message: str, expression: str = "") -> None:
        self.expression = expression
        super().__init__(message)


class RegistryError(ChatstyleError, KeyError):
    """Base error for template and theme lookups."""

    kind = "Entry"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"{self.kind} not found: {self.name!r}"


class TemplateNotFound(RegistryError):
    kind = "Template"


class ThemeNotFound(RegistryError):
    kind = "Theme"


class TransportError(ChatstyleError):
    """Raised by a transport when a message could not be delivered."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
