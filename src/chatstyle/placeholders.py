"""Placeholder substitution: ``{{name}}``, ``[[expression]]`` and ``var(--name)``.

The three passes always run in that order.  Token replacements are inserted
verbatim: the expression and style-variable passes only see the literal
template text between ``{{...}}`` placeholders, so content supplied through a
token is never evaluated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import ExpressionError
from chatstyle.expressions import evaluate_expression, format_value
from chatstyle.model.diagnostic import Diagnostic, Severity
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = ["PlaceholderEngine", "replace_style_variables", "substitute"]

_TOKEN_RE = re.compile(r"\{\{(.*?)\}\}")
_EXPRESSION_RE = re.compile(r"\[\[(.*?)\]\]")
_STYLE_VAR_RE = re.compile(r"var\((--[\w-]+)\)")


def replace_style_variables(text: str, style_vars: Mapping[str, str]) -> str:
    """Replace ``var(--name)`` references; unknown names stay as written."""

    def _lookup(match: re.Match[str]) -> str:
        name = match.group(1).strip()
        value = style_vars.get(name)
        if value is None or value == "":
            return match.group(0)
        return str(value)

    return _STYLE_VAR_RE.sub(_lookup, text)


class PlaceholderEngine:
    """Fills template placeholders from a token mapping."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def substitute(
        self,
        text: Any,
        tokens: Mapping[str, Any] | None = None,
        style_vars: Mapping[str, str] | None = None,
    ) -> Any:
        """Return *text* with all placeholders replaced.

        Non-string input is returned unchanged.
        """
        return self.expand(text, tokens, style_vars)[0]

    def expand(
        self,
        text: Any,
        tokens: Mapping[str, Any] | None = None,
        style_vars: Mapping[str, str] | None = None,
    ) -> tuple[Any, list[Diagnostic]]:
        """Like :meth:`substitute`, also returning one diagnostic per failed expression."""
        if not isinstance(text, str):
            if self._settings.verbose:
                log_syslog_message(
                    self._settings,
                    SyslogSeverity.DEBUG,
                    "PlaceholderEngine.substitute",
                    "70000",
                    "Invalid Argument: 'text' is not a string, returning input.",
                )
            return text, []

        scope: Mapping[str, Any] = tokens or {}
        variables: Mapping[str, str] = style_vars or {}
        diagnostics: list[Diagnostic] = []

        parts: list[str] = []
        position = 0
        for match in _TOKEN_RE.finditer(text):
            parts.append(self._literal(text[position : match.start()], scope, variables, diagnostics))
            parts.append(self._token(match, scope))
            position = match.end()
        parts.append(self._literal(text[position:], scope, variables, diagnostics))
        return "".join(parts), diagnostics

    def _literal(
        self,
        segment: str,
        scope: Mapping[str, Any],
        variables: Mapping[str, str],
        diagnostics: list[Diagnostic],
    ) -> str:
        result = _EXPRESSION_RE.sub(lambda m: self._expression(m, scope, diagnostics), segment)
        return replace_style_variables(result, variables)

    @staticmethod
    def _token(match: re.Match[str], scope: Mapping[str, Any]) -> str:
        value = scope.get(match.group(1).strip())
        if value is None:
            return ""
        try:
            return format_value(value)
        except ValueError:
            # int too large for str()
            return ""

    def _expression(
        self,
        match: re.Match[str],
        scope: Mapping[str, Any],
        diagnostics: list[Diagnostic],
    ) -> str:
        try:
            return format_value(evaluate_expression(match.group(1), scope))
        except (ExpressionError, RecursionError, ValueError) as exc:
            message = f"Failed to evaluate expression: {match.group(0)[:80]} ({str(exc)[:120]})"
            diagnostics.append(Diagnostic("expression_failed", Severity.WARNING, message))
            log_syslog_message(
                self._settings,
                SyslogSeverity.WARN,
                "PlaceholderEngine.substitute",
                "30000",
                message,
            )
            return match.group(0)


_default_engine = PlaceholderEngine()


def substitute(
    text: Any,
    tokens: Mapping[str, Any] | None = None,
    style_vars: Mapping[str, str] | None = None,
) -> Any:
    """Substitute placeholders using a default-configured engine."""
    return _default_engine.substitute(text, tokens, style_vars)
