"""Hand-written parser for chat stylesheets.

Syntax example:
    :root { --accent: #2516f5; }
    * { margin: 0; }
    h3, p { color: var(--accent); }
    .alert-message { padding: 5px 10px; }
    #footer { font-size: 0.8em; }

Selectors are filed by category only; combinators and pseudo-classes are
kept as literal element selectors with no matching semantics.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import StylesheetError
from chatstyle.model.diagnostic import Diagnostic, Severity
from chatstyle.model.rules import ElementRule, FunctionEntry, RuleSet, StyleBlock
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = ["ParsedStylesheet", "StylesheetParser", "parse_declarations", "parse_stylesheet"]

_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")

# Matches a complete rule: selector { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selector>[^{}]+)    # everything before the opening brace
    \{                       # opening brace
    (?P<body>[^}]*)          # property declarations
    \}                       # closing brace
    """,
    re.VERBOSE,
)

# Matches a single declaration: key: value;
_PROP_RE = re.compile(
    r"""
    (?P<key>[\w-]+)          # property or --variable name
    \s*:\s*                  # colon separator
    (?P<value>[^;]+)         # value up to the semicolon
    ;                        # terminating semicolon
    """,
    re.VERBOSE,
)

_TAG = "StylesheetParser.parse"


@dataclass(frozen=True)
class ParsedStylesheet:
    """A rule set plus any problems found while parsing it."""

    rules: RuleSet
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def raise_for_errors(self) -> None:
        """Raise StylesheetError if any error diagnostic was recorded."""
        errors = [str(d) for d in self.diagnostics if d.is_error]
        if errors:
            raise StylesheetError("; ".join(errors))


def parse_declarations(body: str) -> dict[str, str]:
    """Parse the body of a rule block into a property dictionary."""
    props: dict[str, str] = {}
    for match in _PROP_RE.finditer(body):
        props[match.group("key").strip()] = match.group("value").strip()
    return props


def _file_selector(rules: RuleSet, selector: str, properties: dict[str, str]) -> None:
    """Store *properties* in the bucket matching *selector*'s category."""
    if selector == "*":
        rules.universal.update(properties)
    elif selector.startswith("."):
        rules.classes[selector] = StyleBlock(styles=dict(properties))
    elif selector.startswith("#"):
        rules.ids[selector] = StyleBlock(styles=dict(properties))
    elif selector.startswith(":"):
        rules.functions.setdefault(selector, []).append(FunctionEntry(styles=dict(properties)))
    else:
        rules.elements[selector] = ElementRule(styles=dict(properties))


class StylesheetParser:
    """Turns stylesheet text into a categorized :class:`RuleSet`."""

    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def parse(self, source: str) -> RuleSet:
        return self.parse_document(source).rules

    def parse_document(self, source: str) -> ParsedStylesheet:
        """Parse *source*, reporting leftover text that is not a complete block."""
        if not isinstance(source, str):
            if self._settings.verbose:
                log_syslog_message(
                    self._settings,
                    SyslogSeverity.DEBUG,
                    _TAG,
                    "70000",
                    "Invalid Argument: 'source' is not a string, returning an empty rule set.",
                )
            return ParsedStylesheet(
                rules=RuleSet(),
                diagnostics=[Diagnostic("invalid_argument", Severity.WARNING, "stylesheet is not a string")],
            )

        cleaned = _COMMENT_RE.sub("", source).replace("\n", " ").strip()
        rules = RuleSet()
        diagnostics: list[Diagnostic] = []

        for match in _RULE_RE.finditer(cleaned):
            properties = parse_declarations(match.group("body"))
            for selector in match.group("selector").split(","):
                selector = selector.strip()
                if selector:
                    _file_selector(rules, selector, properties)

        leftover = _RULE_RE.sub("", cleaned).strip()
        if leftover:
            message = f"Unparsed stylesheet text ignored: {leftover[:60]!r}"
            diagnostics.append(Diagnostic("unparsed_text", Severity.ERROR, message))
            log_syslog_message(self._settings, SyslogSeverity.ERROR, _TAG, "30000", message)

        if self._settings.verbose:
            log_syslog_message(
                self._settings, SyslogSeverity.DEBUG, _TAG, "70000", json.dumps(rules.to_dict())
            )

        return ParsedStylesheet(rules=rules, diagnostics=diagnostics)


def parse_stylesheet(source: str, settings: Settings = DEFAULT_SETTINGS) -> RuleSet:
    """Parse a stylesheet string into a :class:`RuleSet`."""
    return StylesheetParser(settings).parse(source)
