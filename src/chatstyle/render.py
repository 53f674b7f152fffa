"""Render orchestrator: template + theme -> styled markup.

Stages, in order:

1. fetch the template text and the theme stylesheet (side by side),
2. substitute the content tokens into the template,
3. parse the markup and the stylesheet,
4. resolve the cascade,
5. serialize the styled tree.

Every failure is caught here and turned into a failed :class:`Result`.
"""

from __future__ import annotations

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from chatstyle.cascade import CascadeResolver
from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import ExpressionError, MarkupError, StylesheetError
from chatstyle.markup import MarkupParser, MarkupSerializer
from chatstyle.model.result import ErrorKind, Result
from chatstyle.placeholders import PlaceholderEngine
from chatstyle.registry import TemplateRegistry, ThemeRegistry, build_table_rows
from chatstyle.stylesheet import StylesheetParser
from chatstyle.syslog import SyslogSeverity, log_syslog_message

__all__ = ["Renderer"]


def _invalid_argument(template: Any, content: Any, theme: Any, palette: Any) -> str | None:
    for name, value in (("template", template), ("theme", theme)):
        if value is not None and not isinstance(value, str):
            return f"Invalid Argument: '{name}' must be a string."
    for name, value in (("content", content), ("palette", palette)):
        if value is not None and not isinstance(value, Mapping):
            return f"Invalid Argument: '{name}' must be a mapping."
    return None


class Renderer:
    """Runs the full parse -> cascade -> serialize pipeline.

    All collaborators are optional; missing ones are built from *settings*.
    """

    def __init__(
        self,
        settings: Settings = DEFAULT_SETTINGS,
        templates: TemplateRegistry | None = None,
        themes: ThemeRegistry | None = None,
        engine: PlaceholderEngine | None = None,
        markup_parser: MarkupParser | None = None,
        stylesheet_parser: StylesheetParser | None = None,
        resolver: CascadeResolver | None = None,
        serializer: MarkupSerializer | None = None,
    ) -> None:
        self.settings = settings
        self.templates = templates or TemplateRegistry(settings)
        self.themes = themes or ThemeRegistry(settings)
        self._engine = engine or PlaceholderEngine(settings)
        self._markup_parser = markup_parser or MarkupParser(settings)
        self._stylesheet_parser = stylesheet_parser or StylesheetParser(settings)
        self._resolver = resolver or CascadeResolver(settings)
        self._serializer = serializer or MarkupSerializer(settings)

    def render(
        self,
        template: str = "default",
        content: Mapping[str, Any] | None = None,
        theme: str = "default",
        palette: Mapping[str, Any] | None = None,
        strict: bool = False,
    ) -> Result:
        """Render *template* with *content*, styled by *theme*.

        Returns a successful result carrying the markup, or a failed one with
        empty text.  Malformed markup or stylesheet input still renders, with
        the problems attached as diagnostics, unless *strict* is set.  Under
        *strict* a failed ``[[expression]]`` also fails the render.

        Non-mapping *content* or *palette* and non-string names fail with
        ``INVALID_ARGUMENT`` before any work is done.
        """
        problem = _invalid_argument(template, content, theme, palette)
        if problem:
            log_syslog_message(
                self.settings, SyslogSeverity.ERROR, "Renderer.render", "40000", problem
            )
            return Result.failure(ErrorKind.INVALID_ARGUMENT, problem)
        try:
            return self._render(
                template, dict(content or {}), theme, dict(palette or {}), strict
            )
        except ExpressionError as exc:
            log_syslog_message(
                self.settings, SyslogSeverity.ERROR, "Renderer.render", "30000", f"{exc}"
            )
            return Result.failure(ErrorKind.EVALUATION_FAILURE, str(exc))
        except (MarkupError, StylesheetError) as exc:
            log_syslog_message(
                self.settings, SyslogSeverity.ERROR, "Renderer.render", "50000", f"{exc}"
            )
            return Result.failure(ErrorKind.MALFORMED_STRUCTURE, str(exc))
        except Exception as exc:
            log_syslog_message(
                self.settings, SyslogSeverity.ERROR, "Renderer.render", "30000", f"{exc}"
            )
            return Result.failure(ErrorKind.PIPELINE_FAILURE, str(exc))

    def render_text(self, *args: Any, **kwargs: Any) -> str:
        """Like :meth:`render` but returns only the text (empty on failure)."""
        return self.render(*args, **kwargs).text

    def _render(
        self,
        template: str,
        content: dict[str, Any],
        theme: str,
        palette: dict[str, Any],
        strict: bool,
    ) -> Result:
        with ThreadPoolExecutor(max_workers=max(1, self.settings.render_workers)) as pool:
            template_future = pool.submit(self.templates.get, template)
            theme_future = pool.submit(self.themes.get, theme, palette)
            template_text = template_future.result()
            theme_text = theme_future.result()

        tokens = {"tableRows": build_table_rows(content), **content}
        markup, expression_diagnostics = self._engine.expand(template_text, tokens)
        if strict and expression_diagnostics:
            raise ExpressionError("; ".join(str(d) for d in expression_diagnostics))

        parsed_markup = self._markup_parser.parse_document(markup)
        parsed_sheet = self._stylesheet_parser.parse_document(theme_text)
        if strict:
            parsed_markup.raise_for_errors()
            parsed_sheet.raise_for_errors()

        styled = self._resolver.resolve(parsed_markup.nodes, parsed_sheet.rules)
        output = self._serializer.serialize(styled)
        diagnostics = expression_diagnostics + parsed_markup.diagnostics + parsed_sheet.diagnostics
        return Result.success(output, diagnostics=diagnostics)
