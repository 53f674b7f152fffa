"""CLI commands: chatstyle inspect markup|stylesheet -- show parsed structure."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from chatstyle.markup import MarkupParser
from chatstyle.model.diagnostic import Diagnostic
from chatstyle.model.node import tree_to_dicts
from chatstyle.stylesheet import StylesheetParser


def _report(payload: object, diagnostics: list[Diagnostic]) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    for diag in diagnostics:
        click.echo(str(diag), err=True)
    errors = [d for d in diagnostics if d.is_error]
    if diagnostics:
        click.echo(f"Summary: {len(errors)} error(s), {len(diagnostics) - len(errors)} warning(s)", err=True)
    sys.exit(1 if errors else 0)


@click.group()
def inspect() -> None:
    """Parse a markup or stylesheet file and print its structure as JSON."""


@inspect.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def markup(settings, path: str) -> None:
    """Print the node tree of a markup file."""
    parsed = MarkupParser(settings).parse_document(Path(path).read_text(encoding="utf-8"))
    _report(tree_to_dicts(parsed.nodes), parsed.diagnostics)


@inspect.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def stylesheet(settings, path: str) -> None:
    """Print the categorized rule set of a stylesheet file."""
    parsed = StylesheetParser(settings).parse_document(Path(path).read_text(encoding="utf-8"))
    _report(parsed.rules.to_dict(), parsed.diagnostics)
