"""CLI command: chatstyle render -- render a template with a theme."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from chatstyle.cli.options import parse_pairs
from chatstyle.placeholders import PlaceholderEngine
from chatstyle.render import Renderer


def _file_theme(source: str, engine: PlaceholderEngine):
    """Wrap stylesheet text as a theme whose ``{{tokens}}`` come from the palette."""

    def generator(palette):
        return engine.substitute(source, palette)

    return generator


@click.command()
@click.argument("template", default="default")
@click.argument("theme", default="default")
@click.option("-c", "--content", multiple=True, help="Template token as key=value")
@click.option("-p", "--palette", multiple=True, help="Theme palette entry as key=value")
@click.option(
    "--template-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Register this markup file under the TEMPLATE name",
)
@click.option(
    "--theme-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Register this stylesheet file under the THEME name",
)
@click.option("--strict", is_flag=True, help="Fail on malformed markup or stylesheet")
@click.pass_obj
def render(
    settings,
    template: str,
    theme: str,
    content: tuple[str, ...],
    palette: tuple[str, ...],
    template_file: str | None,
    theme_file: str | None,
    strict: bool,
) -> None:
    """Render TEMPLATE styled by THEME and print the markup.

    Diagnostics are printed to stderr.  Exits with code 1 when the render
    fails.
    """
    tokens = parse_pairs(content, "--content")
    colors = parse_pairs(palette, "--palette")

    renderer = Renderer(settings)
    if template_file:
        renderer.templates.add({template: Path(template_file).read_text(encoding="utf-8")})
    if theme_file:
        source = Path(theme_file).read_text(encoding="utf-8")
        renderer.themes.add({theme: _file_theme(source, PlaceholderEngine(settings))})

    result = renderer.render(template, tokens, theme, colors, strict=strict)
    for diag in result.diagnostics:
        click.echo(f"  {diag}", err=True)

    if not result.ok:
        click.echo(f"Render failed ({result.error.value}): {result.message}", err=True)
        sys.exit(1)
    click.echo(result.text)
