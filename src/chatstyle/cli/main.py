"""chatstyle CLI entry point: Click group with subcommands."""

from __future__ import annotations

from dataclasses import replace

import click

from chatstyle import __version__
from chatstyle.config import DEFAULT_SETTINGS
from chatstyle.syslog import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="chatstyle")
@click.option("--verbose/--quiet", default=False, help="Log every pipeline stage at debug level")
@click.option("--mod-name", default=DEFAULT_SETTINGS.mod_name, help="Module name shown in log lines")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, mod_name: str) -> None:
    """chatstyle - render styled markup for chat messages."""
    settings = replace(DEFAULT_SETTINGS, verbose=verbose, mod_name=mod_name)
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
@click.pass_obj
def templates(settings) -> None:
    """List the registered template names."""
    from chatstyle.registry import TemplateRegistry

    for name in TemplateRegistry(settings).names():
        click.echo(name)


@cli.command()
@click.pass_obj
def themes(settings) -> None:
    """List the registered theme names."""
    from chatstyle.registry import ThemeRegistry

    for name in ThemeRegistry(settings).names():
        click.echo(name)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
@click.pass_obj
def serve(settings, host: str, port: int, debug: bool) -> None:
    """Start the render preview web server."""
    from chatstyle.render import Renderer
    from chatstyle.web.app import create_app

    app = create_app(renderer=Renderer(settings))
    click.echo(f"Starting chatstyle on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


# Import and register subcommands
from chatstyle.cli.alert import alert  # noqa: E402
from chatstyle.cli.inspect import inspect  # noqa: E402
from chatstyle.cli.render import render  # noqa: E402

cli.add_command(render)
cli.add_command(inspect)
cli.add_command(alert)
