from chatstyle.cli.main import cli

__all__ = ["cli"]
