"""Shared option parsing for CLI commands."""

from __future__ import annotations

import click


def parse_pairs(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Turn repeated ``key=value`` options into a dict."""
    pairs: dict[str, str] = {}
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {raw!r}", param_hint=option)
        pairs[key.strip()] = value
    return pairs
