"""Tokenize ``!api --command arg ...`` chat messages."""

from __future__ import annotations


def parse_chat_commands(content: str) -> dict[str, list[str]]:
    """Split a chat message into ``{"--command": [args]}``, in order.

    A leading ``!api`` segment is skipped and command names are lower-cased.
    A repeated command keeps its last argument list.
    """
    commands: dict[str, list[str]] = {}
    segments = [s for s in content.strip().split("--") if s.strip()]
    for position, segment in enumerate(segments):
        segment = segment.strip()
        if position == 0 and segment.startswith("!"):
            continue
        command, *args = segment.split()
        commands[f"--{command.lower()}"] = args
    return commands


def parse_chat_subcommands(args: list[str]) -> dict[str, str | bool]:
    """Parse ``key|value`` or ``key#value`` arguments; bare words become flags."""
    parsed: dict[str, str | bool] = {}
    for arg in args:
        delimiter = "|" if "|" in arg else "#" if "#" in arg else None
        if delimiter is None:
            parsed[arg] = True
        else:
            key, _, value = arg.partition(delimiter)
            parsed[key] = value
    return parsed
