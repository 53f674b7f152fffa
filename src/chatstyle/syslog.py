"""Syslog-style log lines for chatstyle components.

Every component reports through the ``chatstyle`` logger.  Records carry a
tag (the reporting operation) and a message id, and are rendered as::

    <WARN> 2024-12-16T14:45:12.003Z [chatstyle](MarkupParser.parse): {"messageId": "50000", "message": "..."}
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from enum import IntEnum
from typing import IO, Any

from chatstyle.config import Settings

LOGGER_NAME = "chatstyle"

logger = logging.getLogger(LOGGER_NAME)


class SyslogSeverity(IntEnum):
    """Syslog severity codes understood by the log formatter."""

    ERROR = 3
    WARN = 4
    INFO = 6
    DEBUG = 7


_LOGGING_LEVELS: dict[SyslogSeverity, int] = {
    SyslogSeverity.ERROR: logging.ERROR,
    SyslogSeverity.WARN: logging.WARNING,
    SyslogSeverity.INFO: logging.INFO,
    SyslogSeverity.DEBUG: logging.DEBUG,
}


def normalize_severity(value: Any) -> SyslogSeverity:
    """Map *value* onto a known severity, defaulting to DEBUG."""
    try:
        return SyslogSeverity(value)
    except ValueError:
        return SyslogSeverity.DEBUG


def severity_from_level(levelno: int) -> SyslogSeverity:
    if levelno >= logging.ERROR:
        return SyslogSeverity.ERROR
    if levelno >= logging.WARNING:
        return SyslogSeverity.WARN
    if levelno >= logging.INFO:
        return SyslogSeverity.INFO
    return SyslogSeverity.DEBUG


def _timestamp(created: float | None = None) -> str:
    moment = (
        datetime.fromtimestamp(created, tz=timezone.utc)
        if created is not None
        else datetime.now(timezone.utc)
    )
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_syslog_line(
    severity: SyslogSeverity,
    mod_name: str,
    tag: str,
    message_id: str,
    message: str,
    created: float | None = None,
) -> str:
    payload = json.dumps({"messageId": message_id, "message": message}, ensure_ascii=False)
    return f"<{severity.name}> {_timestamp(created)} [{mod_name}]({tag}): {payload}"


class SyslogFormatter(logging.Formatter):
    """Render log records as syslog-style lines.

    Records emitted through :func:`log_syslog_message` carry ``syslog_tag``,
    ``message_id`` and ``mod_name`` extras; plain records fall back to the
    logger name and the record's function name.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = format_syslog_line(
            severity_from_level(record.levelno),
            getattr(record, "mod_name", record.name),
            getattr(record, "syslog_tag", record.funcName),
            getattr(record, "message_id", "0"),
            record.getMessage(),
            created=record.created,
        )
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def log_syslog_message(
    settings: Settings,
    severity: int,
    tag: str,
    message_id: str,
    message: str,
) -> str:
    """Emit a record on the ``chatstyle`` logger and return its formatted line."""
    sev = normalize_severity(severity)
    mod_name = settings.mod_name or "UNKNOWN_MODULE"
    logger.log(
        _LOGGING_LEVELS[sev],
        "%s",
        message,
        extra={"syslog_tag": tag, "message_id": message_id, "mod_name": mod_name},
    )
    return format_syslog_line(sev, mod_name, tag, message_id, message)


def configure_logging(settings: Settings, stream: IO[str] | None = None) -> logging.Handler:
    """Attach a syslog-formatted stream handler to the ``chatstyle`` logger.

    Calling this more than once replaces the previously installed handler.
    """
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, SyslogFormatter):
            logger.removeHandler(existing)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(SyslogFormatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if settings.verbose else logging.INFO)
    return handler
