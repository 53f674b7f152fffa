"""Transport protocol and the whisper helper built on it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from chatstyle.config import DEFAULT_SETTINGS, Settings
from chatstyle.errors import TransportError
from chatstyle.model.result import ErrorKind, Result
from chatstyle.syslog import SyslogSeverity, log_syslog_message


@dataclass(frozen=True)
class Envelope:
    """A message addressed from one chat participant to another."""

    sender: str
    recipient: str
    message: str


class Transport(Protocol):
    """Delivers a finished message.  Raises TransportError on failure."""

    def send(self, envelope: Envelope) -> None: ...


def whisper(
    transport: Transport,
    message: str,
    sender: str | None = None,
    recipient: str | None = None,
    settings: Settings = DEFAULT_SETTINGS,
) -> Result:
    """Send *message* privately as ``/w <recipient> <message>``.

    The sender defaults to the module name and the recipient to
    ``settings.default_recipient``.
    """
    to = recipient or settings.default_recipient
    text = f"/w {to} {message}"
    try:
        transport.send(Envelope(sender=sender or settings.mod_name, recipient=to, message=text))
    except TransportError as exc:
        log_syslog_message(settings, SyslogSeverity.ERROR, "whisper", "30000", f"{exc}")
        return Result.failure(ErrorKind.TRANSPORT_FAILURE, str(exc))
    return Result.success(text)
