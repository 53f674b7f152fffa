"""RecordingTransport: keeps every delivered envelope in memory."""

from __future__ import annotations

from chatstyle.errors import TransportError
from chatstyle.transport.base import Envelope


class RecordingTransport:
    """Transport that records envelopes instead of sending them.

    Set ``fail_with`` to make the next sends raise a TransportError.
    """

    def __init__(self) -> None:
        self._sent: list[Envelope] = []
        self.fail_with: str | None = None

    def send(self, envelope: Envelope) -> None:
        if self.fail_with is not None:
            raise TransportError(self.fail_with)
        self._sent.append(envelope)

    @property
    def sent(self) -> list[Envelope]:
        """Return the envelopes delivered so far, oldest first."""
        return list(self._sent)

    def clear(self) -> None:
        self._sent.clear()
