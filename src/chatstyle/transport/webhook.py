"""WebhookTransport: POST each envelope as JSON to a chat relay."""

from __future__ import annotations

from dataclasses import asdict

import httpx

from chatstyle.errors import TransportError
from chatstyle.transport.base import Envelope


class WebhookTransport:
    """Thin wrapper around :mod:`httpx` that maps errors into TransportError."""

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._client = client or httpx.Client(headers=headers or {}, timeout=timeout)

    def send(self, envelope: Envelope) -> None:
        try:
            resp = self._client.post(self._url, json=asdict(envelope))
        except httpx.HTTPError as exc:
            raise TransportError(str(exc), cause=exc) from exc
        if resp.status_code >= 300:
            raise TransportError(f"Relay answered {resp.status_code}: {resp.text[:200]}")

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> WebhookTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
