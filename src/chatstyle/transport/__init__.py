"""Message delivery: transports and the whisper helper."""

from chatstyle.transport.base import Envelope, Transport, whisper
from chatstyle.transport.recording import RecordingTransport
from chatstyle.transport.webhook import WebhookTransport

__all__ = ["Envelope", "RecordingTransport", "Transport", "WebhookTransport", "whisper"]
