"""Styled chat alerts: render the ``chatAlert`` template and whisper it."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from chatstyle.model.result import Result
from chatstyle.phrases import PhraseFactory
from chatstyle.render import Renderer
from chatstyle.text import encode_note_content
from chatstyle.transport import Transport, whisper

ALERT_TEMPLATE = "chatAlert"
ALERT_THEME = "chatAlert"


class AlertSeverity(Enum):
    """Alert levels with their syslog code and palette."""

    TIP = (7, "#C3FDB8", "#16F529")
    INFO = (6, "#b8defd", "#2516f5")
    WARNING = (4, "#FBE7A1", "#CA762B")
    ERROR = (3, "#ffdddd", "red")

    def __init__(self, code: int, bg_color: str, title_color: str) -> None:
        self.code = code
        self.bg_color = bg_color
        self.title_color = title_color

    @property
    def palette(self) -> dict[str, str]:
        return {"bg_color": self.bg_color, "title_color": self.title_color}

    @classmethod
    def lookup(cls, value: Any) -> AlertSeverity:
        """Resolve a severity from a member, a syslog code or a name; default INFO."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if isinstance(value, int) and not isinstance(value, bool) and member.code == value:
                return member
            if isinstance(value, str) and member.name == value.strip().upper():
                return member
        return cls.INFO


class AlertService:
    """Renders alerts with the chat alert theme and delivers them."""

    def __init__(
        self,
        renderer: Renderer,
        transport: Transport,
        phrases: PhraseFactory | None = None,
    ) -> None:
        self._renderer = renderer
        self._transport = transport
        self._phrases = phrases or PhraseFactory(renderer.settings)

    def _encode(self, text: str) -> str:
        # Line breaks become spaces: a literal <br> would open an element.
        return encode_note_content(text or "", self._renderer.settings, line_break=" ")

    def send(
        self,
        title: str,
        description: str,
        severity: Any = AlertSeverity.INFO,
        remark: str = "",
        command: str = "",
        sender: str | None = None,
        recipient: str | None = None,
    ) -> Result:
        level = AlertSeverity.lookup(severity)
        content = {
            "title": (title or "").upper(),
            "description": self._encode(description),
            "remark": self._encode(remark),
            "command": self._encode(command),
        }
        rendered = self._renderer.render(ALERT_TEMPLATE, content, ALERT_THEME, level.palette)
        if not rendered.ok:
            return rendered
        return whisper(
            self._transport,
            rendered.text,
            sender=sender,
            recipient=recipient,
            settings=self._renderer.settings,
        )

    def send_phrase(
        self,
        title: str,
        code: str,
        args: Mapping[str, Any] | None = None,
        severity: Any = AlertSeverity.INFO,
        player_id: str | None = None,
        sender: str | None = None,
        recipient: str | None = None,
    ) -> Result:
        """Send an alert whose description is the localized phrase *code*."""
        description = self._phrases.get(code, player_id=player_id, args=args)
        return self.send(
            title, description, severity=severity, sender=sender, recipient=recipient
        )
