"""CLI command: chatstyle alert -- render and deliver a chat alert."""

from __future__ import annotations

import sys

import click

from chatstyle.alerts import AlertService, AlertSeverity
from chatstyle.render import Renderer
from chatstyle.transport import Envelope, WebhookTransport


class _EchoTransport:
    """Prints each envelope instead of delivering it."""

    def send(self, envelope: Envelope) -> None:
        click.echo(f"[{envelope.sender} -> {envelope.recipient}] {envelope.message}")


@click.command()
@click.option("--title", required=True, help="Alert title")
@click.option("--description", required=True, help="Alert body")
@click.option(
    "--severity",
    type=click.Choice([s.name.lower() for s in AlertSeverity], case_sensitive=False),
    default="info",
    help="Alert level",
)
@click.option("--remark", default="", help="Trailing remark")
@click.option("--command", "command_hint", default="", help="Command shown in the alert")
@click.option("--to", "recipient", default=None, help="Recipient (defaults to gm)")
@click.option("--from", "sender", default=None, help="Sender name")
@click.option("--webhook", default=None, help="Relay URL; prints the message when omitted")
@click.pass_obj
def alert(
    settings,
    title: str,
    description: str,
    severity: str,
    remark: str,
    command_hint: str,
    recipient: str | None,
    sender: str | None,
    webhook: str | None,
) -> None:
    """Render a styled alert and whisper it to a recipient."""
    transport = WebhookTransport(webhook) if webhook else _EchoTransport()
    service = AlertService(Renderer(settings), transport)
    try:
        result = service.send(
            title,
            description,
            severity=severity,
            remark=remark,
            command=command_hint,
            sender=sender,
            recipient=recipient,
        )
    finally:
        if isinstance(transport, WebhookTransport):
            transport.close()

    if not result.ok:
        click.echo(f"Alert failed ({result.error.value}): {result.message}", err=True)
        sys.exit(1)
