"""
wasend CLI main module.

Thin command-line wrapper over the messenger and media handler. Every
command opens one messenger from the environment (WP_ACCESS_TOKEN,
WP_PHONE_ID), runs a single operation and exits.
"""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer

from wasend.core.exceptions import WhatsAppAPIError, WhatsAppError
from wasend.core.logging.logger import setup_app_logging
from wasend.domain.factories.messenger_factory import open_messenger
from wasend.messaging.whatsapp.messenger.whatsapp_messenger import WhatsAppMessenger

app = typer.Typer(help="Send WhatsApp Cloud API messages from the shell")

T = TypeVar("T")


def _run(operation: Callable[[WhatsAppMessenger], Awaitable[T]]) -> T:
    """Run one messenger operation, turning wasend errors into exit code 1."""

    async def runner() -> T:
        async with open_messenger() as messenger:
            return await operation(messenger)

    setup_app_logging()
    try:
        return asyncio.run(runner())
    except WhatsAppAPIError as e:
        typer.secho(f"❌ {e.operation} rejected ({e.status}): {e.body}", fg="red", err=True)
        raise typer.Exit(1)
    except (WhatsAppError, ValueError) as e:
        typer.secho(f"❌ {e}", fg="red", err=True)
        raise typer.Exit(1)


@app.command()
def text(
    recipient: str = typer.Argument(..., help="Recipient phone number"),
    body: str = typer.Argument(..., help="Message text"),
):
    """
    Send a text message.

    Examples:
        wasend text 5215512345678 "Hola!"
    """
    result = _run(lambda m: m.send_text(recipient, body))
    typer.echo(f"✅ Sent: {result.message_id}")


@app.command()
def image(
    recipient: str = typer.Argument(..., help="Recipient phone number"),
    file_path: Path = typer.Argument(..., help="Local JPEG file"),
):
    """Upload a JPEG and send it as an image."""
    receipt = _run(lambda m: m.send_image(recipient, file_path))
    typer.echo(f"✅ Sent: {receipt.result.message_id} (media {receipt.media_id})")


@app.command()
def audio(
    recipient: str = typer.Argument(..., help="Recipient phone number"),
    file_path: Path = typer.Argument(..., help="Local OGG/Opus file"),
):
    """Upload an OGG file and send it as audio."""
    receipt = _run(lambda m: m.send_audio(recipient, file_path))
    typer.echo(f"✅ Sent: {receipt.result.message_id} (media {receipt.media_id})")


# Negative coordinates would otherwise parse as short options
@app.command(context_settings={"ignore_unknown_options": True})
def location(
    recipient: str = typer.Argument(..., help="Recipient phone number"),
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees"),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees"),
    name: str | None = typer.Option(None, "--name", "-n", help="Location name"),
    address: str | None = typer.Option(None, "--address", "-a", help="Street address"),
):
    """
    Send a location pin.

    Examples:
        wasend location 5215512345678 19.4326 -99.1332 --name "Zócalo"
    """
    result = _run(
        lambda m: m.send_location(recipient, latitude, longitude, name, address)
    )
    typer.echo(f"✅ Sent: {result.message_id}")


@app.command("media-info")
def media_info(media_id: str = typer.Argument(..., help="Media ID")):
    """Show metadata and the temporary download URL of a media ID."""
    metadata = _run(lambda m: m.media_handler.get_media_info(media_id))
    typer.echo(metadata.model_dump_json(indent=2, exclude_none=True))


@app.command()
def download(
    media_id: str = typer.Argument(..., help="Media ID"),
    output: Path = typer.Argument(..., help="Destination file"),
    check_status: bool = typer.Option(
        False, "--check-status", help="Fail on non-2xx download status"
    ),
):
    """Resolve a media ID and save its content to a file."""
    data = _run(
        lambda m: m.media_handler.download_media_by_id(
            media_id, check_status=check_status
        )
    )
    output.write_bytes(data)
    typer.echo(f"✅ Saved {len(data)} bytes to {output}")


if __name__ == "__main__":
    app()
