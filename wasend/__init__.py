"""
wasend - async client for the WhatsApp Cloud API

Sends text, media, location and interactive messages, uploads media and
resolves media IDs to downloadable content.

    from wasend import open_messenger

    async with open_messenger() as messenger:
        result = await messenger.send_text("5215512345678", "hola")
"""

from .core.config.settings import settings
from .core.exceptions import (
    DecodeError,
    DownloadRejected,
    MediaFileError,
    SendRejected,
    TransportError,
    UploadRejected,
    WhatsAppAPIError,
    WhatsAppError,
)
from .domain.factories import MessengerFactory, open_messenger
from .messaging.whatsapp import WhatsAppClient, WhatsAppMediaHandler, WhatsAppMessenger

__version__ = settings.version

__all__ = [
    "open_messenger",
    "MessengerFactory",
    "WhatsAppClient",
    "WhatsAppMediaHandler",
    "WhatsAppMessenger",
    "WhatsAppError",
    "WhatsAppAPIError",
    "SendRejected",
    "UploadRejected",
    "DownloadRejected",
    "MediaFileError",
    "TransportError",
    "DecodeError",
]
