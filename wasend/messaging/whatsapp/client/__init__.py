"""WhatsApp client package."""

from .whatsapp_client import (
    RawResponse,
    WhatsAppClient,
    WhatsAppFormDataBuilder,
    WhatsAppUrlBuilder,
)

__all__ = ["RawResponse", "WhatsAppClient", "WhatsAppUrlBuilder", "WhatsAppFormDataBuilder"]
