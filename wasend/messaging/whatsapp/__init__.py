"""WhatsApp Cloud API implementation."""

from .client import WhatsAppClient
from .handlers import WhatsAppMediaHandler
from .messenger import WhatsAppMessenger

__all__ = ["WhatsAppClient", "WhatsAppMediaHandler", "WhatsAppMessenger"]
