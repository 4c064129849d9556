"""
wasend messaging components.

Usage:
    from wasend.messaging import WhatsAppMessenger, WhatsAppMediaHandler
"""

from .whatsapp import WhatsAppClient, WhatsAppMediaHandler, WhatsAppMessenger

__all__ = ["WhatsAppClient", "WhatsAppMediaHandler", "WhatsAppMessenger"]
