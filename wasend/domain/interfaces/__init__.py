"""
Domain interfaces.

Defines the contracts that the WhatsApp implementations fulfil.
"""

from .media_interface import IMediaHandler
from .messaging_interface import IMessenger

__all__ = ["IMediaHandler", "IMessenger"]
