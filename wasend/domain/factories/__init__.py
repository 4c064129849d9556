"""Domain factories package."""

from .messenger_factory import MessengerFactory, open_messenger

__all__ = ["MessengerFactory", "open_messenger"]
