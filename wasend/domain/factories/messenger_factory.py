"""
Messenger factory for wiring WhatsApp messengers.

Builds the client -> media handler -> messenger chain around a shared
aiohttp session. ``open_messenger`` additionally owns the session for the
lifetime of an ``async with`` block.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from wasend.core.config.settings import settings
from wasend.core.logging.logger import get_logger
from wasend.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wasend.messaging.whatsapp.handlers.whatsapp_media_handler import (
    WhatsAppMediaHandler,
)
from wasend.messaging.whatsapp.messenger.whatsapp_messenger import WhatsAppMessenger


class MessengerFactory:
    """
    Factory for creating WhatsApp messengers over one HTTP session.

    Every messenger created by the same factory shares its session and
    therefore its connection pool.
    """

    def __init__(
        self,
        http_session: aiohttp.ClientSession,
        base_url: str | None = None,
        api_version: str | None = None,
    ):
        """
        Initialize the messenger factory.

        Args:
            http_session: Shared HTTP session for connection pooling
            base_url: Graph API base URL (defaults to settings.base_url)
            api_version: Graph API version (defaults to settings.api_version)
        """
        self._http_session = http_session
        self.base_url = base_url or settings.base_url
        self.api_version = api_version or settings.api_version
        self.logger = get_logger(__name__)

    def create_messenger(
        self, access_token: str, phone_number_id: str
    ) -> WhatsAppMessenger:
        """
        Create a fully configured WhatsApp messenger.

        Args:
            access_token: Bearer token for the Graph API
            phone_number_id: Sending phone number ID

        Returns:
            WhatsAppMessenger whose media_handler is also ready to use
        """
        client = WhatsAppClient(
            session=self._http_session,
            access_token=access_token,
            phone_number_id=phone_number_id,
            base_url=self.base_url,
            api_version=self.api_version,
        )
        media_handler = WhatsAppMediaHandler(client=client)
        messenger = WhatsAppMessenger(client=client, media_handler=media_handler)

        self.logger.debug(f"WhatsApp messenger created for phone ID {phone_number_id}")
        return messenger


@asynccontextmanager
async def open_messenger(
    access_token: str | None = None,
    phone_number_id: str | None = None,
    *,
    base_url: str | None = None,
    api_version: str | None = None,
    timeout: float | None = None,
) -> AsyncIterator[WhatsAppMessenger]:
    """
    Open an aiohttp session and yield a messenger bound to it.

    Missing credentials are taken from settings (WP_ACCESS_TOKEN and
    WP_PHONE_ID). The session is closed when the block exits.

    Example:
        async with open_messenger() as messenger:
            await messenger.send_text("5215512345678", "hola")
    """
    access_token, phone_number_id = settings.require_credentials(
        access_token, phone_number_id
    )

    client_timeout = aiohttp.ClientTimeout(total=timeout or settings.request_timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        factory = MessengerFactory(session, base_url=base_url, api_version=api_version)
        yield factory.create_messenger(access_token, phone_number_id)
