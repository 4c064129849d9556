"""
WhatsApp implementation of the IMessenger interface.

Provides every outbound operation of the client:
- Basic messaging: send_text
- Media messaging: send_audio, send_image, send_media_reference
- Location messaging: send_location
- Interactive messaging: send_interactive_list, send_interactive_buttons

Each operation builds one OutboundMessage variant and hands it to ``send``,
the single call path to the messages endpoint.
"""

from collections.abc import Sequence
from pathlib import Path

from wasend.core.exceptions import SendRejected
from wasend.core.logging.logger import get_logger
from wasend.domain.interfaces.messaging_interface import IMessenger
from wasend.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wasend.messaging.whatsapp.handlers.whatsapp_media_handler import (
    WhatsAppMediaHandler,
)
from wasend.messaging.whatsapp.models.basic_models import (
    OutboundMessage,
    SendResult,
    TextMessage,
)
from wasend.messaging.whatsapp.models.interactive_models import (
    TEXT_KIND,
    ButtonItem,
    InteractiveButtonsMessage,
    InteractiveListMessage,
    ListRow,
    ListSection,
    UrlAction,
    resolve_button_action,
)
from wasend.messaging.whatsapp.models.media_models import (
    MediaReference,
    MediaSendReceipt,
    MediaType,
    build_media_message,
)
from wasend.messaging.whatsapp.models.specialized_models import LocationMessage
from wasend.messaging.whatsapp.utils.error_helpers import (
    decode_response,
    raise_api_error,
)

# The messages endpoint answers 200, or 202 for queued sends
SUCCESS_STATUSES = frozenset({200, 202})


class WhatsAppMessenger(IMessenger):
    """
    WhatsApp message dispatcher.

    Uses composition with:
    - WhatsAppClient: authenticated HTTP exchange
    - WhatsAppMediaHandler: upload step of the media sends

    No retries and no idempotency key: every call posts at most once.
    """

    def __init__(self, client: WhatsAppClient, media_handler: WhatsAppMediaHandler):
        """Initialize WhatsApp messenger.

        Args:
            client: Configured WhatsApp client for API operations
            media_handler: Media handler for the upload step of media sends
        """
        self.client = client
        self.media_handler = media_handler
        self.logger = get_logger(__name__, tenant_id=client.tenant_id)

    @property
    def tenant_id(self) -> str:
        return self.client.tenant_id

    async def send(self, message: OutboundMessage) -> SendResult:
        """Post one message to the messages endpoint.

        The full response body is read before anything is decoded. Only 200
        and 202 count as success; any other status raises SendRejected with
        the raw body (and its parsed JSON when it parses).
        """
        payload = message.to_payload()
        operation = f"send {payload['type']} message to {message.recipient}"
        logger = self.logger.bind(user_id=message.recipient)

        raw = await self.client.post_json(payload)
        if raw.status not in SUCCESS_STATUSES:
            raise_api_error(SendRejected, raw, operation, logger)

        result = decode_response(raw, SendResult, operation, logger)
        logger.info(f"{payload['type'].title()} message sent, id: {result.message_id}")
        return result

    async def send_text(self, recipient: str, body: str) -> SendResult:
        """Send text message using WhatsApp API.

        Args:
            recipient: Recipient phone number
            body: Text content of the message
        """
        return await self.send(TextMessage.create(recipient, body))

    async def send_audio(
        self, recipient: str, file_path: str | Path
    ) -> MediaSendReceipt:
        """Upload a local file as audio/ogg and send it.

        Returns:
            MediaSendReceipt with the uploaded media ID and the send result
        """
        return await self._upload_and_send(recipient, file_path, MediaType.AUDIO)

    async def send_image(
        self, recipient: str, file_path: str | Path
    ) -> MediaSendReceipt:
        """Upload a local file as image/jpeg and send it."""
        return await self._upload_and_send(recipient, file_path, MediaType.IMAGE)

    async def send_media_reference(
        self, recipient: str, media_type: MediaType, reference: MediaReference
    ) -> SendResult:
        """Send audio or image media that has already been uploaded."""
        return await self.send(build_media_message(recipient, media_type, reference))

    async def _upload_and_send(
        self, recipient: str, file_path: str | Path, media_type: MediaType
    ) -> MediaSendReceipt:
        reference = await self.media_handler.upload_media(
            file_path, media_type.default_mime_type
        )
        result = await self.send_media_reference(recipient, media_type, reference)
        return MediaSendReceipt(media_id=reference.id, result=result)

    async def send_location(
        self,
        recipient: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> SendResult:
        """Send location message using WhatsApp API.

        Args:
            recipient: Recipient phone number
            latitude: Location latitude in decimal degrees
            longitude: Location longitude in decimal degrees
            name: Optional location name, omitted when empty
            address: Optional street address, omitted when empty
        """
        return await self.send(
            LocationMessage.create(recipient, latitude, longitude, name, address)
        )

    async def send_interactive_list(
        self,
        recipient: str,
        body_text: str,
        button_label: str,
        rows: Sequence[ListRow | dict],
    ) -> SendResult:
        """Send an interactive list with all rows in one untitled section.

        Args:
            recipient: Recipient phone number
            body_text: Main message text
            button_label: Text of the button that opens the list
            rows: Rows as ListRow models or dicts with id, title, description
        """
        section = ListSection(rows=[ListRow.model_validate(row) for row in rows])
        return await self.send(
            InteractiveListMessage.create(recipient, body_text, button_label, [section])
        )

    async def send_interactive_buttons(
        self,
        recipient: str,
        kind: str,
        body_text: str,
        buttons: Sequence[ButtonItem | dict],
    ) -> SendResult:
        """Send an interactive button message.

        ``kind == "text"`` sends ``body_text`` as a plain text message.
        ``kind == "location_request_message"`` asks for the recipient's
        location. Any other kind is sent as ``interactive.type`` unchanged
        with reply buttons, unless a button has a link: then the action is a
        call-to-action URL built from the last linked button and all reply
        buttons are dropped.
        """
        if kind == TEXT_KIND:
            return await self.send_text(recipient, body_text)

        items = [ButtonItem.model_validate(button) for button in buttons]
        action = resolve_button_action(kind, items)

        if isinstance(action, UrlAction):
            dropped = sum(1 for item in items if not item.link)
            if dropped:
                self.logger.warning(
                    f"Link button overrides {dropped} reply button(s) for {recipient}"
                )

        return await self.send(
            InteractiveButtonsMessage.create(recipient, kind, body_text, action)
        )
