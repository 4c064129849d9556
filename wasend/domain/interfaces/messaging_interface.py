"""
Messaging interface.

Defines the contract of the message dispatcher: one coroutine per message
kind, all reducing to ``send``.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from wasend.messaging.whatsapp.models.basic_models import OutboundMessage, SendResult
from wasend.messaging.whatsapp.models.interactive_models import ButtonItem, ListRow
from wasend.messaging.whatsapp.models.media_models import MediaSendReceipt


class IMessenger(ABC):
    """Outbound message dispatcher."""

    @property
    @abstractmethod
    def tenant_id(self) -> str:
        """Sending phone number ID."""
        pass

    @abstractmethod
    async def send(self, message: OutboundMessage) -> SendResult:
        """Serialize and post one message.

        Raises:
            TransportError: If the HTTP exchange fails
            SendRejected: For any status other than 200 or 202
            DecodeError: If an accepted send returns an unexpected body
        """
        pass

    @abstractmethod
    async def send_text(self, recipient: str, body: str) -> SendResult:
        """Send a plain text message."""
        pass

    @abstractmethod
    async def send_audio(
        self, recipient: str, file_path: str | Path
    ) -> MediaSendReceipt:
        """Upload a local OGG file and send it as audio."""
        pass

    @abstractmethod
    async def send_image(
        self, recipient: str, file_path: str | Path
    ) -> MediaSendReceipt:
        """Upload a local JPEG file and send it as an image."""
        pass

    @abstractmethod
    async def send_location(
        self,
        recipient: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> SendResult:
        """Send a location pin."""
        pass

    @abstractmethod
    async def send_interactive_list(
        self,
        recipient: str,
        body_text: str,
        button_label: str,
        rows: Sequence[ListRow | dict],
    ) -> SendResult:
        """Send a single-section interactive list."""
        pass

    @abstractmethod
    async def send_interactive_buttons(
        self,
        recipient: str,
        kind: str,
        body_text: str,
        buttons: Sequence[ButtonItem | dict],
    ) -> SendResult:
        """Send an interactive button message (or plain text for kind "text")."""
        pass
