"""
Media message models for WhatsApp messaging.

Media is always sent by reference: a file is uploaded first and the
returned ID is embedded in an audio or image message.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .basic_models import OutboundMessage, SendResult


class MediaType(Enum):
    """Media kinds that can be sent by reference."""

    AUDIO = "audio"
    IMAGE = "image"

    @property
    def default_mime_type(self) -> str:
        """MIME type declared when uploading a local file of this kind."""
        return {
            MediaType.AUDIO: "audio/ogg",
            MediaType.IMAGE: "image/jpeg",
        }[self]


class MediaReference(BaseModel):
    """Opaque handle returned by the upload endpoint: {"id": "<MEDIA_ID>"}."""

    id: str = Field(..., min_length=1)


class AudioMessage(OutboundMessage):
    """Audio message referencing uploaded media.

    Media-reference sends carry no ``recipient_type``.
    """

    type: Literal["audio"] = "audio"
    audio: MediaReference


class ImageMessage(OutboundMessage):
    """Image message referencing uploaded media."""

    type: Literal["image"] = "image"
    image: MediaReference


def build_media_message(
    recipient: str, media_type: MediaType, reference: MediaReference
) -> AudioMessage | ImageMessage:
    """Build the send variant for an uploaded media reference."""
    if media_type is MediaType.AUDIO:
        return AudioMessage(recipient=recipient, audio=reference)
    return ImageMessage(recipient=recipient, image=reference)


class MediaMetadata(BaseModel):
    """Media metadata returned by GET /MEDIA_ID.

    Based on WhatsApp Cloud API response:
    {
        "messaging_product": "whatsapp",
        "url": "<URL>",
        "mime_type": "<MIME_TYPE>",
        "sha256": "<HASH>",
        "file_size": "<FILE_SIZE>",
        "id": "<MEDIA_ID>"
    }

    Fields are decoded as-is; nothing is required so that an unexpected but
    well-formed envelope still decodes.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    mime_type: str | None = None
    sha256: str | None = None
    file_size: int | None = None
    url: str | None = None
    messaging_product: str | None = None


class MediaSendReceipt(BaseModel):
    """Result of an upload-then-send: the media ID plus the send result."""

    media_id: str
    result: SendResult
