"""
Basic message models for WhatsApp messaging.

The OutboundMessage base shared by every send variant, the text variant and
the platform's acknowledgment envelope (SendResult).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

MESSAGING_PRODUCT = "whatsapp"
RECIPIENT_TYPE_INDIVIDUAL = "individual"


class OutboundMessage(BaseModel):
    """Base schema for everything posted to the messages endpoint.

    Subclasses add a ``type`` literal and exactly one variant payload field.
    Serialization goes through :meth:`to_payload`, which applies the wire
    aliases and drops unset optional fields.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    messaging_product: Literal["whatsapp"] = MESSAGING_PRODUCT
    recipient: str = Field(
        ...,
        min_length=1,
        serialization_alias="to",
        description="Recipient phone number or WhatsApp ID",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the exact JSON body expected by the Cloud API."""
        return self.model_dump(by_alias=True, exclude_none=True)


class IndividualMessage(OutboundMessage):
    """Outbound message addressed with ``recipient_type: individual``."""

    recipient_type: Literal["individual"] = RECIPIENT_TYPE_INDIVIDUAL


class TextContent(BaseModel):
    body: str


class TextMessage(IndividualMessage):
    """Plain text message."""

    type: Literal["text"] = "text"
    text: TextContent

    @classmethod
    def create(cls, recipient: str, body: str) -> "TextMessage":
        return cls(recipient=recipient, text=TextContent(body=body))


class SendContact(BaseModel):
    """Contact entry in a send acknowledgment."""

    input: str
    wa_id: str

    @property
    def resolved_id(self) -> str:
        """WhatsApp ID the platform resolved the input address to."""
        return self.wa_id


class SentMessage(BaseModel):
    id: str


class SendResult(BaseModel):
    """Platform acknowledgment of an accepted send.

    Based on WhatsApp Cloud API response:
    {
        "messaging_product": "whatsapp",
        "contacts": [{"input": "<PHONE>", "wa_id": "<WA_ID>"}],
        "messages": [{"id": "<WAMID>"}]
    }
    """

    messaging_product: str
    contacts: list[SendContact] = Field(default_factory=list)
    messages: list[SentMessage] = Field(default_factory=list)

    @property
    def message_ids(self) -> list[str]:
        return [message.id for message in self.messages]

    @property
    def message_id(self) -> str | None:
        """First message ID, which is the only one for single sends."""
        return self.messages[0].id if self.messages else None
