"""WhatsApp models package."""

from .basic_models import (
    IndividualMessage,
    OutboundMessage,
    SendContact,
    SendResult,
    SentMessage,
    TextContent,
    TextMessage,
)
from .interactive_models import (
    ButtonItem,
    ButtonsAction,
    InteractiveButtonsMessage,
    InteractiveListMessage,
    ListRow,
    ListSection,
    LocationRequestAction,
    ReplyButton,
    ReplyButtonsAction,
    UrlAction,
    resolve_button_action,
)
from .media_models import (
    AudioMessage,
    ImageMessage,
    MediaMetadata,
    MediaReference,
    MediaSendReceipt,
    MediaType,
    build_media_message,
)
from .specialized_models import LocationContent, LocationMessage

__all__ = [
    "OutboundMessage",
    "IndividualMessage",
    "TextContent",
    "TextMessage",
    "SendContact",
    "SentMessage",
    "SendResult",
    "ButtonItem",
    "ButtonsAction",
    "InteractiveButtonsMessage",
    "InteractiveListMessage",
    "ListRow",
    "ListSection",
    "LocationRequestAction",
    "ReplyButton",
    "ReplyButtonsAction",
    "UrlAction",
    "resolve_button_action",
    "AudioMessage",
    "ImageMessage",
    "MediaMetadata",
    "MediaReference",
    "MediaSendReceipt",
    "MediaType",
    "build_media_message",
    "LocationContent",
    "LocationMessage",
]
