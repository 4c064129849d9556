"""
Interactive message models for WhatsApp messaging.

Two interactive variants share the ``interactive`` slot of a message:

1. List messages - a button that opens sectioned rows
2. Button messages - exactly one action: reply buttons, a call-to-action
   URL, or a location request

Each variant is its own OutboundMessage subclass so the slot is never an
untyped "either" payload.
"""

from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel

from .basic_models import IndividualMessage

LOCATION_REQUEST_KIND = "location_request_message"
TEXT_KIND = "text"


class InteractiveBody(BaseModel):
    text: str


# List messages


class ListRow(BaseModel):
    """Row within a list section."""

    id: str
    title: str
    description: str | None = None


class ListSection(BaseModel):
    """Section within a list message; untitled sections omit ``title``."""

    title: str | None = None
    rows: list[ListRow]


class ListAction(BaseModel):
    button: str
    sections: list[ListSection]


class ListInteractive(BaseModel):
    type: Literal["list"] = "list"
    body: InteractiveBody
    action: ListAction


class InteractiveListMessage(IndividualMessage):
    """Interactive list message."""

    type: Literal["interactive"] = "interactive"
    interactive: ListInteractive

    @classmethod
    def create(
        cls,
        recipient: str,
        body_text: str,
        button_label: str,
        sections: list[ListSection],
    ) -> "InteractiveListMessage":
        return cls(
            recipient=recipient,
            interactive=ListInteractive(
                body=InteractiveBody(text=body_text),
                action=ListAction(button=button_label, sections=sections),
            ),
        )


# Button messages


class ButtonItem(BaseModel):
    """Caller-facing button description for send_interactive_buttons.

    A non-empty ``link`` turns the button into a call-to-action URL
    (``text`` becomes the display text); otherwise it is a reply button.
    """

    id: str = ""
    text: str
    link: str | None = None
    type: str = "reply"


class UrlParameters(BaseModel):
    display_text: str
    url: str


class UrlAction(BaseModel):
    """Call-to-action URL action."""

    name: Literal["cta_url"] = "cta_url"
    parameters: UrlParameters


class ReplyButtonTitle(BaseModel):
    id: str
    title: str


class ReplyButton(BaseModel):
    type: str = "reply"
    reply: ReplyButtonTitle


class ReplyButtonsAction(BaseModel):
    """Quick reply buttons action."""

    buttons: list[ReplyButton]


class LocationRequestAction(BaseModel):
    """Asks the recipient to share their location."""

    name: Literal["send_location"] = "send_location"


ButtonsAction = UrlAction | ReplyButtonsAction | LocationRequestAction


class ButtonsInteractive(BaseModel):
    # Caller-chosen kind, sent verbatim even when it disagrees with the action
    type: str
    body: InteractiveBody
    action: ButtonsAction


class InteractiveButtonsMessage(IndividualMessage):
    """Interactive button message."""

    type: Literal["interactive"] = "interactive"
    interactive: ButtonsInteractive

    @classmethod
    def create(
        cls, recipient: str, kind: str, body_text: str, action: ButtonsAction
    ) -> "InteractiveButtonsMessage":
        return cls(
            recipient=recipient,
            interactive=ButtonsInteractive(
                type=kind, body=InteractiveBody(text=body_text), action=action
            ),
        )


def resolve_button_action(kind: str, buttons: Iterable[ButtonItem]) -> ButtonsAction:
    """Resolve the single action of a button message.

    - ``location_request_message`` yields a location request; buttons are
      not consulted.
    - Otherwise every button with a link selects a URL action. The last one
      wins and replaces any reply buttons collected so far or later.
    - Buttons without a link become reply buttons, in order.
    """
    if kind == LOCATION_REQUEST_KIND:
        return LocationRequestAction()

    url_action: UrlAction | None = None
    replies: list[ReplyButton] = []
    for button in buttons:
        if button.link:
            url_action = UrlAction(
                parameters=UrlParameters(display_text=button.text, url=button.link)
            )
        else:
            replies.append(
                ReplyButton(
                    type=button.type,
                    reply=ReplyButtonTitle(id=button.id, title=button.text),
                )
            )

    if url_action is not None:
        return url_action
    return ReplyButtonsAction(buttons=replies)
