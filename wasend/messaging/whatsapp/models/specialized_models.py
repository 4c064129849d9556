"""
Location message models for WhatsApp messaging.
"""

from typing import Literal

from pydantic import BaseModel, field_validator

from .basic_models import IndividualMessage


class LocationContent(BaseModel):
    """Coordinates with optional display name and address.

    Empty strings are treated as absent so they are left out of the
    serialized payload instead of being sent as "".
    """

    latitude: float
    longitude: float
    name: str | None = None
    address: str | None = None

    @field_validator("name", "address")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        return v or None


class LocationMessage(IndividualMessage):
    """Static location pin message."""

    type: Literal["location"] = "location"
    location: LocationContent

    @classmethod
    def create(
        cls,
        recipient: str,
        latitude: float,
        longitude: float,
        name: str | None = None,
        address: str | None = None,
    ) -> "LocationMessage":
        return cls(
            recipient=recipient,
            location=LocationContent(
                latitude=latitude, longitude=longitude, name=name, address=address
            ),
        )
