"""
WhatsApp error handling utilities.

Centralizes response decoding and error logging for the messaging and
media handlers so every raise site reports the same context.
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from wasend.core.exceptions import DecodeError, WhatsAppAPIError
from wasend.core.logging.logger import ContextLogger
from wasend.messaging.whatsapp.client.whatsapp_client import RawResponse

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_or_none(body: str) -> Any | None:
    """Parse a response body as JSON, returning None when it is not JSON."""
    try:
        return json.loads(body)
    except ValueError:
        return None


def decode_response(
    raw: RawResponse,
    model: type[ModelT],
    operation: str,
    logger: ContextLogger,
) -> ModelT:
    """Decode a response body into ``model``.

    Raises:
        DecodeError: If the body is not JSON or does not match the model
    """
    try:
        return model.model_validate_json(raw.body)
    except ValidationError as e:
        logger.error(f"Could not decode {operation} response: {raw.text}")
        raise DecodeError(
            f"Unexpected {operation} response body: {e.error_count()} validation error(s)",
            raw.text,
        ) from e


def raise_api_error(
    error_cls: type[WhatsAppAPIError],
    raw: RawResponse,
    operation: str,
    logger: ContextLogger,
) -> None:
    """Log and raise a non-success response as ``error_cls``.

    The raised error keeps the raw body and, when the body is JSON, its
    parsed form for callers that want the Graph ``error`` object.
    """
    error = error_cls(raw.status, raw.text, parse_json_or_none(raw.text))

    if error.is_authentication_error:
        logger.error(f"CRITICAL: WhatsApp Authentication Failed - Cannot {operation}!")

    logger.error(f"Failed to {operation}: {raw.status} - {raw.text}")
    raise error
