"""WhatsApp utility modules."""

from .error_helpers import decode_response, parse_json_or_none, raise_api_error

__all__ = ["decode_response", "parse_json_or_none", "raise_api_error"]
