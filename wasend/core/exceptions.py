"""
Exception hierarchy for WhatsApp Cloud API operations.

Every failure of an upload, send, resolve or download surfaces as a
WhatsAppError subclass carrying enough context (HTTP status and raw body
where one exists) to diagnose it. Nothing here is retried.
"""

from typing import Any


class WhatsAppError(Exception):
    """Base class for all wasend errors."""


class MediaFileError(WhatsAppError, OSError):
    """A local media file could not be opened or read."""

    def __init__(self, message: str, file_path: str):
        super().__init__(message)
        self.file_path = file_path


class TransportError(WhatsAppError):
    """The HTTP exchange itself failed (connection, TLS, timeout)."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class DecodeError(WhatsAppError):
    """Response body is not valid JSON of the expected shape."""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body


class WhatsAppAPIError(WhatsAppError):
    """The platform answered with a non-success HTTP status.

    Attributes:
        status: HTTP status code
        body: Raw response body as text
        payload: Parsed JSON body when the body is valid JSON, else None
    """

    operation = "request"

    def __init__(self, status: int, body: str, payload: Any | None = None):
        super().__init__(f"{self.operation} failed with status {status}: {body}")
        self.status = status
        self.body = body
        self.payload = payload

    @property
    def is_authentication_error(self) -> bool:
        """True when the access token was rejected."""
        return self.status == 401

    @property
    def error_code(self) -> int | None:
        """Graph API ``error.code`` from the body, if present."""
        if isinstance(self.payload, dict):
            error = self.payload.get("error")
            if isinstance(error, dict):
                return error.get("code")
        return None


class SendRejected(WhatsAppAPIError):
    """The messages endpoint rejected a send."""

    operation = "send"


class UploadRejected(WhatsAppAPIError):
    """The media endpoint rejected an upload."""

    operation = "upload"


class DownloadRejected(WhatsAppAPIError):
    """A media download returned a non-success status (opt-in check)."""

    operation = "download"
