"""
WhatsApp Cloud API HTTP client.

Key Design Decisions:
- phone_number_id identifies the sender (it IS the tenant)
- Pure dependency injection: the aiohttp session is owned by the caller
- Returns raw status + body; status interpretation belongs to the handlers
- Connection-level failures are raised as TransportError
"""

import asyncio
from dataclasses import dataclass
from typing import Any

import aiohttp

from wasend.core.exceptions import TransportError
from wasend.core.logging.logger import ContextLogger, get_logger


class WhatsAppUrlBuilder:
    """Builds URLs for WhatsApp Cloud API endpoints."""

    def __init__(self, base_url: str, api_version: str, phone_number_id: str):
        """Initialize URL builder with configuration.

        Args:
            base_url: Graph API base URL
            api_version: Graph API version (e.g. "v21.0")
            phone_number_id: WhatsApp Business phone number ID
        """
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self.phone_number_id = phone_number_id

    def get_messages_url(self) -> str:
        """Build URL for sending messages."""
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}/messages"

    def get_media_url(self, media_id: str | None = None) -> str:
        """Build URL for media operations.

        Args:
            media_id: Optional media ID for metadata lookups

        Returns:
            Upload URL when no media_id is given, metadata URL otherwise
        """
        if media_id is not None:
            return f"{self.base_url}/{self.api_version}/{media_id}"
        return f"{self.base_url}/{self.api_version}/{self.phone_number_id}/media"


class WhatsAppFormDataBuilder:
    """Builds form data for WhatsApp multipart requests."""

    @staticmethod
    def build_form_data(
        payload: dict[str, Any], files: dict[str, Any]
    ) -> aiohttp.FormData:
        """Build FormData for multipart/form-data requests.

        File handles are read completely here, so the caller may close them
        as soon as this returns.

        Args:
            payload: Text fields to include in the form
            files: Files in format {field_name: (filename, file_handle_or_bytes, content_type)}

        Returns:
            aiohttp.FormData object ready for request

        Raises:
            ValueError: If file format is invalid
        """
        form = aiohttp.FormData()

        # Text fields first; the media endpoint reads them before the file
        for key, value in payload.items():
            form.add_field(key, str(value))

        for field_name, file_info in files.items():
            if not (isinstance(file_info, tuple) and len(file_info) == 3):
                raise ValueError(
                    f"Invalid file format for field '{field_name}'. "
                    f"Expected tuple (filename, file_handle, content_type)"
                )

            filename, file_handle, content_type = file_info
            if hasattr(file_handle, "read"):
                file_content = file_handle.read()
            else:
                file_content = file_handle

            form.add_field(
                field_name,
                file_content,
                filename=filename,
                content_type=content_type,
            )

        return form


@dataclass(frozen=True)
class RawResponse:
    """Fully read HTTP response."""

    status: int
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class WhatsAppClient:
    """
    WhatsApp Cloud API client with injected session.

    Holds only immutable configuration plus the shared aiohttp session,
    which makes one instance safe to use from concurrent tasks.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        access_token: str,
        phone_number_id: str,
        base_url: str,
        api_version: str,
        logger: ContextLogger | None = None,
    ):
        """Initialize WhatsApp client with dependency injection.

        Args:
            session: aiohttp session owned by the caller
            access_token: Bearer token for the Graph API
            phone_number_id: WhatsApp Business phone number ID
            base_url: Graph API base URL
            api_version: Graph API version
            logger: Optional pre-configured logger
        """
        self.session = session
        self.access_token = access_token
        self.phone_number_id = phone_number_id
        self.api_version = api_version
        self.logger = logger or get_logger(__name__, tenant_id=phone_number_id)

        self.url_builder = WhatsAppUrlBuilder(base_url, api_version, phone_number_id)
        self.form_builder = WhatsAppFormDataBuilder()

        self.logger.debug(
            f"WhatsApp client initialized, api_version: {api_version}, "
            f"token: {self._masked_token()}"
        )

    @property
    def tenant_id(self) -> str:
        """Sending phone number ID."""
        return self.phone_number_id

    def _masked_token(self) -> str:
        return f"{self.access_token[:6]}..." if self.access_token else "<empty>"

    def _get_headers(self, include_content_type: bool = True) -> dict[str, str]:
        """Get HTTP headers for WhatsApp API requests.

        Args:
            include_content_type: Whether to include a JSON Content-Type header

        Returns:
            Dictionary of HTTP headers
        """
        headers = {"Authorization": f"Bearer {self.access_token}"}
        if include_content_type:
            headers["Content-Type"] = "application/json"
        return headers

    async def _request(self, method: str, url: str, **kwargs: Any) -> RawResponse:
        """Perform one request and read the whole body."""
        try:
            async with self.session.request(method, url, **kwargs) as response:
                body = await response.read()
                raw = RawResponse(status=response.status, body=body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            self.logger.error(f"{method} {url} failed: {err!r}")
            raise TransportError(f"{method} {url} failed: {err!r}", url) from err

        self.logger.debug(f"{method} {url} -> {raw.status}")
        if raw.status == 401:
            self.logger.error(
                f"CRITICAL: WhatsApp access token rejected (401) for {url}, "
                f"token starts with {self._masked_token()}"
            )
        return raw

    async def post_json(self, payload: dict[str, Any]) -> RawResponse:
        """POST a JSON payload to the messages endpoint."""
        url = self.url_builder.get_messages_url()
        self.logger.debug(f"Payload: {payload}")
        return await self._request(
            "POST", url, headers=self._get_headers(), json=payload
        )

    async def post_multipart(self, url: str, form: aiohttp.FormData) -> RawResponse:
        """POST a multipart form; aiohttp sets the boundary Content-Type."""
        return await self._request(
            "POST", url, headers=self._get_headers(include_content_type=False), data=form
        )

    async def get(self, url: str) -> RawResponse:
        """Authenticated GET against an absolute URL."""
        return await self._request(
            "GET", url, headers=self._get_headers(include_content_type=False)
        )
