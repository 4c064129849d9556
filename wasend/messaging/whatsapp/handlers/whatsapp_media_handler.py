"""
WhatsApp implementation of the IMediaHandler interface.

Covers the Cloud API media endpoints:
- POST /PHONE_NUMBER_ID/media (upload)
- GET /MEDIA_ID (metadata with temporary download URL)
- GET /MEDIA_URL (download)
"""

from pathlib import Path

from wasend.core.exceptions import DecodeError, DownloadRejected, MediaFileError, UploadRejected
from wasend.core.logging.logger import get_logger
from wasend.domain.interfaces.media_interface import IMediaHandler
from wasend.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wasend.messaging.whatsapp.models.basic_models import MESSAGING_PRODUCT
from wasend.messaging.whatsapp.models.media_models import MediaMetadata, MediaReference
from wasend.messaging.whatsapp.utils.error_helpers import decode_response, raise_api_error


class WhatsAppMediaHandler(IMediaHandler):
    """
    WhatsApp implementation of the media handler interface.

    Holds no state besides the injected client, so one instance can serve
    concurrent uploads and downloads.
    """

    def __init__(self, client: WhatsAppClient):
        """Initialize WhatsApp media handler.

        Args:
            client: Configured WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__, tenant_id=client.tenant_id)

    @property
    def tenant_id(self) -> str:
        return self.client.tenant_id

    async def upload_media(
        self, file_path: str | Path, mime_type: str
    ) -> MediaReference:
        """
        Upload a local media file to WhatsApp servers.

        The file is opened read-only and closed as soon as the multipart
        body has been built, before the request is sent.
        """
        media_path = Path(file_path)
        try:
            with open(media_path, "rb") as file_handle:
                files = {"file": (media_path.name, file_handle, mime_type)}
                form = self.client.form_builder.build_form_data(
                    self._upload_fields(mime_type), files
                )
        except OSError as e:
            self.logger.error(f"Cannot read media file {media_path}: {e}")
            raise MediaFileError(
                f"Cannot read media file {media_path}: {e}", str(media_path)
            ) from e

        return await self._upload(form, media_path.name)

    async def upload_media_from_bytes(
        self, file_data: bytes, mime_type: str, filename: str
    ) -> MediaReference:
        """Upload media from bytes data."""
        files = {"file": (filename, file_data, mime_type)}
        form = self.client.form_builder.build_form_data(
            self._upload_fields(mime_type), files
        )
        return await self._upload(form, filename)

    @staticmethod
    def _upload_fields(mime_type: str) -> dict[str, str]:
        return {"messaging_product": MESSAGING_PRODUCT, "type": mime_type}

    async def _upload(self, form, filename: str) -> MediaReference:
        upload_url = self.client.url_builder.get_media_url()
        self.logger.debug(f"Uploading media file {filename} to {upload_url}")

        raw = await self.client.post_multipart(upload_url, form)
        if not raw.ok:
            raise_api_error(UploadRejected, raw, f"upload {filename}", self.logger)

        reference = decode_response(raw, MediaReference, "upload", self.logger)
        self.logger.info(f"Successfully uploaded {filename} (ID: {reference.id})")
        return reference

    async def get_media_info(self, media_id: str) -> MediaMetadata:
        """
        Retrieve media metadata using its media ID.

        The status code is not checked: whatever JSON object comes back is
        decoded. A non-2xx status is only logged.
        """
        url = self.client.url_builder.get_media_url(media_id)
        self.logger.debug(f"Fetching media info for ID: {media_id}")

        raw = await self.client.get(url)
        if not raw.ok:
            self.logger.warning(
                f"Media info for {media_id} returned {raw.status}: {raw.text}"
            )

        metadata = decode_response(raw, MediaMetadata, "media info", self.logger)
        self.logger.debug(f"Retrieved media info for ID: {media_id}")
        return metadata

    async def download_media(self, url: str, check_status: bool = False) -> bytes:
        """
        Download the bytes behind a media URL, buffered entirely in memory.

        Args:
            url: URL returned by get_media_info
            check_status: Raise DownloadRejected for non-2xx instead of
                returning the error body as data
        """
        raw = await self.client.get(url)
        if not raw.ok:
            if check_status:
                raise_api_error(DownloadRejected, raw, "download media", self.logger)
            self.logger.warning(
                f"Media download returned {raw.status}; returning body unchecked"
            )

        self.logger.debug(f"Downloaded {len(raw.body)} bytes from {url}")
        return raw.body

    async def download_media_by_id(
        self, media_id: str, check_status: bool = False
    ) -> bytes:
        """Resolve a media ID and download its content.

        Raises:
            DecodeError: If the metadata carries no download URL
        """
        metadata = await self.get_media_info(media_id)
        if not metadata.url:
            self.logger.error(f"No download URL in media info for {media_id}")
            raise DecodeError(
                f"No download URL in media info for {media_id}",
                metadata.model_dump_json(),
            )
        return await self.download_media(metadata.url, check_status=check_status)
