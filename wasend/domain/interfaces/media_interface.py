"""
Media handling interface.

Defines the contract for the three media endpoints used by the client:
- POST /PHONE_NUMBER_ID/media (upload)
- GET /MEDIA_ID (metadata with temporary download URL)
- GET /MEDIA_URL (download)
"""

from abc import ABC, abstractmethod
from pathlib import Path

from wasend.messaging.whatsapp.models.media_models import MediaMetadata, MediaReference


class IMediaHandler(ABC):
    """Media upload, resolution and download."""

    @property
    @abstractmethod
    def tenant_id(self) -> str:
        """Sending phone number ID."""
        pass

    @abstractmethod
    async def upload_media(
        self, file_path: str | Path, mime_type: str
    ) -> MediaReference:
        """Upload a local file and return its media reference.

        Args:
            file_path: Path to a readable local file
            mime_type: MIME type declared to the platform (not sniffed)

        Raises:
            MediaFileError: If the file cannot be opened or read
            TransportError: If the HTTP exchange fails
            UploadRejected: If the platform answers with a non-2xx status
            DecodeError: If the response is not {"id": str}
        """
        pass

    @abstractmethod
    async def upload_media_from_bytes(
        self, file_data: bytes, mime_type: str, filename: str
    ) -> MediaReference:
        """Upload in-memory content and return its media reference."""
        pass

    @abstractmethod
    async def get_media_info(self, media_id: str) -> MediaMetadata:
        """Resolve a media ID to its metadata and temporary download URL.

        Raises:
            TransportError: If the HTTP exchange fails
            DecodeError: If the body is not a JSON object
        """
        pass

    @abstractmethod
    async def download_media(self, url: str, check_status: bool = False) -> bytes:
        """Download the raw bytes behind a media URL.

        Raises:
            TransportError: If the HTTP exchange fails
            DownloadRejected: Only with check_status=True, for non-2xx status
        """
        pass
