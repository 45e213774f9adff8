"""Profile photo storage clients.

``S3PhotoStorage`` talks to any S3-compatible object store (AWS S3,
Cloudflare R2, MinIO) through boto3. ``MockPhotoStorage`` keeps photos in
memory for tests and local development.
"""

import asyncio

import boto3
import logfire
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from spoon.config import StorageSettings
from spoon.domain.error import StorageError
from spoon.domain.service.photo_service import PhotoStorage, StoredPhoto
from spoon.util.error import ConfigurationError


def public_photo_url(base_path: str, key: str) -> str:
    """URL a stored photo is served from (see the photos route)."""
    return f"{base_path.rstrip('/')}/{key}"


class S3PhotoStorage(PhotoStorage):
    """Photo storage backed by an S3-compatible bucket.

    boto3 is synchronous, so each call runs in a worker thread. Timeouts
    are set on the client so a stuck backend fails instead of hanging the
    request.
    """

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize S3 photo storage.

        Args:
            settings: Storage settings (bucket, endpoint, credentials)
        """
        if not settings.bucket:
            raise ConfigurationError("STORAGE__BUCKET is required for S3 storage")

        self.bucket = settings.bucket
        self.public_base_path = settings.public_base_path
        self._client = boto3.client(
            "s3",
            endpoint_url=settings.endpoint_url,
            region_name=settings.region,
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
            config=Config(
                connect_timeout=settings.connect_timeout_seconds,
                read_timeout=settings.read_timeout_seconds,
                retries={"max_attempts": 2, "mode": "standard"},
            ),
        )

    async def put(self, key: str, content: bytes, content_type: str) -> str:
        """Upload a photo to the bucket.

        Args:
            key: Object key
            content: File bytes
            content_type: MIME type

        Returns:
            URL the photo is served from

        Raises:
            StorageError: If the upload fails
        """
        with logfire.span("s3_photo_storage.put", bucket=self.bucket, key=key):
            try:
                await asyncio.to_thread(
                    self._client.put_object,
                    Bucket=self.bucket,
                    Key=key,
                    Body=content,
                    ContentType=content_type,
                )
            except (BotoCoreError, ClientError) as e:
                logfire.error("Photo upload failed", key=key, error=str(e))
                raise StorageError() from e

            return public_photo_url(self.public_base_path, key)

    async def get(self, key: str) -> StoredPhoto | None:
        """Download a photo from the bucket.

        Args:
            key: Object key

        Returns:
            The photo, or None if the key does not exist

        Raises:
            StorageError: If the download fails
        """
        with logfire.span("s3_photo_storage.get", bucket=self.bucket, key=key):
            try:
                response = await asyncio.to_thread(
                    self._client.get_object, Bucket=self.bucket, Key=key
                )
                content = await asyncio.to_thread(response["Body"].read)
            except ClientError as e:
                if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                    return None
                logfire.error("Photo download failed", key=key, error=str(e))
                raise StorageError("Failed to load photo") from e
            except BotoCoreError as e:
                logfire.error("Photo download failed", key=key, error=str(e))
                raise StorageError("Failed to load photo") from e

            return StoredPhoto(
                content=content,
                content_type=response.get("ContentType") or "image/jpeg",
            )


class MockPhotoStorage(PhotoStorage):
    """In-memory photo storage for testing.

    Set ``fail`` to make every call raise StorageError.
    """

    def __init__(self, public_base_path: str = "/photos") -> None:
        """Initialize mock storage with an empty store."""
        self.public_base_path = public_base_path
        self.objects: dict[str, StoredPhoto] = {}
        self.fail = False

    async def put(self, key: str, content: bytes, content_type: str) -> str:
        """Keep the photo in memory and return its URL."""
        if self.fail:
            raise StorageError()
        self.objects[key] = StoredPhoto(content=content, content_type=content_type)
        return public_photo_url(self.public_base_path, key)

    async def get(self, key: str) -> StoredPhoto | None:
        """Return a photo kept in memory."""
        if self.fail:
            raise StorageError("Failed to load photo")
        return self.objects.get(key)


class UnconfiguredPhotoStorage(PhotoStorage):
    """Stand-in used when no bucket is configured.

    Uploads fail with StorageError and the photos route answers 503.
    """

    async def put(self, key: str, content: bytes, content_type: str) -> str:
        """Refuse to store the photo."""
        logfire.warn("Photo storage not configured", key=key)
        raise StorageError()

    async def get(self, key: str) -> StoredPhoto | None:
        """Refuse to read the photo."""
        raise StorageError("Photo storage not available")
