"""Profile photo domain service."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

import logfire

from spoon.domain.error import (
    AccountError,
    FileTooLargeError,
    InvalidFileTypeError,
    NoFileError,
)
from spoon.domain.model import User
from spoon.domain.value import PhotoUpload, UserId

from .base import Service
from .user_service import UserService

MAX_PHOTO_BYTES = 5 * 1024 * 1024  # 5MB

# Accepted content types and the extension stored for each
PHOTO_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


@dataclass(frozen=True)
class StoredPhoto:
    """Photo bytes read back from storage."""

    content: bytes
    content_type: str


class PhotoStorage(ABC):
    """Object storage interface for profile photos.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def put(self, key: str, content: bytes, content_type: str) -> str:
        """Store a photo.

        Args:
            key: Object key, e.g. "profiles/<user id>/<timestamp>.jpg"
            content: File bytes
            content_type: MIME type

        Returns:
            URL the photo can be displayed from

        Raises:
            StorageError: If the backend fails
        """
        pass

    @abstractmethod
    async def get(self, key: str) -> StoredPhoto | None:
        """Read a stored photo.

        Args:
            key: Object key

        Returns:
            The photo, or None if no object has this key

        Raises:
            StorageError: If the backend fails
        """
        pass


def validate_photo(upload: PhotoUpload | None) -> str:
    """Check an uploaded photo: presence, then type, then size.

    The order matters: a large text file is reported as the wrong type.

    Args:
        upload: Submitted file, or None if the field was missing

    Returns:
        File extension to store the photo under

    Raises:
        NoFileError: If no file was submitted
        InvalidFileTypeError: If the content type is not an accepted image
        FileTooLargeError: If the file is over 5MB
    """
    if upload is None or upload.is_empty:
        raise NoFileError()

    extension = PHOTO_EXTENSIONS.get(upload.content_type.lower())
    if extension is None:
        raise InvalidFileTypeError()

    if upload.size > MAX_PHOTO_BYTES:
        raise FileTooLargeError()

    return extension


class PhotoService(Service):
    """Domain service for uploading and removing profile photos."""

    def __init__(self, photo_storage: PhotoStorage, user_service: UserService) -> None:
        """Initialize photo service.

        Args:
            photo_storage: Object storage for photo files
            user_service: User domain service
        """
        self.photo_storage = photo_storage
        self.user_service = user_service

    @staticmethod
    def photo_key(user_id: UserId, extension: str) -> str:
        """Build a unique storage key for a user's new photo."""
        return f"profiles/{user_id}/{int(time.time() * 1000)}.{extension}"

    async def upload(self, user_id: UserId, upload: PhotoUpload | None) -> User:
        """Validate, store and assign a new profile photo.

        Replaces any existing photo reference. Nothing is stored or changed
        if validation or storage fails.

        Args:
            user_id: User whose photo changes
            upload: Submitted file

        Returns:
            Updated user with the new photo URL

        Raises:
            NoFileError: If no file was submitted
            InvalidFileTypeError: If the file is not an accepted image
            FileTooLargeError: If the file is over 5MB
            StorageError: If storing the file fails
        """
        with logfire.span("photo_service.upload", user_id=str(user_id)):
            try:
                extension = validate_photo(upload)
            except AccountError as e:
                logfire.info(
                    "Photo rejected", user_id=str(user_id), reason=type(e).__name__
                )
                raise

            key = self.photo_key(user_id, extension)
            url = await self.photo_storage.put(key, upload.content, upload.content_type)
            logfire.info("Photo stored", user_id=str(user_id), key=key, size=upload.size)

            return await self.user_service.set_photo_url(user_id, url)

    async def remove(self, user_id: UserId) -> User:
        """Clear a user's photo so the default avatar is shown.

        Succeeds whether or not the user had a photo. The stored file is
        left in place.

        Args:
            user_id: User whose photo is removed

        Returns:
            Updated user
        """
        with logfire.span("photo_service.remove", user_id=str(user_id)):
            return await self.user_service.set_photo_url(user_id, None)

    async def fetch(self, key: str) -> StoredPhoto | None:
        """Read a stored photo by key for serving.

        Args:
            key: Object key

        Returns:
            The photo, or None if not found
        """
        with logfire.span("photo_service.fetch", key=key):
            photo = await self.photo_storage.get(key)
            if photo is None:
                logfire.info("Photo not found", key=key)
            return photo
