"""Photo storage infrastructure providers."""

from dishka import Scope, provide
import logfire

from spoon.adapter.storage import S3PhotoStorage, UnconfiguredPhotoStorage
from spoon.config import StorageSettings
from spoon.domain.service import PhotoStorage
from spoon.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Photo storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using an S3-compatible bucket."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_photo_storage(self, storage_settings: StorageSettings) -> PhotoStorage:
        """Provide photo storage.

        Falls back to a storage that rejects every call when no bucket
        is configured.
        """
        if not storage_settings.bucket:
            logfire.warn("No photo bucket configured, photo uploads disabled")
            return UnconfiguredPhotoStorage()
        return S3PhotoStorage(storage_settings)
