"""Profile photo storage adapter."""

from .client import (
    MockPhotoStorage,
    S3PhotoStorage,
    UnconfiguredPhotoStorage,
    public_photo_url,
)

__all__ = [
    "MockPhotoStorage",
    "S3PhotoStorage",
    "UnconfiguredPhotoStorage",
    "public_photo_url",
]
