"""Unit tests for PhotoService."""

import re
from uuid import uuid4

import pytest

from spoon.domain.error import (
    FileTooLargeError,
    InvalidFileTypeError,
    NoFileError,
    StorageError,
)
from spoon.domain.repository import UserRepository
from spoon.domain.service import PhotoService, PhotoStorage
from spoon.domain.service.photo_service import MAX_PHOTO_BYTES, validate_photo
from spoon.domain.value import PhotoUpload, UserId
from tests.conftest import make_photo, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

MIB = 1024 * 1024


class TestValidatePhoto:
    """Tests for upload validation order: presence, type, size."""

    def test_missing_file(self):
        """No file at all is NoFile."""
        with pytest.raises(NoFileError):
            validate_photo(None)

    def test_empty_file_field(self):
        """A submitted field with no chosen file is NoFile."""
        empty = PhotoUpload(
            filename="", content_type="application/octet-stream", content=b""
        )

        with pytest.raises(NoFileError):
            validate_photo(empty)

    def test_named_zero_byte_file(self):
        """A chosen file with no content is NoFile, even with an image type."""
        with pytest.raises(NoFileError):
            validate_photo(make_photo(size=0))

    @pytest.mark.parametrize(
        "content_type,extension",
        [
            ("image/jpeg", "jpg"),
            ("image/png", "png"),
            ("image/gif", "gif"),
            ("image/webp", "webp"),
        ],
    )
    def test_accepted_types(self, content_type, extension):
        """Every accepted image type maps to its extension."""
        assert validate_photo(make_photo(content_type=content_type)) == extension

    def test_text_file_rejected(self):
        """Non-image types are rejected."""
        with pytest.raises(InvalidFileTypeError):
            validate_photo(make_photo(content_type="text/plain", filename="a.txt"))

    def test_type_checked_before_size(self):
        """A large file of the wrong type is reported as the wrong type."""
        with pytest.raises(InvalidFileTypeError):
            validate_photo(make_photo(size=6 * MIB, content_type="text/plain"))

    def test_too_large(self):
        """A 6 MiB image is over the limit."""
        with pytest.raises(FileTooLargeError) as exc_info:
            validate_photo(make_photo(size=6 * MIB))

        assert "5MB" in exc_info.value.message

    def test_exactly_at_limit(self):
        """The limit itself is allowed."""
        assert validate_photo(make_photo(size=MAX_PHOTO_BYTES)) == "jpg"


class TestUpload:
    """Tests for upload method."""

    @pytest.mark.asyncio
    async def test_stores_and_assigns_photo(self, unit_env):
        """A valid 4 MiB image should be stored and referenced."""
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act
        updated = await photo_service.upload(
            user.id, make_photo(size=4 * MIB, content_type="image/png")
        )

        # Assert
        assert re.fullmatch(
            rf"/photos/profiles/{user.id}/\d+\.png", updated.photo_url
        )
        key = updated.photo_url.removeprefix("/photos/")
        assert storage.objects[key].content_type == "image/png"
        assert len(storage.objects[key].content) == 4 * MIB
        assert (await user_repo.find_by_id(user.id)).photo_url == updated.photo_url

    @pytest.mark.asyncio
    async def test_replaces_existing_photo(self, unit_env):
        """A new upload replaces the current reference."""
        photo_service = await unit_env.get(PhotoService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(photo_url="/photos/profiles/old.jpg"))

        updated = await photo_service.upload(user.id, make_photo())

        assert updated.photo_url != "/photos/profiles/old.jpg"
        assert updated.photo_url.endswith(".jpg")

    @pytest.mark.asyncio
    async def test_rejected_upload_stores_nothing(self, unit_env):
        """Invalid uploads leave storage and the user untouched."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(photo_url="/photos/profiles/old.jpg"))

        with pytest.raises(FileTooLargeError):
            await photo_service.upload(user.id, make_photo(size=6 * MIB))

        assert storage.objects == {}
        saved = await user_repo.find_by_id(user.id)
        assert saved.photo_url == "/photos/profiles/old.jpg"

    @pytest.mark.asyncio
    async def test_zero_byte_file_keeps_existing_photo(self, unit_env):
        """An empty file is never stored over a working photo."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(photo_url="/photos/profiles/old.jpg"))

        with pytest.raises(NoFileError):
            await photo_service.upload(user.id, make_photo(size=0, filename="x.jpg"))

        assert storage.objects == {}
        saved = await user_repo.find_by_id(user.id)
        assert saved.photo_url == "/photos/profiles/old.jpg"

    @pytest.mark.asyncio
    async def test_storage_failure_keeps_reference(self, unit_env):
        """A storage failure leaves the old photo in place."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(photo_url="/photos/profiles/old.jpg"))
        storage.fail = True

        with pytest.raises(StorageError):
            await photo_service.upload(user.id, make_photo())

        saved = await user_repo.find_by_id(user.id)
        assert saved.photo_url == "/photos/profiles/old.jpg"

    def test_photo_key_layout(self):
        """Keys are grouped per user and end with the extension."""
        user_id = UserId(uuid4())

        key = PhotoService.photo_key(user_id, "webp")

        assert re.fullmatch(rf"profiles/{user_id}/\d+\.webp", key)


class TestRemove:
    """Tests for remove method."""

    @pytest.mark.asyncio
    async def test_clears_custom_photo(self, unit_env):
        """Removing a custom photo clears the reference."""
        photo_service = await unit_env.get(PhotoService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(photo_url="/photos/profiles/old.jpg"))

        updated = await photo_service.remove(user.id)

        assert updated.photo_url is None
        assert (await user_repo.find_by_id(user.id)).photo_url is None

    @pytest.mark.asyncio
    async def test_no_photo_is_fine(self, unit_env):
        """Removing when there is no photo still succeeds."""
        photo_service = await unit_env.get(PhotoService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        updated = await photo_service.remove(user.id)

        assert updated.photo_url is None


class TestFetch:
    """Tests for fetch method."""

    @pytest.mark.asyncio
    async def test_returns_stored_photo(self, unit_env):
        """Stored photos can be read back by key."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        await storage.put("profiles/u/1.gif", b"GIF89a", "image/gif")

        photo = await photo_service.fetch("profiles/u/1.gif")

        assert photo.content == b"GIF89a"
        assert photo.content_type == "image/gif"

    @pytest.mark.asyncio
    async def test_missing_photo(self, unit_env):
        """Unknown keys return None."""
        photo_service = await unit_env.get(PhotoService)

        assert await photo_service.fetch("profiles/u/missing.jpg") is None
