"""Test configuration and fixtures."""

from uuid import uuid4

from spoon.domain.model import OAuthAccount, User
from spoon.domain.value import OAuthProvider, PhotoUpload, UserId


def make_user(
    email: str = "alice@example.com",
    username: str = "alice",
    hashed_password: str | None = None,
    photo_url: str | None = None,
) -> User:
    """Helper to build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        email=email,
        username=username,
        hashed_password=hashed_password,
        photo_url=photo_url,
    )


def make_oauth_account(
    user: User, provider: OAuthProvider, provider_username: str | None = None
) -> OAuthAccount:
    """Helper to link a provider identity to a user."""
    return OAuthAccount(
        provider=provider,
        provider_user_id=f"{provider.value}-{user.id}",
        provider_username=provider_username or user.email,
        user_id=user.id,
    )


def make_photo(
    size: int = 1024,
    content_type: str = "image/jpeg",
    filename: str = "photo.jpg",
) -> PhotoUpload:
    """Helper to build an uploaded photo of ``size`` bytes."""
    return PhotoUpload(filename=filename, content_type=content_type, content=b"\xff" * size)
