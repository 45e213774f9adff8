"""User domain service."""

import re
from datetime import datetime

import logfire

from spoon.domain.error import (
    EmailTakenError,
    NotFoundError,
    UsernameTakenError,
    ValidationError,
)
from spoon.domain.model import User
from spoon.domain.repository import UserRepository
from spoon.domain.value import UserId

from .base import Service

# Something@something.something, no whitespace
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_user_info(email: str, username: str) -> tuple[str, str]:
    """Check the shape of a submitted email and username.

    Every offending field is reported, not just the first one.

    Args:
        email: Submitted email
        username: Submitted username

    Returns:
        Tuple of (lowercased email, username)

    Raises:
        ValidationError: With a message per offending field
    """
    field_errors: dict[str, str] = {}

    if not email.strip():
        field_errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(email):
        field_errors["email"] = "Please enter a valid email address"

    if not username.strip():
        field_errors["username"] = "Username is required"

    if field_errors:
        raise ValidationError(field_errors=field_errors)

    return email.lower(), username


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def ensure_email_available(self, email: str, user_id: UserId) -> None:
        """Check that no other user holds this email, ignoring case.

        Args:
            email: Lowercased email
            user_id: The user who wants it

        Raises:
            EmailTakenError: If another user has it
        """
        existing = await self.user_repository.find_by_email(email)
        if existing is not None and existing.id != user_id:
            logfire.info(
                "Email already taken",
                user_id=str(user_id),
                owner_id=str(existing.id),
            )
            raise EmailTakenError()

    async def ensure_username_available(self, username: str, user_id: UserId) -> None:
        """Check that no other user holds this exact username.

        Args:
            username: Username as submitted
            user_id: The user who wants it

        Raises:
            UsernameTakenError: If another user has it
        """
        existing = await self.user_repository.find_by_username(username)
        if existing is not None and existing.id != user_id:
            logfire.info(
                "Username already taken",
                user_id=str(user_id),
                owner_id=str(existing.id),
            )
            raise UsernameTakenError()

    async def update_user_info(self, user_id: UserId, email: str, username: str) -> User:
        """Change a user's email and username.

        Steps:
        1. Validate both fields (all problems reported together)
        2. Lowercase the email
        3. Check email, then username, against other users
        4. Save both fields in one write

        Unchanged values are skipped by the availability checks, so
        resubmitting the current email and username always succeeds.
        The checks only give friendly errors; the database unique indexes
        still decide races (PersistenceConflictError from save).

        Args:
            user_id: User making the change
            email: Submitted email
            username: Submitted username

        Returns:
            Updated user

        Raises:
            ValidationError: If a field is missing or malformed, or the user
                no longer exists
            EmailTakenError: If the email belongs to another user
            UsernameTakenError: If the username belongs to another user
            PersistenceConflictError: If the database rejects the write
        """
        with logfire.span("user_service.update_user_info", user_id=str(user_id)):
            normalized_email, username = validate_user_info(email, username)

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise ValidationError(message="User not found")

            if normalized_email != user.email.lower():
                await self.ensure_email_available(normalized_email, user_id)

            if username != user.username:
                await self.ensure_username_available(username, user_id)

            updated = user.model_copy(
                update={
                    "email": normalized_email,
                    "username": username,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("User info updated", user_id=str(user_id))
            return saved

    async def set_photo_url(self, user_id: UserId, photo_url: str | None) -> User:
        """Replace or clear a user's photo reference.

        Args:
            user_id: User to change
            photo_url: New photo URL, or None for the default avatar

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.set_photo_url", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            updated = user.model_copy(
                update={"photo_url": photo_url, "updated_at": datetime.now()}
            )
            saved = await self.user_repository.save(updated)
            logfire.info(
                "Photo reference updated",
                user_id=str(user_id),
                has_photo=photo_url is not None,
            )
            return saved
