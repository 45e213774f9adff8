"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of with SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from spoon.domain.model import OAuthAccount, User
from spoon.domain.value import OAuthProvider, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        username=row["username"],
        hashed_password=row.get("hashed_password"),
        photo_url=row.get("photo_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_oauth_account(row: Dict[str, Any]) -> OAuthAccount:
    """Convert database row to OAuthAccount domain model.

    Args:
        row: Database row as dict

    Returns:
        OAuthAccount domain model
    """
    return OAuthAccount(
        provider=OAuthProvider(row["provider"]),
        provider_user_id=row["provider_user_id"],
        provider_username=row["provider_username"],
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def oauth_account_to_dict(account: OAuthAccount) -> Dict[str, Any]:
    """Convert OAuthAccount domain model to database dict.

    Args:
        account: OAuthAccount domain model

    Returns:
        Dict suitable for database insertion
    """
    data = account.model_dump()
    data["provider"] = account.provider.value
    return data
