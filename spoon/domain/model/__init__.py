"""Domain model entities for Spoonjoy accounts."""

from spoon.domain.model.oauth_account import OAuthAccount
from spoon.domain.model.user import DEFAULT_AVATAR_URL, User

__all__ = [
    "DEFAULT_AVATAR_URL",
    "OAuthAccount",
    "User",
]
