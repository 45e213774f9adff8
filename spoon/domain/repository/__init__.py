"""Repository interfaces for Spoonjoy accounts.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from spoon.domain.repository.oauth_account import OAuthAccountRepository
from spoon.domain.repository.user import UserRepository

__all__ = [
    "OAuthAccountRepository",
    "UserRepository",
]
