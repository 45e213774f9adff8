"""In-memory repository implementations for testing."""

from .oauth_account import InMemoryOAuthAccountRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryOAuthAccountRepository",
    "InMemoryUserRepository",
]
