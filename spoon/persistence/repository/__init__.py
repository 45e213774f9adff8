"""PostgreSQL repository implementations."""

from spoon.persistence.repository.oauth_account import PostgresOAuthAccountRepository
from spoon.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresOAuthAccountRepository",
    "PostgresUserRepository",
]
