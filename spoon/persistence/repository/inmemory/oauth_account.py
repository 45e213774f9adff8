"""In-memory OAuth account repository for testing."""

from typing import Optional

from spoon.domain.error import PersistenceConflictError
from spoon.domain.model.oauth_account import OAuthAccount
from spoon.domain.repository.oauth_account import OAuthAccountRepository
from spoon.domain.value import OAuthProvider, UserId


class InMemoryOAuthAccountRepository(OAuthAccountRepository):
    """In-memory implementation of OAuthAccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: list[OAuthAccount] = []

    async def find_all_by_user_id(self, user_id: UserId) -> list[OAuthAccount]:
        """Find all accounts for a user."""
        matches = [a for a in self._accounts if a.user_id == user_id]
        matches.sort(key=lambda a: a.created_at)
        return matches

    async def find_by_user_and_provider(
        self, user_id: UserId, provider: OAuthProvider
    ) -> Optional[OAuthAccount]:
        """Find a user's account for one provider."""
        for account in self._accounts:
            if account.user_id == user_id and account.provider == provider:
                return account
        return None

    async def save(self, account: OAuthAccount) -> OAuthAccount:
        """Insert an account link."""
        for existing in self._accounts:
            same_link = (
                existing.user_id == account.user_id
                and existing.provider == account.provider
            )
            same_identity = (
                existing.provider == account.provider
                and existing.provider_user_id == account.provider_user_id
            )
            if same_link or same_identity:
                raise PersistenceConflictError()

        self._accounts.append(account)
        return account

    async def delete(self, user_id: UserId, provider: OAuthProvider) -> None:
        """Delete a user's account for one provider."""
        self._accounts = [
            a
            for a in self._accounts
            if not (a.user_id == user_id and a.provider == provider)
        ]
