"""OAuth account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from spoon.domain.model.oauth_account import OAuthAccount
from spoon.domain.value import OAuthProvider, UserId


class OAuthAccountRepository(ABC):
    """Repository for OAuthAccount entity.

    Manages the links between users and their federated identities.
    """

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> list[OAuthAccount]:
        """Get all OAuth accounts linked to a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            List of accounts ordered by link time (may be empty)
        """
        pass

    @abstractmethod
    async def find_by_user_and_provider(
        self, user_id: UserId, provider: OAuthProvider
    ) -> Optional[OAuthAccount]:
        """Get the user's account for one provider.

        Args:
            user_id: The user's unique identifier
            provider: The OAuth provider

        Returns:
            The account if linked, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: OAuthAccount) -> OAuthAccount:
        """Save an OAuth account link.

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            PersistenceConflictError: If the provider account is already linked
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, provider: OAuthProvider) -> None:
        """Delete the user's account for one provider.

        Args:
            user_id: The user's unique identifier
            provider: The OAuth provider
        """
        pass
