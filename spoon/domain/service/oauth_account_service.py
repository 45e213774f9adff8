"""OAuth account domain service."""

from dataclasses import dataclass

import logfire

from spoon.domain.error import LastAuthMethodError
from spoon.domain.model import OAuthAccount, User
from spoon.domain.repository import OAuthAccountRepository
from spoon.domain.value import OAuthProvider, UserId

from .base import Service


@dataclass
class ProviderLinkState:
    """Whether one provider is linked to a user, for the settings page."""

    provider: OAuthProvider
    linked: bool
    provider_username: str | None = None


class OAuthAccountService(Service):
    """Domain service for linked OAuth accounts.

    Linking happens in the provider callback flow; this service reports
    link state and guards unlinking.
    """

    def __init__(self, oauth_account_repository: OAuthAccountRepository) -> None:
        """Initialize OAuth account service.

        Args:
            oauth_account_repository: OAuth account repository
        """
        self.oauth_account_repository = oauth_account_repository

    async def get_accounts(self, user_id: UserId) -> list[OAuthAccount]:
        """Get all OAuth accounts linked to a user.

        Args:
            user_id: User ID

        Returns:
            Linked accounts (may be empty)
        """
        with logfire.span("oauth_account_service.get_accounts", user_id=str(user_id)):
            accounts = await self.oauth_account_repository.find_all_by_user_id(user_id)
            logfire.info(
                "OAuth accounts retrieved", user_id=str(user_id), count=len(accounts)
            )
            return accounts

    @staticmethod
    def link_states(linked: list[OAuthAccount]) -> list[ProviderLinkState]:
        """Report every supported provider as linked or not linked.

        Args:
            linked: The user's linked accounts

        Returns:
            One entry per provider, in OAuthProvider order
        """
        accounts = {account.provider: account for account in linked}
        return [
            ProviderLinkState(
                provider=provider,
                linked=provider in accounts,
                provider_username=(
                    accounts[provider].provider_username
                    if provider in accounts
                    else None
                ),
            )
            for provider in OAuthProvider
        ]

    async def unlink(self, user: User, provider: OAuthProvider) -> bool:
        """Remove a linked provider from a user.

        The user must keep at least one way to sign in: a password or
        another linked provider. Unlinking a provider that is not linked
        is a no-op.

        Args:
            user: Signed-in user
            provider: Provider to unlink

        Returns:
            True if an account was removed, False if none was linked

        Raises:
            LastAuthMethodError: If this is the user's only sign-in method
        """
        with logfire.span(
            "oauth_account_service.unlink",
            user_id=str(user.id),
            provider=provider.value,
        ):
            accounts = await self.oauth_account_repository.find_all_by_user_id(user.id)

            if not any(account.provider == provider for account in accounts):
                logfire.info(
                    "Provider not linked, nothing to unlink",
                    user_id=str(user.id),
                    provider=provider.value,
                )
                return False

            remaining = [a for a in accounts if a.provider != provider]
            if not user.has_password and not remaining:
                logfire.warn(
                    "Refusing to unlink last sign-in method",
                    user_id=str(user.id),
                    provider=provider.value,
                )
                raise LastAuthMethodError()

            await self.oauth_account_repository.delete(user.id, provider)
            logfire.info(
                "OAuth account unlinked",
                user_id=str(user.id),
                provider=provider.value,
                remaining=len(remaining),
            )
            return True
