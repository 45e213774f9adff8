"""Get account settings use case."""

from datetime import datetime

from pydantic import BaseModel

from spoon.domain.model import User
from spoon.domain.service import OAuthAccountService
from spoon.domain.value import OAuthProvider


class GetAccountSettingsRequest(BaseModel):
    """Get account settings request."""

    principal: User  # Resolved by the session guard


class LinkedAccountInfo(BaseModel):
    """A linked OAuth account."""

    provider: OAuthProvider
    provider_username: str
    linked_at: datetime


class ProviderStatus(BaseModel):
    """Link state of one supported provider."""

    provider: OAuthProvider
    label: str
    linked: bool
    provider_username: str | None
    can_unlink: bool


class GetAccountSettingsResponse(BaseModel):
    """Get account settings response."""

    user_id: str
    email: str
    username: str
    has_password: bool
    photo_url: str  # Default avatar when the user has no photo
    has_custom_photo: bool
    oauth_accounts: list[LinkedAccountInfo]
    providers: list[ProviderStatus]


class GetAccountSettingsUseCase:
    """Use case for loading the signed-in user's account settings."""

    def __init__(self, oauth_account_service: OAuthAccountService) -> None:
        """Initialize get account settings use case.

        Args:
            oauth_account_service: OAuth account domain service
        """
        self.oauth_account_service = oauth_account_service

    async def execute(
        self, request: GetAccountSettingsRequest
    ) -> GetAccountSettingsResponse:
        """Execute get account settings flow.

        Steps:
        1. Load the user's linked OAuth accounts
        2. Work out per-provider link state and whether unlink is allowed
        3. Resolve the photo URL (default avatar when unset)

        Args:
            request: Request with the signed-in user

        Returns:
            Account settings for display
        """
        user = request.principal
        accounts = await self.oauth_account_service.get_accounts(user.id)
        states = self.oauth_account_service.link_states(accounts)

        # Mirrors the rule enforced by OAuthAccountService.unlink
        can_unlink = user.has_password or len(accounts) > 1

        return GetAccountSettingsResponse(
            user_id=str(user.id),
            email=user.email,
            username=user.username,
            has_password=user.has_password,
            photo_url=user.display_photo_url,
            has_custom_photo=user.photo_url is not None,
            oauth_accounts=[
                LinkedAccountInfo(
                    provider=account.provider,
                    provider_username=account.provider_username,
                    linked_at=account.created_at,
                )
                for account in accounts
            ],
            providers=[
                ProviderStatus(
                    provider=state.provider,
                    label=state.provider.label,
                    linked=state.linked,
                    provider_username=state.provider_username,
                    can_unlink=state.linked and can_unlink,
                )
                for state in states
            ],
        )
