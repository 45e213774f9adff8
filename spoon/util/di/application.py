"""Application layer DI providers."""

from dishka import Scope, provide

from spoon.application.usecase.account import (
    GetAccountSettingsUseCase,
    PerformAccountActionUseCase,
)
from spoon.domain.service import OAuthAccountService, PhotoService, UserService
from spoon.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_account_settings_use_case(
        self, oauth_account_service: OAuthAccountService
    ) -> GetAccountSettingsUseCase:
        """Provide get account settings use case."""
        return GetAccountSettingsUseCase(oauth_account_service=oauth_account_service)

    @provide(scope=Scope.REQUEST)
    def get_perform_account_action_use_case(
        self,
        user_service: UserService,
        oauth_account_service: OAuthAccountService,
        photo_service: PhotoService,
    ) -> PerformAccountActionUseCase:
        """Provide perform account action use case."""
        return PerformAccountActionUseCase(
            user_service=user_service,
            oauth_account_service=oauth_account_service,
            photo_service=photo_service,
        )
