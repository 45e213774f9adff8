"""Domain layer DI providers."""

from dishka import Scope, provide

from spoon.config import AuthSettings
from spoon.domain.repository import OAuthAccountRepository, UserRepository
from spoon.domain.service import (
    JWTService,
    OAuthAccountService,
    PhotoService,
    PhotoStorage,
    SessionService,
    UserService,
)
from spoon.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide session token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_session_service(
        self,
        jwt_service: JWTService,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> SessionService:
        """Provide session guard domain service."""
        return SessionService(
            jwt_service=jwt_service,
            user_repository=user_repository,
            auth_settings=auth_settings,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_oauth_account_service(
        self, oauth_account_repository: OAuthAccountRepository
    ) -> OAuthAccountService:
        """Provide OAuth account domain service."""
        return OAuthAccountService(oauth_account_repository=oauth_account_repository)

    @provide
    def get_photo_service(
        self, photo_storage: PhotoStorage, user_service: UserService
    ) -> PhotoService:
        """Provide photo domain service."""
        return PhotoService(photo_storage=photo_storage, user_service=user_service)
