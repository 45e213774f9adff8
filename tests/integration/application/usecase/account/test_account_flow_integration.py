"""Integration tests for the account settings flow.

Drives the session guard, the action dispatcher and the settings reader
through one container, the way a browser session would.
"""

import pytest

from spoon.application.usecase.account import (
    GetAccountSettingsUseCase,
    PerformAccountActionUseCase,
)
from spoon.application.usecase.account.get_account_settings import (
    GetAccountSettingsRequest,
)
from spoon.application.usecase.account.perform_account_action import (
    AccountActionRequest,
)
from spoon.domain.model import DEFAULT_AVATAR_URL, User
from spoon.domain.repository import OAuthAccountRepository, UserRepository
from spoon.domain.service import JWTService, SessionService
from spoon.domain.value import OAuthProvider
from tests.conftest import make_oauth_account, make_photo, make_user
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture()


async def _sign_in(env, user: User) -> User:
    jwt_service = await env.get(JWTService)
    session_service = await env.get(SessionService)
    principal = await session_service.resolve_principal(
        jwt_service.create_token(str(user.id)), "/account/settings"
    )
    assert isinstance(principal, User)
    return principal


class TestAccountFlowIntegration:
    """Settings reflect every successful action."""

    @pytest.mark.asyncio
    async def test_profile_changes_show_in_settings(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        perform = await integration_env.get(PerformAccountActionUseCase)
        get_settings = await integration_env.get(GetAccountSettingsUseCase)
        user = await user_repo.save(make_user(hashed_password="hash"))
        principal = await _sign_in(integration_env, user)

        # Act
        update = await perform.execute(
            AccountActionRequest(
                principal=principal,
                intent="updateUserInfo",
                email="Chef.Alice@Example.com",
                username="chef_alice",
            )
        )
        upload = await perform.execute(
            AccountActionRequest(
                principal=principal, intent="uploadPhoto", photo=make_photo()
            )
        )
        principal = await _sign_in(integration_env, user)
        settings = await get_settings.execute(
            GetAccountSettingsRequest(principal=principal)
        )

        # Assert
        assert update.success and upload.success
        assert settings.email == "chef.alice@example.com"
        assert settings.username == "chef_alice"
        assert settings.photo_url == upload.photo_url
        assert settings.has_custom_photo is True

    @pytest.mark.asyncio
    async def test_removing_photo_restores_default_avatar(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        perform = await integration_env.get(PerformAccountActionUseCase)
        get_settings = await integration_env.get(GetAccountSettingsUseCase)
        user = await user_repo.save(make_user())
        principal = await _sign_in(integration_env, user)

        await perform.execute(
            AccountActionRequest(
                principal=principal, intent="uploadPhoto", photo=make_photo()
            )
        )
        await perform.execute(
            AccountActionRequest(principal=principal, intent="removePhoto")
        )
        principal = await _sign_in(integration_env, user)
        settings = await get_settings.execute(
            GetAccountSettingsRequest(principal=principal)
        )

        assert settings.photo_url == DEFAULT_AVATAR_URL
        assert settings.has_custom_photo is False

    @pytest.mark.asyncio
    async def test_unlink_until_last_method(self, integration_env):
        """Two providers, no password: the first unlink works, the second does not."""
        user_repo = await integration_env.get(UserRepository)
        oauth_repo = await integration_env.get(OAuthAccountRepository)
        perform = await integration_env.get(PerformAccountActionUseCase)
        get_settings = await integration_env.get(GetAccountSettingsUseCase)
        user = await user_repo.save(make_user())
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.GOOGLE))
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.APPLE))
        principal = await _sign_in(integration_env, user)

        first = await perform.execute(
            AccountActionRequest(
                principal=principal, intent="unlinkProvider", provider="google"
            )
        )
        second = await perform.execute(
            AccountActionRequest(
                principal=principal, intent="unlinkProvider", provider="apple"
            )
        )
        settings = await get_settings.execute(
            GetAccountSettingsRequest(principal=principal)
        )

        assert first.success is True
        assert second.success is False
        assert second.error == "last_auth_method"
        assert [p.linked for p in settings.providers] == [False, True]
        assert all(not p.can_unlink for p in settings.providers)
