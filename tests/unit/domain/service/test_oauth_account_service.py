"""Unit tests for OAuthAccountService."""

import pytest

from spoon.domain.error import LastAuthMethodError
from spoon.domain.repository import OAuthAccountRepository, UserRepository
from spoon.domain.service import OAuthAccountService
from spoon.domain.value import OAuthProvider
from tests.conftest import make_oauth_account, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLinkStates:
    """Tests for link_states."""

    def test_every_provider_reported(self):
        """Each provider should appear once, linked or not."""
        user = make_user()
        google = make_oauth_account(
            user, OAuthProvider.GOOGLE, provider_username="alice@gmail.com"
        )

        states = OAuthAccountService.link_states([google])

        assert [s.provider for s in states] == [
            OAuthProvider.GOOGLE,
            OAuthProvider.APPLE,
        ]
        assert states[0].linked is True
        assert states[0].provider_username == "alice@gmail.com"
        assert states[1].linked is False
        assert states[1].provider_username is None


class TestUnlink:
    """Tests for unlink method."""

    @pytest.mark.asyncio
    async def test_only_provider_without_password_is_refused(self, unit_env):
        """The last sign-in method must not be removed."""
        # Arrange
        service = await unit_env.get(OAuthAccountService)
        user_repo = await unit_env.get(UserRepository)
        oauth_repo = await unit_env.get(OAuthAccountRepository)
        user = await user_repo.save(make_user())
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.GOOGLE))

        # Act & Assert
        with pytest.raises(LastAuthMethodError):
            await service.unlink(user, OAuthProvider.GOOGLE)

        remaining = await oauth_repo.find_all_by_user_id(user.id)
        assert [a.provider for a in remaining] == [OAuthProvider.GOOGLE]

    @pytest.mark.asyncio
    async def test_one_of_two_providers(self, unit_env):
        """Unlinking one of two providers leaves exactly one."""
        # Arrange
        service = await unit_env.get(OAuthAccountService)
        user_repo = await unit_env.get(UserRepository)
        oauth_repo = await unit_env.get(OAuthAccountRepository)
        user = await user_repo.save(make_user())
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.GOOGLE))
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.APPLE))

        # Act
        removed = await service.unlink(user, OAuthProvider.APPLE)

        # Assert
        assert removed is True
        remaining = await oauth_repo.find_all_by_user_id(user.id)
        assert [a.provider for a in remaining] == [OAuthProvider.GOOGLE]

    @pytest.mark.asyncio
    async def test_only_provider_with_password(self, unit_env):
        """A password is enough to keep the account reachable."""
        service = await unit_env.get(OAuthAccountService)
        user_repo = await unit_env.get(UserRepository)
        oauth_repo = await unit_env.get(OAuthAccountRepository)
        user = await user_repo.save(make_user(hashed_password="$2b$12$hash"))
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.GOOGLE))

        removed = await service.unlink(user, OAuthProvider.GOOGLE)

        assert removed is True
        assert await oauth_repo.find_all_by_user_id(user.id) == []

    @pytest.mark.asyncio
    async def test_unlink_twice_is_a_no_op(self, unit_env):
        """A repeated unlink succeeds without changing anything."""
        service = await unit_env.get(OAuthAccountService)
        user_repo = await unit_env.get(UserRepository)
        oauth_repo = await unit_env.get(OAuthAccountRepository)
        user = await user_repo.save(make_user())
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.GOOGLE))
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.APPLE))

        first = await service.unlink(user, OAuthProvider.APPLE)
        second = await service.unlink(user, OAuthProvider.APPLE)

        assert first is True
        assert second is False
        remaining = await oauth_repo.find_all_by_user_id(user.id)
        assert len(remaining) == 1

    @pytest.mark.asyncio
    async def test_unlinked_provider_without_password_is_a_no_op(self, unit_env):
        """Unlinking a provider that was never linked does not trip the guard."""
        service = await unit_env.get(OAuthAccountService)
        user_repo = await unit_env.get(UserRepository)
        oauth_repo = await unit_env.get(OAuthAccountRepository)
        user = await user_repo.save(make_user())
        await oauth_repo.save(make_oauth_account(user, OAuthProvider.GOOGLE))

        removed = await service.unlink(user, OAuthProvider.APPLE)

        assert removed is False
        assert len(await oauth_repo.find_all_by_user_id(user.id)) == 1

    @pytest.mark.asyncio
    async def test_other_users_accounts_untouched(self, unit_env):
        """Unlinking only affects the given user."""
        service = await unit_env.get(OAuthAccountService)
        user_repo = await unit_env.get(UserRepository)
        oauth_repo = await unit_env.get(OAuthAccountRepository)
        alice = await user_repo.save(make_user(hashed_password="hash"))
        bob = await user_repo.save(make_user(email="bob@example.com", username="bob"))
        await oauth_repo.save(make_oauth_account(alice, OAuthProvider.GOOGLE))
        await oauth_repo.save(make_oauth_account(bob, OAuthProvider.GOOGLE))

        await service.unlink(alice, OAuthProvider.GOOGLE)

        assert len(await oauth_repo.find_all_by_user_id(bob.id)) == 1
