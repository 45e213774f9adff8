"""OAuthAccount repository implementation using PostgreSQL."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from spoon.domain.error import PersistenceConflictError
from spoon.domain.model import OAuthAccount
from spoon.domain.repository import OAuthAccountRepository
from spoon.domain.value import OAuthProvider, UserId
from spoon.persistence.mappers import oauth_account_to_dict, row_to_oauth_account
from spoon.persistence.tables import oauth_accounts_table


class PostgresOAuthAccountRepository(OAuthAccountRepository):
    """PostgreSQL implementation of OAuthAccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all_by_user_id(self, user_id: UserId) -> list[OAuthAccount]:
        """Find all OAuth accounts for a user.

        Args:
            user_id: User ID to find accounts for

        Returns:
            List of accounts ordered by link time (may be empty)
        """
        stmt = (
            select(oauth_accounts_table)
            .where(oauth_accounts_table.c.user_id == user_id)
            .order_by(oauth_accounts_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_oauth_account(dict(row)) for row in rows]

    async def find_by_user_and_provider(
        self, user_id: UserId, provider: OAuthProvider
    ) -> Optional[OAuthAccount]:
        """Get the user's account for one provider.

        Args:
            user_id: User ID
            provider: OAuth provider

        Returns:
            OAuthAccount if linked, None otherwise
        """
        stmt = select(oauth_accounts_table).where(
            oauth_accounts_table.c.user_id == user_id,
            oauth_accounts_table.c.provider == provider.value,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_oauth_account(dict(row))

    async def save(self, account: OAuthAccount) -> OAuthAccount:
        """Insert an OAuth account link.

        Args:
            account: OAuthAccount to save

        Returns:
            Saved OAuthAccount

        Raises:
            PersistenceConflictError: If the link already exists
        """
        stmt = oauth_accounts_table.insert().values(**oauth_account_to_dict(account))

        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            logfire.warn(
                "OAuth account write rejected by unique constraint",
                user_id=str(account.user_id),
                provider=account.provider.value,
            )
            raise PersistenceConflictError() from e

        return account

    async def delete(self, user_id: UserId, provider: OAuthProvider) -> None:
        """Delete the user's account for one provider.

        Args:
            user_id: User ID
            provider: OAuth provider
        """
        stmt = oauth_accounts_table.delete().where(
            oauth_accounts_table.c.user_id == user_id,
            oauth_accounts_table.c.provider == provider.value,
        )
        await self.session.execute(stmt)
        await self.session.flush()
