"""In-memory user repository for testing."""

from typing import Optional

from spoon.domain.error import PersistenceConflictError
from spoon.domain.model.user import User
from spoon.domain.repository.user import UserRepository
from spoon.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same uniqueness rules as the database indexes.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by exact username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        for other in self._users.values():
            if other.id == user.id:
                continue
            if (
                other.email.lower() == user.email.lower()
                or other.username == user.username
            ):
                raise PersistenceConflictError()

        self._users[user.id] = user
        return user
