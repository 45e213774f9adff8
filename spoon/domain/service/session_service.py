"""Session guard domain service.

Resolves the signed-in user for a request. A missing or unusable session
is returned as an ``AuthRedirect`` value rather than raised, so callers
handle it alongside their other outcomes; only the HTTP layer turns it
into an actual redirect.
"""

from dataclasses import dataclass
from urllib.parse import urlencode
from uuid import UUID

import logfire

from spoon.config import AuthSettings
from spoon.domain.model import User
from spoon.domain.repository import UserRepository
from spoon.domain.value import UserId
from spoon.util.jwt import JWTError

from .base import Service
from .jwt_service import JWTService


@dataclass(frozen=True)
class AuthRedirect:
    """Request has no valid session; send the client to ``location``."""

    location: str
    reason: str


class SessionService(Service):
    """Domain service resolving the authenticated principal."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_repository: UserRepository,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize session service.

        Args:
            jwt_service: Session token service
            user_repository: User repository
            auth_settings: Authentication settings (login path)
        """
        self.jwt_service = jwt_service
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    def login_redirect(self, return_to: str, reason: str) -> AuthRedirect:
        """Build a redirect to the login page that returns to ``return_to``.

        Args:
            return_to: Path to come back to after signing in
            reason: Why the session was rejected (logged, not shown)

        Returns:
            AuthRedirect to the login page
        """
        query = urlencode({"redirectTo": return_to})
        return AuthRedirect(
            location=f"{self.auth_settings.login_path}?{query}", reason=reason
        )

    async def resolve_principal(
        self, token: str | None, return_to: str
    ) -> User | AuthRedirect:
        """Resolve the user behind a session token.

        Args:
            token: Session token from the request cookie, if any
            return_to: Path of the current request, used for the redirect

        Returns:
            The signed-in user, or an AuthRedirect when there is none
        """
        with logfire.span("session_service.resolve_principal", return_to=return_to):
            if not token:
                logfire.info("No session token")
                return self.login_redirect(return_to, "missing_token")

            try:
                payload = self.jwt_service.verify_token(token)
                user_id = UserId(UUID(payload.user_id))
            except (JWTError, ValueError):
                return self.login_redirect(return_to, "invalid_token")

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Session refers to unknown user", user_id=str(user_id))
                return self.login_redirect(return_to, "unknown_user")

            return user
