"""Perform account action use case.

Single entry point for every change made from the account settings page.
The submitted ``intent`` picks exactly one operation; every outcome,
including domain failures, comes back as an ``AccountActionResult``.
"""

from typing import assert_never

import logfire
from pydantic import BaseModel, ConfigDict, Field

from spoon.domain.error import AccountError, NotFoundError, ValidationError
from spoon.domain.model import User
from spoon.domain.service import OAuthAccountService, PhotoService, UserService
from spoon.domain.value import AccountIntent, ErrorKind, OAuthProvider, PhotoUpload


class AccountActionRequest(BaseModel):
    """Fields submitted from the account settings page."""

    principal: User  # Resolved by the session guard
    intent: str | None = None
    email: str | None = None
    username: str | None = None
    provider: str | None = None
    photo: PhotoUpload | None = None


class AccountActionResult(BaseModel):
    """Uniform result of an account action.

    Serialize with ``model_dump(by_alias=True, exclude_none=True)`` to get
    the client shape (``fieldErrors``, ``photoUrl``).
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    success: bool
    error: ErrorKind | None = None
    message: str | None = None
    field_errors: dict[str, str] | None = Field(default=None, alias="fieldErrors")
    photo_url: str | None = Field(default=None, alias="photoUrl")

    @classmethod
    def from_error(cls, error: AccountError) -> "AccountActionResult":
        """Build a failed result from a domain account error."""
        return cls(
            success=False,
            error=error.kind,
            message=error.message,
            field_errors=getattr(error, "field_errors", None) or None,
        )


class PerformAccountActionUseCase:
    """Use case dispatching an account settings form submission.

    Intents:
    - updateUserInfo: change email and username
    - uploadPhoto: replace the profile photo
    - removePhoto: go back to the default avatar
    - unlinkProvider: remove a linked Google/Apple account
    """

    def __init__(
        self,
        user_service: UserService,
        oauth_account_service: OAuthAccountService,
        photo_service: PhotoService,
    ) -> None:
        """Initialize perform account action use case.

        Args:
            user_service: User domain service
            oauth_account_service: OAuth account domain service
            photo_service: Photo domain service
        """
        self.user_service = user_service
        self.oauth_account_service = oauth_account_service
        self.photo_service = photo_service

    async def execute(self, request: AccountActionRequest) -> AccountActionResult:
        """Execute the action selected by the request intent.

        Unknown or missing intents are a client mistake, not a server
        fault, and return ``success=False`` without an error kind.

        Args:
            request: Submitted fields and the signed-in user

        Returns:
            Result of the one action that ran
        """
        user_id = request.principal.id
        try:
            intent = AccountIntent(request.intent)
        except ValueError:
            logfire.warn(
                "Unknown account intent", user_id=str(user_id), intent=request.intent
            )
            return AccountActionResult(success=False)

        with logfire.span(
            "perform_account_action", user_id=str(user_id), intent=intent.value
        ):
            try:
                result = await self._dispatch(intent, request)
            except AccountError as e:
                logfire.info(
                    "Account action failed",
                    user_id=str(user_id),
                    intent=intent.value,
                    error=e.kind.value,
                )
                return AccountActionResult.from_error(e)
            except NotFoundError:
                return AccountActionResult(
                    success=False,
                    error=ErrorKind.VALIDATION_ERROR,
                    message="User not found",
                )

            logfire.info(
                "Account action succeeded", user_id=str(user_id), intent=intent.value
            )
            return result

    async def _dispatch(
        self, intent: AccountIntent, request: AccountActionRequest
    ) -> AccountActionResult:
        user_id = request.principal.id

        if intent is AccountIntent.UPDATE_USER_INFO:
            await self.user_service.update_user_info(
                user_id, request.email or "", request.username or ""
            )
            return AccountActionResult(success=True)

        elif intent is AccountIntent.UPLOAD_PHOTO:
            user = await self.photo_service.upload(user_id, request.photo)
            return AccountActionResult(success=True, photo_url=user.photo_url)

        elif intent is AccountIntent.REMOVE_PHOTO:
            await self.photo_service.remove(user_id)
            return AccountActionResult(success=True)

        elif intent is AccountIntent.UNLINK_PROVIDER:
            provider = self._parse_provider(request.provider)
            await self.oauth_account_service.unlink(request.principal, provider)
            return AccountActionResult(success=True)

        else:
            assert_never(intent)

    @staticmethod
    def _parse_provider(value: str | None) -> OAuthProvider:
        try:
            return OAuthProvider(value)
        except ValueError:
            raise ValidationError(
                field_errors={"provider": "Unknown sign-in provider"}
            )
