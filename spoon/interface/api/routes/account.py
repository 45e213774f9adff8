"""Account settings routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.datastructures import FormData, UploadFile

from spoon.application.usecase.account import (
    GetAccountSettingsUseCase,
    PerformAccountActionUseCase,
)
from spoon.application.usecase.account.get_account_settings import (
    GetAccountSettingsRequest,
    GetAccountSettingsResponse,
)
from spoon.application.usecase.account.perform_account_action import (
    AccountActionRequest,
    AccountActionResult,
)
from spoon.config import AuthSettings
from spoon.domain.model import User
from spoon.domain.service import AuthRedirect, SessionService
from spoon.domain.service.photo_service import MAX_PHOTO_BYTES
from spoon.domain.value import AccountIntent, PhotoUpload
from spoon.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["account"], route_class=DishkaRoute)


async def _resolve_principal(
    request: Request, session_service: SessionService, auth_settings: AuthSettings
) -> User | RedirectResponse:
    token = request.cookies.get(auth_settings.session_cookie_name)
    principal = await session_service.resolve_principal(token, request.url.path)
    if isinstance(principal, AuthRedirect):
        logger.info(
            f"Redirecting unauthenticated request: path={request.url.path}, "
            f"reason={principal.reason}"
        )
        return RedirectResponse(
            principal.location, status_code=status.HTTP_302_FOUND
        )
    return principal


def _form_text(form: FormData, name: str) -> str | None:
    """Return a text field, or None when it is missing or holds a file."""
    value = form.get(name)
    return value if isinstance(value, str) else None


async def _read_photo(photo: UploadFile | str | None) -> PhotoUpload | None:
    """Read an uploaded file into a PhotoUpload.

    A plain text value in the photo field counts as no file. At most one
    byte past the size limit is read, which is enough for validation to
    reject an oversized file.
    """
    if not isinstance(photo, UploadFile):
        return None
    content = await photo.read(MAX_PHOTO_BYTES + 1)
    return PhotoUpload(
        filename=photo.filename or "",
        content_type=photo.content_type or "application/octet-stream",
        content=content,
    )


def _result_response(result: AccountActionResult) -> JSONResponse:
    return JSONResponse(result.model_dump(by_alias=True, exclude_none=True))


@router.get("/account/settings", response_model=GetAccountSettingsResponse)
async def get_account_settings(
    request: Request,
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
    get_account_settings_use_case: FromDishka[GetAccountSettingsUseCase],
) -> GetAccountSettingsResponse | RedirectResponse:
    """Get the signed-in user's account settings.

    Redirects to the login page when there is no valid session.

    Example:
        GET /account/settings
        Cookie: auth_token=...

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "email": "alice@example.com",
            "username": "alice",
            "has_password": false,
            "photo_url": "https://res.cloudinary.com/...",
            "has_custom_photo": false,
            "oauth_accounts": [...],
            "providers": [
                {"provider": "google", "label": "Google", "linked": true, ...},
                {"provider": "apple", "label": "Apple", "linked": false, ...}
            ]
        }
    """
    principal = await _resolve_principal(request, session_service, auth_settings)
    if isinstance(principal, RedirectResponse):
        return principal

    return await get_account_settings_use_case.execute(
        GetAccountSettingsRequest(principal=principal)
    )


@router.post("/account/settings", response_model=None)
async def perform_account_action(
    request: Request,
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
    perform_account_action_use_case: FromDishka[PerformAccountActionUseCase],
) -> JSONResponse | RedirectResponse:
    """Apply one change from the account settings form.

    The ``intent`` field selects the action: updateUserInfo, uploadPhoto,
    removePhoto or unlinkProvider. Failures are reported in the body with
    a 200 status so the form can show them. The body is only parsed once
    the session is valid.

    Example:
        POST /account/settings
        Content-Type: multipart/form-data
        intent=updateUserInfo&email=alice@example.com&username=alice

        Response:
        {"success": false, "error": "email_taken",
         "message": "This email is already in use by another account"}
    """
    principal = await _resolve_principal(request, session_service, auth_settings)
    if isinstance(principal, RedirectResponse):
        return principal

    async with request.form() as form:
        action_request = AccountActionRequest(
            principal=principal,
            intent=_form_text(form, "intent"),
            email=_form_text(form, "email"),
            username=_form_text(form, "username"),
            provider=_form_text(form, "provider"),
            photo=await _read_photo(form.get("photo")),
        )

    result = await perform_account_action_use_case.execute(action_request)
    return _result_response(result)


@router.post("/auth/{provider}/unlink", response_model=None)
async def unlink_provider(
    provider: str,
    request: Request,
    session_service: FromDishka[SessionService],
    auth_settings: FromDishka[AuthSettings],
    perform_account_action_use_case: FromDishka[PerformAccountActionUseCase],
) -> JSONResponse | RedirectResponse:
    """Unlink a Google or Apple account from the signed-in user.

    Same result shape as the settings form with intent=unlinkProvider.
    """
    principal = await _resolve_principal(request, session_service, auth_settings)
    if isinstance(principal, RedirectResponse):
        return principal

    result = await perform_account_action_use_case.execute(
        AccountActionRequest(
            principal=principal,
            intent=AccountIntent.UNLINK_PROVIDER.value,
            provider=provider,
        )
    )
    return _result_response(result)
