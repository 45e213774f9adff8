"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .oauth_account_service import OAuthAccountService, ProviderLinkState
from .photo_service import PhotoService, PhotoStorage, StoredPhoto
from .session_service import AuthRedirect, SessionService
from .user_service import UserService

__all__ = [
    "AuthRedirect",
    "JWTService",
    "OAuthAccountService",
    "PhotoService",
    "PhotoStorage",
    "ProviderLinkState",
    "Service",
    "SessionService",
    "StoredPhoto",
    "UserService",
]
