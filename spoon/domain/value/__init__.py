"""Domain value objects for Spoonjoy accounts."""

from spoon.domain.value.identifiers import UserId
from spoon.domain.value.types import (
    AccountIntent,
    ErrorKind,
    OAuthProvider,
    PhotoUpload,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "AccountIntent",
    "ErrorKind",
    "OAuthProvider",
    "PhotoUpload",
]
