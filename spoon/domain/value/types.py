"""Domain value objects for Spoonjoy accounts.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from spoon.domain.value.common import ValueObject


class OAuthProvider(str, Enum):
    """Federated identity providers a user can link."""

    GOOGLE = "google"
    APPLE = "apple"

    @property
    def label(self) -> str:
        """Human-readable provider name ("Google", "Apple")."""
        return self.value.capitalize()


class AccountIntent(str, Enum):
    """Operations accepted by the account settings form.

    The submitted ``intent`` field selects exactly one of these.
    """

    UPDATE_USER_INFO = "updateUserInfo"
    UPLOAD_PHOTO = "uploadPhoto"
    REMOVE_PHOTO = "removePhoto"
    UNLINK_PROVIDER = "unlinkProvider"


class ErrorKind(str, Enum):
    """Error codes returned to the client in account action results."""

    VALIDATION_ERROR = "validation_error"
    EMAIL_TAKEN = "email_taken"
    USERNAME_TAKEN = "username_taken"
    NO_FILE = "no_file"
    INVALID_FILE_TYPE = "invalid_file_type"
    FILE_TOO_LARGE = "file_too_large"
    LAST_AUTH_METHOD = "last_auth_method"
    STORAGE_ERROR = "storage_error"
    PERSISTENCE_CONFLICT = "persistence_conflict"


class PhotoUpload(ValueObject):
    """A file submitted as a profile photo, already read into memory."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        """Size of the file in bytes."""
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        """True when no file was chosen or the chosen file has no content."""
        return self.size == 0
