"""Domain layer errors.

Account errors carry the ``ErrorKind`` reported to the client, so the
account action use case can turn any of them into a result without
knowing which service raised it.
"""

from typing import ClassVar

from spoon.domain.value import ErrorKind


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AccountError(DomainError):
    """Base for failures reported back to the user as an action result."""

    kind: ClassVar[ErrorKind]
    default_message: ClassVar[str | None] = None

    def __init__(self, message: str | None = None):
        self.message = message if message is not None else self.default_message
        super().__init__(self.message or self.kind.value)


class ValidationError(AccountError):
    """One or more submitted fields are missing or malformed."""

    kind = ErrorKind.VALIDATION_ERROR

    def __init__(
        self,
        field_errors: dict[str, str] | None = None,
        message: str | None = None,
    ):
        self.field_errors = field_errors or {}
        super().__init__(message)


class EmailTakenError(AccountError):
    """Email already belongs to another user."""

    kind = ErrorKind.EMAIL_TAKEN
    default_message = "This email is already in use by another account"


class UsernameTakenError(AccountError):
    """Username already belongs to another user."""

    kind = ErrorKind.USERNAME_TAKEN
    default_message = "This username is already taken"


class NoFileError(AccountError):
    """Photo upload submitted without a file."""

    kind = ErrorKind.NO_FILE
    default_message = "Please select a photo to upload"


class InvalidFileTypeError(AccountError):
    """Uploaded file is not an accepted image type."""

    kind = ErrorKind.INVALID_FILE_TYPE
    default_message = (
        "Invalid file type. Please upload a JPEG, PNG, GIF, or WebP image."
    )


class FileTooLargeError(AccountError):
    """Uploaded file exceeds the size limit."""

    kind = ErrorKind.FILE_TOO_LARGE
    default_message = "File too large. Maximum size is 5MB."


class LastAuthMethodError(AccountError):
    """Removing the credential would leave the user unable to sign in."""

    kind = ErrorKind.LAST_AUTH_METHOD
    default_message = (
        "You cannot unlink your only sign-in method. "
        "Set a password or link another account first."
    )


class StorageError(AccountError):
    """Photo storage backend failed."""

    kind = ErrorKind.STORAGE_ERROR
    default_message = "Failed to upload photo. Please try again."


class PersistenceConflictError(AccountError):
    """A database uniqueness constraint rejected the write.

    Raised when a concurrent request claimed the same value after the
    friendly pre-checks passed.
    """

    kind = ErrorKind.PERSISTENCE_CONFLICT
    default_message = "Your changes conflict with another update. Please try again."
