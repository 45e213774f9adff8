"""User aggregate root.

Users sign in with a password, with linked OAuth accounts, or both.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from spoon.domain.model.common import DomainModel
from spoon.domain.value import UserId

# Shown whenever a user has no profile photo of their own
DEFAULT_AVATAR_URL = "https://res.cloudinary.com/dpjmyc4uz/image/upload/v1674541350/clbe7wr180009tkhggghtl1qd.png"


class User(DomainModel):
    """User aggregate root.

    Email is stored lowercase and is unique case-insensitively.
    Username is unique as written.
    """

    id: UserId
    email: str
    username: str
    hashed_password: Optional[str] = Field(default=None, repr=False)
    photo_url: Optional[str] = None  # None means the default avatar
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_password(self) -> bool:
        """Whether the user can sign in with a password."""
        return self.hashed_password is not None

    @property
    def display_photo_url(self) -> str:
        """Photo URL to show for this user, falling back to the default avatar."""
        return self.photo_url if self.photo_url is not None else DEFAULT_AVATAR_URL
