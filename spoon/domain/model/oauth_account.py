"""OAuth account entity.

Links a federated identity (Google, Apple) to a local user.
"""

from datetime import datetime

from pydantic import Field

from spoon.domain.model.common import DomainModel
from spoon.domain.value import OAuthProvider, UserId


class OAuthAccount(DomainModel):
    """Federated identity linked to a user account.

    A user has at most one account per provider, and a provider account
    belongs to at most one user.
    """

    provider: OAuthProvider
    provider_user_id: str  # Permanent ID issued by the provider
    provider_username: str  # Display label, usually the provider email
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
