"""Account settings use cases."""

from .get_account_settings import GetAccountSettingsUseCase
from .perform_account_action import PerformAccountActionUseCase

__all__ = ["GetAccountSettingsUseCase", "PerformAccountActionUseCase"]
