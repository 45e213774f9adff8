"""Shared base for the account service's dishka providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-memory versions
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Base for every provider in PROVIDERS.

    Config, domain and application providers leave both markers at their
    defaults. The persistence and storage bases set ``__mock_component__``
    and have one production and one mock subclass each.

    Attributes:
        __mock_component__: "persistence" or "storage" for swappable bases
        __is_mock__: True on the in-memory subclass used by tests
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
