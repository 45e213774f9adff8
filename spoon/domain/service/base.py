"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold account rules that span the user, its linked
    OAuth accounts and photo storage.
    """

    pass
