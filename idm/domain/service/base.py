"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold lookup and policy logic that spans the
    directory's repositories and value objects.
    """

    pass
