"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span more than one entity or
    repository, such as vote counters that live on comments.
    """

    pass
