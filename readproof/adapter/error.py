"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class NameLookupError(AdapterError):
    """Display name provider error."""

    pass
