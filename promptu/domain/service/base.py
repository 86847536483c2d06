"""Base class for domain services."""


class Service:
    """Business logic spanning several entities.

    Services receive repositories and other services in ``__init__`` and
    keep no state between calls.
    """
