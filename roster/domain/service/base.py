"""Base class for roster domain services."""


class Service:
    """Marker base for domain services.

    Services own the rules that span the user and follow repositories; they
    never touch the database session directly.
    """
