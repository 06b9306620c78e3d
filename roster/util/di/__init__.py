"""Dishka providers for the roster API.

Config, domain services and use cases are always concrete. Persistence is
the one swappable component: PostgreSQL in production, in-memory
repositories in tests (``tests/di``).
"""

from typing import Type

from roster.util.di.application import ProdApplicationProvider
from roster.util.di.base import Component, ProviderBase
from roster.util.di.core import ProdConfigProvider
from roster.util.di.domain import ProdDomainProvider
from roster.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

# Every container is built from these bases, in this order
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class to instantiate.

    A base without subclasses is used as is. A base with subclasses is a
    swappable component; the subclass whose ``__is_mock__`` equals
    ``use_mock`` is returned. The in-memory persistence provider only
    registers as a subclass once ``tests.di`` is imported.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the in-memory implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )
    if impl is None:
        kind = "in-memory" if use_mock else "production"
        component_name = getattr(base, "__mock_component__", base.__name__)
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
