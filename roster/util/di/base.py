"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that have both a production and an in-memory provider
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Common base for every roster provider.

    A provider base with subclasses is a swappable component; the subclass
    with the matching ``__is_mock__`` flag is picked when the container is
    built.

    Attributes:
        __mock_component__: Name used to unmock the component in tests, None
            for providers that are always concrete
        __is_mock__: True for the in-memory test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
