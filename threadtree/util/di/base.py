"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all providers.

    A provider class with subclasses is a mockable component; its subclasses
    set ``__is_mock__`` and ``get_provider`` picks one of them.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this is a test implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
