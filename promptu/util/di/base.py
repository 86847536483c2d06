"""Provider base with mock/production selection."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests may swap for an in-memory double
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider class with subclasses is a swappable component: one subclass
    sets ``__is_mock__ = True`` and one leaves it False. A provider class
    without subclasses is always used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Pick the concrete provider class for this component.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        if not cls.is_swappable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ is mock:
                return subclass

        kind = "mock" if mock else "production"
        name = cls.__mock_component__ or cls.__name__
        raise ValueError(f"No {kind} provider for {name}")
