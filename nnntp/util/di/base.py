"""Provider metadata and implementation selection."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components that tests can swap for in-memory versions
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying swap metadata.

    A provider class with subclasses stands for a swappable component.
    Exactly one subclass is the production implementation; test code adds
    another with ``__is_mock__ = True``. A provider without subclasses is
    used as it is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for a PROVIDERS entry.

    Args:
        base: Entry from PROVIDERS
        use_mock: Take the mock implementation of a swappable component

    Returns:
        Provider class, not yet instantiated

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"{base.__mock_component__ or base.__name__} has no {kind} provider")
