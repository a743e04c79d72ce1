"""Dependency injection wiring.

Every provider is listed once in PROVIDERS. The production container and
the test containers both build from that list and differ only in which
components are mocked.
"""

from collections.abc import Collection
from typing import Type

from nnntp.util.di.adapter import ProdAdapterProvider
from nnntp.util.di.application import ProdApplicationProvider
from nnntp.util.di.base import Component, ProviderBase, get_provider
from nnntp.util.di.core import ProdConfigProvider
from nnntp.util.di.domain import ProdDomainProvider
from nnntp.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdAdapterProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable
    PersistenceProvider,
]


def instantiate_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate one provider per PROVIDERS entry.

    Args:
        mocked: Components to take the mock implementation of

    Returns:
        Provider instances ready for a container
    """
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "instantiate_providers",
    "ProdConfigProvider",
    "ProdAdapterProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
