"""Contracts between the configurator core and its collaborators."""

from .protocols import (
    CatalogueFeedProtocol,
    CatalogueListener,
    PricingClientProtocol,
    Unsubscribe,
)

__all__ = [
    "CatalogueFeedProtocol",
    "CatalogueListener",
    "PricingClientProtocol",
    "Unsubscribe",
]
