"""Service protocols for dependency injection.

These protocols describe the external collaborators the configurator
core depends on, so sessions can be wired to real services or to
in-memory fakes in tests.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from tabletops.domain.entities import CatalogueMaterial
    from tabletops.domain.services.pricing import PricingPayload
    from tabletops.domain.value_objects import PriceQuote


CatalogueListener = Callable[["Sequence[CatalogueMaterial]"], None]
Unsubscribe = Callable[[], None]


@runtime_checkable
class PricingClientProtocol(Protocol):
    """Authoritative remote price computation.

    Implementations raise ``PricingError`` on any transport or protocol
    failure; the estimator owns timeouts and fallback.
    """

    async def fetch_price(self, payload: PricingPayload) -> PriceQuote:
        """Return the authoritative quote for a payload."""
        ...


@runtime_checkable
class CatalogueFeedProtocol(Protocol):
    """Push feed of catalogue snapshots.

    Example:
        ```python
        unsubscribe = feed.subscribe(lambda materials: print(len(materials)))
        ...
        unsubscribe()
        ```
    """

    def subscribe(self, on_snapshot: CatalogueListener) -> Unsubscribe:
        """Register a listener and return a callable that removes it."""
        ...
