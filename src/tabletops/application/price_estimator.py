"""Dual-path price estimation.

Every configuration change publishes an instant local estimate, then a
debounced request to the authoritative pricing service. Requests carry a
monotonically increasing id; only the response for the latest id is
applied. A change during the debounce window cancels the timer; a change
while a request is in flight leaves it running but marks its answer stale.

State machine::

    IDLE -> ESTIMATING -> SETTLED | DEGRADED
                ^                     |
                +---- any change -----+
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from tabletops.domain.exceptions import PricingError
from tabletops.domain.services.pricing import PricingPayload, calculate_local_price

if TYPE_CHECKING:
    from tabletops.contracts.protocols import PricingClientProtocol, Unsubscribe
    from tabletops.domain.entities import TabletopConfig
    from tabletops.domain.value_objects import PriceQuote

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.25
DEFAULT_TIMEOUT_SECONDS = 10.0
FALLBACK_ERROR = (
    "We were unable to verify the latest price. Showing a local estimate instead."
)


class EstimateState(str, Enum):
    """Lifecycle of the published price.

    Attributes:
        IDLE: Nothing has been priced yet.
        ESTIMATING: A local estimate is shown; the authoritative price is pending.
        SETTLED: The authoritative price (or, without a remote service, the
            local estimate) is final for the current configuration.
        DEGRADED: The authoritative request failed; the local estimate stays.
    """

    IDLE = "idle"
    ESTIMATING = "estimating"
    SETTLED = "settled"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class PriceUpdate:
    """One published price event."""

    state: EstimateState
    quote: PriceQuote | None = None
    error: str | None = None
    request_id: int = 0

    @property
    def price(self) -> int | None:
        return self.quote.price if self.quote else None


PriceListener = Callable[[PriceUpdate], None]


class PriceEstimator:
    """Publishes local and authoritative prices for a changing configuration.

    ``update`` must be called from inside a running event loop when a
    remote client is configured, since it schedules the debounced request.

    Attributes:
        debounce: Quiet period before the remote request, in seconds.
        timeout: Limit for the remote request, in seconds. Expiry is
            treated like any other failure.

    Example:
        >>> estimator = PriceEstimator(HttpPricingClient(url))
        >>> estimator.update(config).price      # instant local estimate
        >>> (await estimator.wait_settled()).state
        <EstimateState.SETTLED: 'settled'>
    """

    def __init__(
        self,
        client: PricingClientProtocol | None = None,
        debounce: float = DEFAULT_DEBOUNCE_SECONDS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.client = client
        self.debounce = debounce
        self.timeout = timeout
        self._request_id = 0
        self._payload: PricingPayload | None = None
        self._current = PriceUpdate(EstimateState.IDLE)
        self._pending: asyncio.Task | None = None
        self._dispatched = False
        self._abandoned: set[asyncio.Task] = set()
        self._listeners: list[PriceListener] = []

    # --- Queries ---

    @property
    def current(self) -> PriceUpdate:
        return self._current

    @property
    def state(self) -> EstimateState:
        return self._current.state

    @property
    def request_id(self) -> int:
        return self._request_id

    def subscribe(self, listener: PriceListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Commands ---

    def update(self, config: TabletopConfig) -> PriceUpdate:
        """Price a configuration.

        Publishes the local estimate synchronously. Unchanged payloads are
        ignored.

        Returns:
            The update published for this configuration.
        """
        payload = PricingPayload.from_config(config)
        if payload == self._payload:
            return self._current

        self._payload = payload
        self._request_id += 1
        request_id = self._request_id
        self._supersede()

        local = calculate_local_price(payload)
        if self.client is None:
            return self._publish(PriceUpdate(EstimateState.SETTLED, local, None, request_id))

        self._publish(PriceUpdate(EstimateState.ESTIMATING, local, None, request_id))
        self._dispatched = False
        self._pending = asyncio.get_running_loop().create_task(
            self._settle(request_id, payload, local)
        )
        return self._current

    async def wait_settled(self) -> PriceUpdate:
        """Wait until the latest configuration has a final price."""
        while self._pending is not None and not self._pending.done():
            await asyncio.wait({self._pending})
        return self._current

    def close(self) -> None:
        """Cancel the pending request and any abandoned in-flight ones."""
        self._request_id += 1
        for task in [self._pending, *self._abandoned]:
            if task is not None and not task.done():
                task.cancel()
        self._pending = None
        self._abandoned.clear()

    # --- Internals ---

    def _supersede(self) -> None:
        task = self._pending
        self._pending = None
        if task is None or task.done():
            return
        if self._dispatched:
            # Already on the wire: let it finish, its answer is stale.
            self._abandoned.add(task)
            task.add_done_callback(self._abandoned.discard)
        else:
            task.cancel()

    async def _settle(
        self, request_id: int, payload: PricingPayload, local: PriceQuote
    ) -> None:
        await asyncio.sleep(self.debounce)
        if request_id != self._request_id or self.client is None:
            return
        self._dispatched = True

        quote: PriceQuote | None = None
        error: str | None = None
        try:
            quote = await asyncio.wait_for(
                self.client.fetch_price(payload), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            error = f"Pricing timed out after {self.timeout}s. {FALLBACK_ERROR}"
        except PricingError as e:
            error = e.message or FALLBACK_ERROR
        except Exception as e:
            logger.exception(f"Unexpected error while fetching price: {e}")
            error = FALLBACK_ERROR

        if request_id != self._request_id:
            logger.debug(f"Discarding stale price response for request {request_id}")
            return

        if quote is not None:
            logger.info(f"Authoritative price {quote.price} for request {request_id}")
            self._publish(PriceUpdate(EstimateState.SETTLED, quote, None, request_id))
        else:
            logger.warning(f"Pricing degraded for request {request_id}: {error}")
            self._publish(PriceUpdate(EstimateState.DEGRADED, local, error, request_id))

    def _publish(self, update: PriceUpdate) -> PriceUpdate:
        self._current = update
        for listener in list(self._listeners):
            listener(update)
        return update
