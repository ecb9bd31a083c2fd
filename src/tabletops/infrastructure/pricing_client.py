"""HTTP client for the authoritative tabletop pricing function.

The pricing function is exposed as an HTTPS callable: the payload is
posted as ``{"data": {...}}`` and the answer comes back as
``{"result": {"price": ...}}``.

Classes:
    HttpPricingClient: Async httpx client implementing PricingClientProtocol
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from tabletops.domain.exceptions import PricingError
from tabletops.domain.services.measurements import round_half_up
from tabletops.domain.services.pricing import CURRENCY, PricingPayload
from tabletops.domain.value_objects import MaterialKind, PriceQuote, PriceSource

logger = logging.getLogger(__name__)

DEFAULT_FUNCTION_NAME = "calculateTabletopPrice"


class HttpPricingClient:
    """Fetch authoritative prices over HTTP.

    Attributes:
        base_url: Base URL of the functions endpoint.
        function_name: Name of the callable pricing function.
        timeout: Request timeout in seconds.

    Example:
        >>> client = HttpPricingClient("https://functions.example.com")
        >>> quote = await client.fetch_price(payload)
        >>> print(quote.price)
    """

    def __init__(
        self,
        base_url: str,
        function_name: str = DEFAULT_FUNCTION_NAME,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.function_name = function_name
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.function_name}"

    async def fetch_price(self, payload: PricingPayload) -> PriceQuote:
        """Request the authoritative price for a payload.

        Args:
            payload: Normalised pricing projection of the configuration.

        Returns:
            Quote with ``source=REMOTE``.

        Raises:
            PricingError: On connection errors, timeouts, non-2xx
                responses or a body without a numeric price.
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url,
                    json={"data": payload.to_dict()},
                    timeout=self.timeout,
                )
        except httpx.TimeoutException as e:
            raise PricingError(f"Pricing request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise PricingError(f"Could not reach pricing service: {e}") from e

        if response.status_code >= 400:
            logger.debug(f"Pricing service returned status {response.status_code}")
            raise PricingError(
                _error_message(response)
                or f"Pricing service returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise PricingError("Pricing service returned malformed JSON") from e

        return _parse_quote(body, payload)


def _error_message(response: httpx.Response) -> str | None:
    """Pull the callable error message out of an error body, if any."""
    try:
        body = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


def _parse_quote(body: Any, payload: PricingPayload) -> PriceQuote:
    result = body.get("result", body) if isinstance(body, dict) else None
    if not isinstance(result, dict):
        raise PricingError("Pricing response has no result")

    price = result.get("price")
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise PricingError(f"Pricing response has no numeric price: {price!r}")

    area_m2 = result.get("areaM2")
    try:
        material = MaterialKind(result.get("material", payload.material))
    except ValueError:
        material = payload.material

    return PriceQuote(
        price=round_half_up(float(price)),
        currency=str(result.get("currency", CURRENCY)),
        area_m2=float(area_m2) if isinstance(area_m2, (int, float)) else 0.0,
        material=material,
        source=PriceSource.REMOTE,
    )
