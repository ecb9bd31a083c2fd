"""Unit tests for the HTTP pricing client.

Tests cover:
- Request URL and {"data": ...} envelope
- {"result": ...} and bare response bodies
- Error handling for connection issues, timeouts, status codes and bad bodies
"""

from __future__ import annotations

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from tabletops.domain.entities import TabletopConfig
from tabletops.domain.exceptions import PricingError
from tabletops.domain.services import PricingPayload
from tabletops.domain.value_objects import MaterialKind, PriceSource
from tabletops.infrastructure import HttpPricingClient

BASE_URL = "https://functions.example.com"
URL = f"{BASE_URL}/calculateTabletopPrice"


@pytest.fixture
def payload() -> PricingPayload:
    return PricingPayload.from_config(TabletopConfig())


@pytest.fixture
def client() -> HttpPricingClient:
    return HttpPricingClient(BASE_URL + "/")


# =============================================================================
# Successful responses
# =============================================================================


class TestFetchPrice:
    @pytest.mark.asyncio
    async def test_posts_data_envelope(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(url=URL, method="POST", json={"result": {"price": 512}})

        await client.fetch_price(payload)

        request = httpx_mock.get_request()
        assert json.loads(request.content) == {"data": payload.to_dict()}

    @pytest.mark.asyncio
    async def test_result_envelope(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(
            url=URL,
            json={"result": {"price": 512.5, "currency": "AUD", "areaM2": 1.8, "material": "timber"}},
        )

        quote = await client.fetch_price(payload)

        assert quote.price == 513
        assert quote.area_m2 == 1.8
        assert quote.material == MaterialKind.TIMBER
        assert quote.source == PriceSource.REMOTE

    @pytest.mark.asyncio
    async def test_bare_body(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(url=URL, json={"price": 400})
        quote = await client.fetch_price(payload)
        assert quote.price == 400
        assert quote.material == MaterialKind.LAMINATE

    @pytest.mark.asyncio
    async def test_custom_function_name(
        self, httpx_mock: HTTPXMock, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(url=f"{BASE_URL}/quoteTop", json={"result": {"price": 1}})
        client = HttpPricingClient(BASE_URL, function_name="quoteTop")
        assert (await client.fetch_price(payload)).price == 1


# =============================================================================
# Failures
# =============================================================================


class TestFetchPriceErrors:
    @pytest.mark.asyncio
    async def test_connection_error(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))
        with pytest.raises(PricingError, match="Could not reach"):
            await client.fetch_price(payload)

    @pytest.mark.asyncio
    async def test_timeout(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_exception(httpx.ReadTimeout("Timeout"))
        with pytest.raises(PricingError, match="timed out"):
            await client.fetch_price(payload)

    @pytest.mark.asyncio
    async def test_error_status_with_callable_message(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(
            url=URL,
            status_code=400,
            json={"error": {"status": "INVALID_ARGUMENT", "message": "Width out of range"}},
        )
        with pytest.raises(PricingError, match="Width out of range") as exc_info:
            await client.fetch_price(payload)
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_error_status_without_body(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(url=URL, status_code=503, text="unavailable")
        with pytest.raises(PricingError, match="status 503"):
            await client.fetch_price(payload)

    @pytest.mark.asyncio
    async def test_malformed_json(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload
    ) -> None:
        httpx_mock.add_response(url=URL, text="<html>")
        with pytest.raises(PricingError, match="malformed"):
            await client.fetch_price(payload)

    @pytest.mark.parametrize(
        "body",
        [{"result": {}}, {"result": {"price": "450"}}, {"result": {"price": True}}, [1, 2]],
    )
    @pytest.mark.asyncio
    async def test_missing_price(
        self, httpx_mock: HTTPXMock, client: HttpPricingClient, payload: PricingPayload, body
    ) -> None:
        httpx_mock.add_response(url=URL, json=body)
        with pytest.raises(PricingError):
            await client.fetch_price(payload)
