"""Tests that concrete services satisfy the collaborator protocols."""

from __future__ import annotations

from tabletops.contracts import CatalogueFeedProtocol, PricingClientProtocol
from tabletops.infrastructure import HttpPricingClient, InMemoryCatalogueFeed


class TestProtocolConformance:
    def test_http_client_is_pricing_client(self) -> None:
        assert isinstance(HttpPricingClient("https://fn.example.com"), PricingClientProtocol)

    def test_in_memory_feed_is_catalogue_feed(self) -> None:
        assert isinstance(InMemoryCatalogueFeed(), CatalogueFeedProtocol)

    def test_fake_client_is_pricing_client(self, make_pricing_client) -> None:
        assert isinstance(make_pricing_client(), PricingClientProtocol)

    def test_plain_object_is_not(self) -> None:
        assert not isinstance(object(), PricingClientProtocol)
        assert not isinstance(object(), CatalogueFeedProtocol)
