"""Tests for the local pricing formula and the pricing payload."""

from __future__ import annotations

import pytest

from tabletops.domain.entities import TabletopConfig
from tabletops.domain.services import PricingPayload, calculate_local_price
from tabletops.domain.services.pricing import quantity_multiplier
from tabletops.domain.value_objects import (
    EdgeProfile,
    MaterialKind,
    PriceSource,
    TableShape,
)


def price(**overrides) -> int:
    config = TabletopConfig(**overrides)
    return calculate_local_price(PricingPayload.from_config(config)).price


class TestLocalPrice:
    def test_default_laminate(self) -> None:
        """1.8 m2 x 250 x 25/25 = 450."""
        quote = calculate_local_price(
            PricingPayload.from_config(TabletopConfig(length_mm=2000, width_mm=900))
        )
        assert quote.price == 450
        assert quote.currency == "AUD"
        assert quote.area_m2 == pytest.approx(1.8)
        assert quote.source == PriceSource.LOCAL

    @pytest.mark.parametrize(
        ("material", "expected"),
        [
            (MaterialKind.LAMINATE, 250),
            (MaterialKind.TIMBER, 380),
            (MaterialKind.LINOLEUM, 320),
        ],
    )
    def test_material_rates(self, material: MaterialKind, expected: int) -> None:
        assert price(length_mm=1000, width_mm=1000, material=material) == expected

    def test_thickness_scales_linearly(self) -> None:
        assert price(length_mm=1000, width_mm=1000, thickness_mm=33) == 330

    def test_five_or_more_gets_three_percent(self) -> None:
        assert price(length_mm=2000, width_mm=1000, quantity=5) == 2425

    def test_ten_or_more_gets_six_percent(self) -> None:
        assert price(length_mm=2000, width_mm=900, quantity=10) == 4230

    def test_shape_does_not_change_price(self) -> None:
        assert price(shape=TableShape.ROUND, length_mm=1000, width_mm=1000) == 250

    def test_rounds_half_up(self) -> None:
        # 0.55 * 1.0 * 250 = 137.5 -> 138
        assert price(length_mm=550, width_mm=1000) == 138


class TestQuantityMultiplier:
    @pytest.mark.parametrize(
        ("quantity", "expected"),
        [(1, 1.0), (4, 1.0), (5, 0.97), (9, 0.97), (10, 0.94), (50, 0.94)],
    )
    def test_tiers(self, quantity: int, expected: float) -> None:
        assert quantity_multiplier(quantity) == expected


class TestPricingPayload:
    def test_equal_configs_give_equal_payloads(self) -> None:
        assert PricingPayload.from_config(TabletopConfig()) == PricingPayload.from_config(
            TabletopConfig()
        )

    def test_to_dict_wire_format(self) -> None:
        data = PricingPayload.from_config(
            TabletopConfig(shape=TableShape.ROUND, edge_profile=EdgeProfile.PAINTED_SHARKNOSE)
        ).to_dict()

        assert data["shape"] == "round"
        assert data["lengthMm"] == 2000
        assert data["edgeProfile"] == "painted-sharknose"
        assert data["roundFrontCorners"] is True
        assert data["workstationFrontRadiusMm"] == 120
        assert len(data) == 19
