"""Pytest configuration and shared fixtures for tabletop tests."""

from __future__ import annotations

import asyncio
from io import StringIO
from pathlib import Path

import ezdxf
import pytest

from tabletops.domain.entities import CatalogueMaterial
from tabletops.domain.value_objects import PriceQuote, PriceSource

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "tabletop"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Drawings
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def desk_dxf_path() -> Path:
    """Hand-written DXF: a closed 1800 x 900 perimeter, a circle and a line."""
    return FIXTURES_PATH / "desk.dxf"


@pytest.fixture
def square_dxf_text() -> str:
    """DXF text produced by ezdxf with a single closed 1000 x 600 rectangle."""
    doc = ezdxf.new("R2010")
    doc.modelspace().add_lwpolyline(
        [(0, 0), (1000, 0), (1000, 600), (0, 600)], close=True
    )
    stream = StringIO()
    doc.write(stream)
    return stream.getvalue()


# =============================================================================
# Catalogue
# =============================================================================


@pytest.fixture
def oak_veneer() -> CatalogueMaterial:
    return CatalogueMaterial(
        id="oak-veneer",
        name="Oak Veneer",
        material_type="Veneer",
        finish="Satin",
        supplier_sku="OV-18",
        max_length="2.4m",
        max_width="1200mm",
        available_thicknesses=("18mm", "25mm", "33mm"),
    )


@pytest.fixture
def linoleum() -> CatalogueMaterial:
    return CatalogueMaterial(
        id="forbo-lino",
        name="Forbo Linoleum",
        material_type="Linoleum on MDF",
        finish="Matte",
        max_length="3600",
        max_width="1800",
        available_thicknesses=("25", "33"),
    )


# =============================================================================
# Pricing
# =============================================================================


class FakePricingClient:
    """Scriptable pricing client.

    Each call pops the next delay (default: none) and answers with
    ``price`` unless ``error`` is set. Every payload is recorded.
    """

    def __init__(
        self,
        price: int = 999,
        delays: list[float] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.price = price
        self.delays = list(delays or [])
        self.error = error
        self.calls: list = []

    async def fetch_price(self, payload) -> PriceQuote:
        self.calls.append(payload)
        call_price = self.price + len(self.calls) - 1
        delay = self.delays.pop(0) if self.delays else 0.0
        if delay:
            await asyncio.sleep(delay)
        if self.error is not None:
            raise self.error
        return PriceQuote(price=call_price, material=payload.material, source=PriceSource.REMOTE)


@pytest.fixture
def make_pricing_client() -> type[FakePricingClient]:
    """Factory for scripted pricing clients."""
    return FakePricingClient
