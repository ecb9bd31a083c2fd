"""Conversion from configuration models to domain objects and services."""

from __future__ import annotations

from collections.abc import Iterable

from tabletops.application.config.schema import (
    CatalogueMaterialConfig,
    ConfiguratorSettings,
    TabletopDefaultsConfig,
)
from tabletops.application.price_estimator import PriceEstimator
from tabletops.domain.entities import CatalogueMaterial, TabletopConfig
from tabletops.infrastructure.pricing_client import HttpPricingClient


def config_to_tabletop(defaults: TabletopDefaultsConfig) -> TabletopConfig:
    """Build the starting TabletopConfig (not yet constraint-resolved)."""
    return TabletopConfig(**defaults.model_dump())


def config_to_catalogue(
    records: Iterable[CatalogueMaterialConfig],
) -> list[CatalogueMaterial]:
    """Convert catalogue records to domain materials, ordered by name."""
    materials = [
        CatalogueMaterial(
            id=record.id,
            name=record.name,
            material_type=record.material_type,
            finish=record.finish,
            supplier_sku=record.supplier_sku,
            hex_code=record.hex_code,
            max_length=record.max_length,
            max_width=record.max_width,
            available_thicknesses=tuple(record.available_thicknesses),
        )
        for record in records
    ]
    return sorted(materials, key=lambda m: m.name)


def settings_to_estimator(settings: ConfiguratorSettings, remote: bool = True) -> PriceEstimator:
    """Create a PriceEstimator; local-only when no endpoint is configured."""
    pricing = settings.pricing
    client = None
    if remote and pricing.endpoint:
        client = HttpPricingClient(
            pricing.endpoint,
            function_name=pricing.function_name,
            timeout=pricing.timeout_seconds,
        )
    return PriceEstimator(
        client,
        debounce=pricing.debounce_ms / 1000,
        timeout=pricing.timeout_seconds,
    )
