"""Instant local tabletop pricing.

Mirrors the authoritative pricing function so a figure can be shown
before (or instead of) the remote result.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum

from ..entities import TabletopConfig
from ..value_objects import (
    EdgeProfile,
    Finish,
    MaterialKind,
    PriceQuote,
    PriceSource,
    TableShape,
)
from .measurements import round_half_up

BASE_RATE_PER_M2: dict[MaterialKind, float] = {
    MaterialKind.TIMBER: 380.0,
    MaterialKind.LINOLEUM: 320.0,
    MaterialKind.LAMINATE: 250.0,
}
REFERENCE_THICKNESS_MM = 25.0
CURRENCY = "AUD"

# (minimum quantity, multiplier), highest tier first
QUANTITY_DISCOUNTS: tuple[tuple[int, float], ...] = ((10, 0.94), (5, 0.97))


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class PricingPayload:
    """Normalised pricing projection of a TabletopConfig.

    Compared by value: two configurations that price identically produce
    equal payloads, so an unchanged payload never triggers a new request.
    """

    shape: TableShape
    length_mm: int
    width_mm: int
    left_return_mm: int
    right_return_mm: int
    internal_radius_mm: int
    external_radius_mm: int
    thickness_mm: int
    edge_radius_mm: int
    super_ellipse_exponent: float
    round_front_corners: bool
    include_cable_contour: bool
    cable_contour_length_mm: int
    cable_contour_depth_mm: int
    workstation_front_radius_mm: int
    material: MaterialKind
    finish: Finish
    edge_profile: EdgeProfile
    quantity: int

    @classmethod
    def from_config(cls, config: TabletopConfig) -> PricingPayload:
        return cls(
            shape=config.shape,
            length_mm=int(config.length_mm),
            width_mm=int(config.width_mm),
            left_return_mm=int(config.left_return_mm),
            right_return_mm=int(config.right_return_mm),
            internal_radius_mm=int(config.internal_radius_mm),
            external_radius_mm=int(config.external_radius_mm),
            thickness_mm=int(config.thickness_mm),
            edge_radius_mm=int(config.edge_radius_mm),
            super_ellipse_exponent=float(config.super_ellipse_exponent),
            round_front_corners=config.round_front_corners,
            include_cable_contour=config.include_cable_contour,
            cable_contour_length_mm=int(config.cable_contour_length_mm),
            cable_contour_depth_mm=int(config.cable_contour_depth_mm),
            workstation_front_radius_mm=int(config.workstation_front_radius_mm),
            material=config.material,
            finish=config.finish,
            edge_profile=config.edge_profile,
            quantity=int(config.quantity),
        )

    def to_dict(self) -> dict:
        """Wire form with camelCase keys and plain enum values."""
        return {
            _camel(key): value.value if isinstance(value, Enum) else value
            for key, value in asdict(self).items()
        }


def quantity_multiplier(quantity: int) -> float:
    for minimum, multiplier in QUANTITY_DISCOUNTS:
        if quantity >= minimum:
            return multiplier
    return 1.0


def calculate_local_price(payload: PricingPayload) -> PriceQuote:
    """Compute the instant estimate for a payload.

    ``unit = area_m2 * rate * (thickness / 25)`` with a 3% discount from
    five tops and 6% from ten; the total is rounded to whole dollars.
    """
    area_m2 = (payload.length_mm / 1000) * (payload.width_mm / 1000)
    thickness_factor = payload.thickness_mm / REFERENCE_THICKNESS_MM
    rate = BASE_RATE_PER_M2.get(payload.material, BASE_RATE_PER_M2[MaterialKind.LAMINATE])

    unit_price = area_m2 * rate * thickness_factor * quantity_multiplier(payload.quantity)
    total = unit_price * payload.quantity

    return PriceQuote(
        price=round_half_up(total),
        currency=CURRENCY,
        area_m2=area_m2,
        material=payload.material,
        source=PriceSource.LOCAL,
    )
