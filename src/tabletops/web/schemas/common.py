"""Common Pydantic schemas shared across requests and responses."""

import math
from dataclasses import asdict

from pydantic import BaseModel, Field

from tabletops.domain.entities import TabletopConfig
from tabletops.domain.services import calculate_bounds
from tabletops.domain.value_objects import (
    EdgeProfile,
    Finish,
    MaterialKind,
    OutlineBounds,
    OutlinePoint,
    ParsedCustomOutline,
    PriceQuote,
    TableShape,
    json_number,
)


class TabletopConfigSchema(BaseModel):
    """Tabletop configuration - mirrors domain TabletopConfig.

    Only the values the domain cannot represent are rejected here; range
    limits are the resolver's job.
    """

    shape: TableShape = Field(default=TableShape.ROUNDED_RECT, description="Outline shape")
    length_mm: int = Field(default=2000, gt=0, description="Length in mm")
    width_mm: int = Field(default=900, gt=0, description="Width in mm")
    thickness_mm: int = Field(default=25, gt=0, description="Thickness in mm")
    edge_radius_mm: int = Field(default=150, ge=0, description="Corner radius in mm")
    super_ellipse_exponent: float = Field(default=2.5, gt=0, description="Super-ellipse exponent")
    material: MaterialKind = Field(default=MaterialKind.LAMINATE, description="Material family")
    finish: Finish = Field(default=Finish.MATTE, description="Surface finish")
    edge_profile: EdgeProfile = Field(default=EdgeProfile.EDGED, description="Edge treatment")
    quantity: int = Field(default=1, gt=0, description="Number of tops")
    left_return_mm: int = Field(default=800, ge=0)
    right_return_mm: int = Field(default=800, ge=0)
    internal_radius_mm: int = Field(default=60, ge=0)
    external_radius_mm: int = Field(default=80, ge=0)
    round_front_corners: bool = True
    include_cable_contour: bool = False
    cable_contour_length_mm: int = Field(default=400, ge=0)
    cable_contour_depth_mm: int = Field(default=60, ge=0)
    workstation_front_radius_mm: int = Field(default=120, ge=0)

    def to_domain(self) -> TabletopConfig:
        return TabletopConfig(**self.model_dump())

    @classmethod
    def from_domain(cls, config: TabletopConfig) -> "TabletopConfigSchema":
        return cls(**asdict(config))


class PointSchema(BaseModel):
    """Outline vertex; null stands for a coordinate that did not parse."""

    x: float | None
    y: float | None


class BoundsSchema(BaseModel):
    """Axis-aligned bounding box in drawing units."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    @classmethod
    def from_domain(cls, bounds: OutlineBounds) -> "BoundsSchema":
        return cls(
            min_x=bounds.min_x,
            min_y=bounds.min_y,
            max_x=bounds.max_x,
            max_y=bounds.max_y,
            width=bounds.width,
            height=bounds.height,
        )


class OutlineSchema(BaseModel):
    """Parsed custom outline: the first path is the perimeter."""

    paths: list[list[PointSchema]] = Field(..., description="Point sequences in drawing order")
    bounds: BoundsSchema | None = Field(default=None, description="Bounding box, if computable")

    def to_domain(self) -> ParsedCustomOutline:
        # Bounds are always recomputed from the points.
        paths = tuple(
            tuple(OutlinePoint(_coordinate(p.x), _coordinate(p.y)) for p in path)
            for path in self.paths
        )
        return ParsedCustomOutline(paths=paths, bounds=calculate_bounds(paths))

    @classmethod
    def from_domain(cls, outline: ParsedCustomOutline) -> "OutlineSchema":
        return cls(
            paths=[
                [PointSchema(x=json_number(p.x), y=json_number(p.y)) for p in path]
                for path in outline.paths
            ],
            bounds=BoundsSchema.from_domain(outline.bounds) if outline.bounds else None,
        )


class QuoteSchema(BaseModel):
    """A published price."""

    price: int = Field(..., description="Total price in whole currency units")
    currency: str = Field(..., description="ISO currency code")
    area_m2: float = Field(..., description="Area of a single top in square metres")
    material: MaterialKind = Field(..., description="Material family the rate came from")
    source: str = Field(..., description="local or remote")

    @classmethod
    def from_domain(cls, quote: PriceQuote) -> "QuoteSchema":
        return cls(
            price=quote.price,
            currency=quote.currency,
            area_m2=quote.area_m2,
            material=quote.material,
            source=quote.source.value,
        )


def _coordinate(value: float | None) -> float:
    return math.nan if value is None else value
