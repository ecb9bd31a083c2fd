"""Value objects for the tabletop domain."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class TableShape(str, Enum):
    """Outline shapes a tabletop can be configured with.

    Attributes:
        RECT: Plain rectangle with square corners.
        ROUNDED_RECT: Rectangle with a constant corner radius.
        ROUND_TOP: Rectangle with fully rounded ends.
        ROUND: Circle; length and width are a single diameter.
        ELLIPSE: Ellipse inscribed in the length x width box.
        SUPER_ELLIPSE: Squircle controlled by an exponent.
        CUSTOM: Outline imported from a drawing file.
    """

    RECT = "rect"
    ROUNDED_RECT = "rounded-rect"
    ROUND_TOP = "round-top"
    ROUND = "round"
    ELLIPSE = "ellipse"
    SUPER_ELLIPSE = "super-ellipse"
    CUSTOM = "custom"


class MaterialKind(str, Enum):
    """Coarse material families used for pricing."""

    LAMINATE = "laminate"
    TIMBER = "timber"
    LINOLEUM = "linoleum"


class Finish(str, Enum):
    """Surface finishes."""

    MATTE = "matte"
    SATIN = "satin"


class EdgeProfile(str, Enum):
    """Edge treatments.

    Attributes:
        EDGED: Square ABS edging, the majority of jobs.
        PAINTED_SHARKNOSE: Bevelled edge painted to match the surface.
    """

    EDGED = "edged"
    PAINTED_SHARKNOSE = "painted-sharknose"


class PriceSource(str, Enum):
    """Where a published price came from."""

    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class OutlinePoint:
    """A single 2D vertex in drawing units (millimetres)."""

    x: float
    y: float


@dataclass(frozen=True)
class OutlineBounds:
    """Axis-aligned bounding box of an outline."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError("Bounds minimum must not exceed maximum")

    @property
    def width(self) -> float:
        """Extent along the X axis."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Extent along the Y axis."""
        return self.max_y - self.min_y

    def to_dict(self) -> dict[str, float]:
        return {
            "minX": self.min_x,
            "minY": self.min_y,
            "maxX": self.max_x,
            "maxY": self.max_y,
        }


@dataclass(frozen=True)
class ParsedCustomOutline:
    """Paths extracted from a drawing file.

    Attributes:
        paths: Point sequences in drawing order. The first path is the
            outer perimeter by convention, later ones are cutouts.
        bounds: Bounding box of every point, or None when there are no
            paths or no finite coordinates.
    """

    paths: tuple[tuple[OutlinePoint, ...], ...]
    bounds: OutlineBounds | None

    @property
    def is_empty(self) -> bool:
        return not self.paths

    def to_dict(self) -> dict:
        return {
            "paths": [
                [{"x": json_number(p.x), "y": json_number(p.y)} for p in path]
                for path in self.paths
            ],
            "bounds": self.bounds.to_dict() if self.bounds else None,
        }


def json_number(value: float) -> float | None:
    # NaN coordinates survive parsing but have no JSON representation.
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class DimensionLimits:
    """Effective length/width window for the current shape and material.

    Attributes:
        min_length: Smallest legal length in mm.
        max_length: Largest legal length in mm (never below min_length).
        min_width: Smallest legal width in mm.
        max_width: Largest legal width in mm (never below min_width).
    """

    min_length: int
    max_length: int
    min_width: int
    max_width: int

    def __post_init__(self) -> None:
        if self.max_length < self.min_length:
            raise ValueError("max_length must be at least min_length")
        if self.max_width < self.min_width:
            raise ValueError("max_width must be at least min_width")

    @property
    def max_diameter(self) -> int:
        """Largest diameter a round top can take within both limits."""
        return min(self.max_length, self.max_width)


@dataclass(frozen=True)
class PriceQuote:
    """A published tabletop price.

    Attributes:
        price: Total price for the whole quantity, whole dollars.
        currency: ISO currency code.
        area_m2: Surface area of a single top in square metres.
        material: Material family the rate was taken from.
        source: Whether this is the instant local estimate or the
            authoritative remote figure.
    """

    price: int
    currency: str = "AUD"
    area_m2: float = 0.0
    material: MaterialKind = MaterialKind.LAMINATE
    source: PriceSource = PriceSource.LOCAL

    def to_dict(self) -> dict:
        return {
            "price": self.price,
            "currency": self.currency,
            "areaM2": self.area_m2,
            "material": self.material.value,
            "source": self.source.value,
        }
