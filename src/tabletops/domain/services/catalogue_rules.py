"""Shape and catalogue driven limits plus material/finish mapping."""

from __future__ import annotations

from ..entities import CatalogueMaterial
from ..value_objects import DimensionLimits, Finish, MaterialKind, TableShape
from .measurements import normalize_measurement_mm

# Base manufacturing limits in millimetres
MAX_LENGTH_MM = 3600
MAX_WIDTH_MM = 1800
MAX_DIAMETER_MM = 1800
MIN_LENGTH_MM = 500
MIN_WIDTH_MM = 300

MIN_EDGE_RADIUS_MM = 50
MIN_SUPER_ELLIPSE_EXPONENT = 1.5
MAX_SUPER_ELLIPSE_EXPONENT = 6.0
MIN_QUANTITY = 1
MAX_QUANTITY = 50


def base_limits(shape: TableShape) -> tuple[int, int]:
    """Return the (length, width) ceiling for a shape before catalogue limits."""
    if shape == TableShape.ROUND:
        return MAX_DIAMETER_MM, MAX_DIAMETER_MM
    return MAX_LENGTH_MM, MAX_WIDTH_MM


def effective_limits(
    shape: TableShape, material: CatalogueMaterial | None = None
) -> DimensionLimits:
    """Intersect the shape's base limits with the material's declared maximum.

    Catalogue maxima that are missing or unparsable are ignored. Each
    ceiling is floored at the minimum dimension so the window never
    inverts.
    """
    max_length, max_width = base_limits(shape)

    if material is not None:
        catalogue_length = normalize_measurement_mm(material.max_length)
        catalogue_width = normalize_measurement_mm(material.max_width)
        if catalogue_length is not None:
            max_length = min(max_length, catalogue_length)
        if catalogue_width is not None:
            max_width = min(max_width, catalogue_width)

    return DimensionLimits(
        min_length=MIN_LENGTH_MM,
        max_length=max(MIN_LENGTH_MM, max_length),
        min_width=MIN_WIDTH_MM,
        max_width=max(MIN_WIDTH_MM, max_width),
    )


def map_material_kind(material_type: str) -> MaterialKind:
    """Map a catalogue type description onto a pricing material family."""
    text = material_type.lower()
    if "linoleum" in text:
        return MaterialKind.LINOLEUM
    if "veneer" in text or "timber" in text:
        return MaterialKind.TIMBER
    return MaterialKind.LAMINATE


def map_finish(finish: str, current: Finish) -> Finish:
    """Map a catalogue finish description, keeping ``current`` when nothing matches."""
    text = finish.lower()
    if "matte" in text:
        return Finish.MATTE
    if "satin" in text or "semi" in text or "gloss" in text:
        return Finish.SATIN
    return current
