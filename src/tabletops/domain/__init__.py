"""Domain layer - core business logic."""

from .entities import CatalogueMaterial, TabletopConfig
from .value_objects import (
    DimensionLimits,
    EdgeProfile,
    Finish,
    MaterialKind,
    OutlineBounds,
    OutlinePoint,
    ParsedCustomOutline,
    PriceQuote,
    PriceSource,
    TableShape,
)

__all__ = [
    "CatalogueMaterial",
    "DimensionLimits",
    "EdgeProfile",
    "Finish",
    "MaterialKind",
    "OutlineBounds",
    "OutlinePoint",
    "ParsedCustomOutline",
    "PriceQuote",
    "PriceSource",
    "TableShape",
    "TabletopConfig",
]
