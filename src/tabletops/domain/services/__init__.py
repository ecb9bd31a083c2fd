"""Domain services for outline ingestion, constraints and pricing."""

from .bounds import calculate_bounds
from .catalogue_rules import effective_limits, map_finish, map_material_kind
from .constraint_resolver import (
    ConfigConstraintResolver,
    ConfigEvent,
    ConfiguratorState,
    FieldChanged,
    ManualTextCommitted,
    ManualTextEdited,
    MaterialSelected,
    OutlineCleared,
    OutlineParsed,
    ShapeChanged,
    resolve_config,
)
from .measurements import normalize_measurement_mm, parse_thickness_mm, round_half_up
from .outline_parser import OutlineParser, parse_dxf_outline
from .pricing import PricingPayload, calculate_local_price
from .thickness import DEFAULT_THICKNESSES, ThicknessCatalogResolver

__all__ = [
    "ConfigConstraintResolver",
    "ConfigEvent",
    "ConfiguratorState",
    "DEFAULT_THICKNESSES",
    "FieldChanged",
    "ManualTextCommitted",
    "ManualTextEdited",
    "MaterialSelected",
    "OutlineCleared",
    "OutlineParsed",
    "OutlineParser",
    "PricingPayload",
    "ShapeChanged",
    "ThicknessCatalogResolver",
    "calculate_bounds",
    "calculate_local_price",
    "effective_limits",
    "map_finish",
    "map_material_kind",
    "normalize_measurement_mm",
    "parse_dxf_outline",
    "parse_thickness_mm",
    "resolve_config",
    "round_half_up",
]
