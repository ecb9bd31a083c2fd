"""Domain entities for tabletop configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .value_objects import EdgeProfile, Finish, MaterialKind, TableShape


@dataclass(frozen=True)
class TabletopConfig:
    """Complete parametric description of a tabletop order line.

    Instances are immutable; every change produces a new value through
    the constraint resolver, which keeps the fields mutually consistent.

    Attributes:
        shape: Outline shape.
        length_mm: Length (X extent) in millimetres.
        width_mm: Width (Y extent) in millimetres.
        thickness_mm: Board thickness, a member of the active thickness set.
        edge_radius_mm: Corner radius, only meaningful for rounded-rect.
        super_ellipse_exponent: Corner sharpness, only meaningful for
            super-ellipse.
        material: Coarse material family used for pricing.
        finish: Surface finish.
        edge_profile: Edge treatment.
        quantity: Number of identical tops, 1 to 50.
        left_return_mm: Left return leg, passed through to pricing.
        right_return_mm: Right return leg, passed through to pricing.
        internal_radius_mm: Internal corner radius, passed through.
        external_radius_mm: External corner radius, passed through.
        round_front_corners: Passed through to pricing.
        include_cable_contour: Passed through to pricing.
        cable_contour_length_mm: Passed through to pricing.
        cable_contour_depth_mm: Passed through to pricing.
        workstation_front_radius_mm: Passed through to pricing.
    """

    shape: TableShape = TableShape.ROUNDED_RECT
    length_mm: int = 2000
    width_mm: int = 900
    thickness_mm: int = 25
    edge_radius_mm: int = 150
    super_ellipse_exponent: float = 2.5
    material: MaterialKind = MaterialKind.LAMINATE
    finish: Finish = Finish.MATTE
    edge_profile: EdgeProfile = EdgeProfile.EDGED
    quantity: int = 1
    left_return_mm: int = 800
    right_return_mm: int = 800
    internal_radius_mm: int = 60
    external_radius_mm: int = 80
    round_front_corners: bool = True
    include_cable_contour: bool = False
    cable_contour_length_mm: int = 400
    cable_contour_depth_mm: int = 60
    workstation_front_radius_mm: int = 120

    def __post_init__(self) -> None:
        if self.length_mm <= 0 or self.width_mm <= 0:
            raise ValueError("Length and width must be positive")
        if self.thickness_mm <= 0:
            raise ValueError("Thickness must be positive")
        if self.quantity <= 0:
            raise ValueError("Quantity must be positive")

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class CatalogueMaterial:
    """A stocked sheet material from the live catalogue.

    Measurements are kept as the free text the catalogue holds
    ("3600mm", "3.6m"); they are normalised where they are consumed.

    Attributes:
        id: Unique catalogue identifier.
        name: Display name.
        material_type: Free-text type, e.g. "Melamine" or "Veneer".
        finish: Free-text finish, e.g. "Matte" or "Semi-gloss".
        supplier_sku: Supplier part number.
        hex_code: Optional swatch colour.
        max_length: Largest sheet length as free text.
        max_width: Largest sheet width as free text.
        available_thicknesses: Stocked thicknesses as free text.
    """

    id: str
    name: str
    material_type: str = ""
    finish: str = ""
    supplier_sku: str = ""
    hex_code: str | None = None
    max_length: str | None = None
    max_width: str | None = None
    available_thicknesses: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Catalogue material id must not be empty")
