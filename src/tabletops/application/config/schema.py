"""Pydantic models for configurator settings and catalogue files.

Settings are plain snake_case JSON. Catalogue files mirror the live
materials collection and therefore use its camelCase keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tabletops.domain.value_objects import EdgeProfile, Finish, MaterialKind, TableShape

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PricingSettings(BaseModel):
    """Authoritative pricing service settings.

    Attributes:
        endpoint: Base URL of the functions host; None prices locally only.
        function_name: Callable pricing function name.
        timeout_seconds: Request timeout.
        debounce_ms: Quiet period before a remote request is sent.
    """

    model_config = ConfigDict(extra="forbid")

    endpoint: str | None = None
    function_name: str = Field(default="calculateTabletopPrice", min_length=1)
    timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    debounce_ms: int = Field(default=250, ge=0, le=5000)


class TabletopDefaultsConfig(BaseModel):
    """Starting configuration for new sessions."""

    model_config = ConfigDict(extra="forbid")

    shape: TableShape = TableShape.ROUNDED_RECT
    length_mm: int = Field(default=2000, gt=0)
    width_mm: int = Field(default=900, gt=0)
    thickness_mm: int = Field(default=25, gt=0)
    edge_radius_mm: int = Field(default=150, ge=0)
    super_ellipse_exponent: float = Field(default=2.5, gt=0)
    material: MaterialKind = MaterialKind.LAMINATE
    finish: Finish = Finish.MATTE
    edge_profile: EdgeProfile = EdgeProfile.EDGED
    quantity: int = Field(default=1, ge=1, le=50)
    left_return_mm: int = Field(default=800, ge=0)
    right_return_mm: int = Field(default=800, ge=0)
    internal_radius_mm: int = Field(default=60, ge=0)
    external_radius_mm: int = Field(default=80, ge=0)
    round_front_corners: bool = True
    include_cable_contour: bool = False
    cable_contour_length_mm: int = Field(default=400, ge=0)
    cable_contour_depth_mm: int = Field(default=60, ge=0)
    workstation_front_radius_mm: int = Field(default=120, ge=0)


class ConfiguratorSettings(BaseModel):
    """Root settings model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    defaults: TabletopDefaultsConfig = Field(default_factory=TabletopDefaultsConfig)
    catalogue_path: str | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version {v!r}. Supported: {supported}")
        return v


class CatalogueMaterialConfig(BaseModel):
    """One record from the materials collection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    material_type: str = ""
    finish: str = ""
    supplier_sku: str = ""
    hex_code: str | None = None
    max_length: str | None = None
    max_width: str | None = None
    available_thicknesses: list[str] = Field(default_factory=list)

    @field_validator("max_length", "max_width", mode="before")
    @classmethod
    def coerce_measurement(cls, v: object) -> object:
        # Older records store plain numbers.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("available_thicknesses", mode="before")
    @classmethod
    def coerce_thicknesses(cls, v: object) -> object:
        if isinstance(v, list):
            return [str(item) for item in v]
        return v
