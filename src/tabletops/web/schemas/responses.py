"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field

from tabletops.web.schemas.common import (
    BoundsSchema,
    OutlineSchema,
    QuoteSchema,
    TabletopConfigSchema,
)


class OutlineResponse(BaseModel):
    """Response for a parsed (or stored) drawing."""

    file_name: str = Field(..., description="Original file name")
    file_size: int = Field(..., description="Size in bytes")
    size_label: str = Field(..., description="Human-readable size")
    file_type: str = Field(..., description="dxf or dwg")
    uploaded_at: str = Field(..., description="ISO-8601 upload timestamp")
    notes: str = Field(..., description="Status note")
    preview_supported: bool = Field(..., description="Whether an outline preview exists")
    preview_message: str | None = Field(default=None, description="Why no preview exists")
    outline: OutlineSchema | None = Field(default=None, description="Parsed outline")
    bounds: BoundsSchema | None = Field(default=None, description="Outline bounding box")
    svg: str | None = Field(default=None, description="SVG preview markup")


class LimitsSchema(BaseModel):
    """Effective length/width window."""

    min_length: int
    max_length: int
    min_width: int
    max_width: int


class ResolveResponse(BaseModel):
    """Response for configuration resolution."""

    config: TabletopConfigSchema = Field(..., description="Resolved configuration")
    material_id: str | None = Field(default=None, description="Selected material")
    limits: LimitsSchema = Field(..., description="Effective dimension limits")
    available_thicknesses: list[int] = Field(..., description="Selectable thicknesses in mm")
    display_text: dict[str, str] = Field(
        default_factory=dict, description="What each numeric input should show"
    )


class PriceEstimateResponse(BaseModel):
    """Response for a local price estimate."""

    quote: QuoteSchema
    payload: dict = Field(..., description="Payload the pricing service would receive")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict] | dict | None = Field(default=None, description="Additional details")
