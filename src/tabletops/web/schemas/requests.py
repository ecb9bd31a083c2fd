"""Pydantic request schemas for the REST API."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

from tabletops.application.config import CatalogueMaterialConfig
from tabletops.domain.services.constraint_resolver import NUMERIC_FIELDS
from tabletops.domain.value_objects import TableShape
from tabletops.web.schemas.common import OutlineSchema, TabletopConfigSchema


class OutlineRequest(BaseModel):
    """Request for parsing an uploaded drawing."""

    file_name: str = Field(..., min_length=1, description="Original file name (.dxf or .dwg)")
    content: str = Field(..., description="File contents as text")


class ShapeChangedSchema(BaseModel):
    type: Literal["shape_changed"] = "shape_changed"
    shape: TableShape


class FieldChangedSchema(BaseModel):
    """A committed slider, toggle or select value."""

    type: Literal["field_changed"] = "field_changed"
    field: str
    value: bool | int | float | str


class ManualTextEditedSchema(BaseModel):
    type: Literal["manual_text_edited"] = "manual_text_edited"
    field: str
    text: str


class ManualTextCommittedSchema(BaseModel):
    type: Literal["manual_text_committed"] = "manual_text_committed"
    field: str


class MaterialSelectedSchema(BaseModel):
    """Select a material from the request catalogue, or clear with null."""

    type: Literal["material_selected"] = "material_selected"
    material_id: str | None = None


class OutlineParsedSchema(BaseModel):
    type: Literal["outline_parsed"] = "outline_parsed"
    outline: OutlineSchema


class OutlineClearedSchema(BaseModel):
    type: Literal["outline_cleared"] = "outline_cleared"


ConfigEventSchema = Annotated[
    Union[
        ShapeChangedSchema,
        FieldChangedSchema,
        ManualTextEditedSchema,
        ManualTextCommittedSchema,
        MaterialSelectedSchema,
        OutlineParsedSchema,
        OutlineClearedSchema,
    ],
    Field(discriminator="type"),
]


class ResolveRequest(BaseModel):
    """Request for applying change events to a configuration."""

    config: TabletopConfigSchema = Field(
        default_factory=TabletopConfigSchema, description="Starting configuration"
    )
    catalogue: list[CatalogueMaterialConfig] = Field(
        default_factory=list, description="Catalogue snapshot materials may be picked from"
    )
    material_id: str | None = Field(default=None, description="Initially selected material")
    outline: OutlineSchema | None = Field(default=None, description="Current custom outline")
    drafts: dict[str, str] = Field(
        default_factory=dict, description="Text currently typed into numeric inputs"
    )
    events: list[ConfigEventSchema] = Field(
        default_factory=list, description="Changes to apply, in order"
    )

    @field_validator("drafts")
    @classmethod
    def validate_draft_fields(cls, v: dict[str, str]) -> dict[str, str]:
        unknown = sorted(set(v) - NUMERIC_FIELDS)
        if unknown:
            names = ", ".join(unknown)
            raise ValueError(f"Drafts are only kept for numeric fields, got: {names}")
        return v


class PriceEstimateRequest(BaseModel):
    """Request for a local price estimate."""

    config: TabletopConfigSchema = Field(..., description="Configuration to price")
