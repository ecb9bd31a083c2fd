"""Configuration resolution endpoints."""

from fastapi import APIRouter, HTTPException

from tabletops.application.config import config_to_catalogue
from tabletops.domain.entities import CatalogueMaterial
from tabletops.domain.services import (
    ConfigEvent,
    ConfiguratorState,
    FieldChanged,
    ManualTextCommitted,
    ManualTextEdited,
    MaterialSelected,
    OutlineCleared,
    OutlineParsed,
    ShapeChanged,
)
from tabletops.domain.services.constraint_resolver import NUMERIC_FIELDS
from tabletops.web.dependencies import ResolverDep
from tabletops.web.exceptions import UnknownMaterialError
from tabletops.web.schemas.common import TabletopConfigSchema
from tabletops.web.schemas.requests import (
    ConfigEventSchema,
    FieldChangedSchema,
    ManualTextCommittedSchema,
    ManualTextEditedSchema,
    MaterialSelectedSchema,
    OutlineClearedSchema,
    OutlineParsedSchema,
    ResolveRequest,
    ShapeChangedSchema,
)
from tabletops.web.schemas.responses import LimitsSchema, ResolveResponse

router = APIRouter(prefix="/configurations", tags=["configurations"])


def _find_material(
    catalogue: dict[str, CatalogueMaterial], material_id: str | None
) -> CatalogueMaterial | None:
    if material_id is None:
        return None
    if material_id not in catalogue:
        raise UnknownMaterialError(material_id, sorted(catalogue))
    return catalogue[material_id]


def _to_event(
    schema: ConfigEventSchema, catalogue: dict[str, CatalogueMaterial]
) -> ConfigEvent:
    if isinstance(schema, ShapeChangedSchema):
        return ShapeChanged(schema.shape)
    if isinstance(schema, FieldChangedSchema):
        return FieldChanged(schema.field, schema.value)
    if isinstance(schema, ManualTextEditedSchema):
        return ManualTextEdited(schema.field, schema.text)
    if isinstance(schema, ManualTextCommittedSchema):
        return ManualTextCommitted(schema.field)
    if isinstance(schema, MaterialSelectedSchema):
        return MaterialSelected(_find_material(catalogue, schema.material_id))
    if isinstance(schema, OutlineParsedSchema):
        return OutlineParsed(schema.outline.to_domain())
    if isinstance(schema, OutlineClearedSchema):
        return OutlineCleared()
    raise TypeError(f"Unsupported event schema: {type(schema).__name__}")


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_configuration(
    request: ResolveRequest,
    resolver: ResolverDep,
) -> ResolveResponse:
    """Apply change events to a configuration and return the result.

    The starting state is normalized before the first event, so the
    response always satisfies the configuration invariants.

    Raises:
        HTTPException: 422 if an event names an unknown or invalid field.
    """
    catalogue = {m.id: m for m in config_to_catalogue(request.catalogue)}
    state = ConfiguratorState(
        config=request.config.to_domain(),
        material=_find_material(catalogue, request.material_id),
        outline=request.outline.to_domain() if request.outline else None,
        drafts=dict(request.drafts),
    )

    try:
        state = resolver.normalize(state)
        state = resolver.apply_all(state, [_to_event(e, catalogue) for e in request.events])
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_event"},
        ) from e

    limits = resolver.limits(state)
    return ResolveResponse(
        config=TabletopConfigSchema.from_domain(state.config),
        material_id=state.material.id if state.material else None,
        limits=LimitsSchema(
            min_length=limits.min_length,
            max_length=limits.max_length,
            min_width=limits.min_width,
            max_width=limits.max_width,
        ),
        available_thicknesses=list(resolver.available_thicknesses(state)),
        display_text={name: resolver.display_text(state, name) for name in sorted(NUMERIC_FIELDS)},
    )
