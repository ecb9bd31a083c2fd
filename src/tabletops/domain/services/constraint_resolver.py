"""Constraint resolution for tabletop configurations.

The resolver is a pure reducer: ``apply(state, event) -> state``. Each
event describes one change (a shape pick, a slider move, typed text, a
catalogue pick, a parsed outline) and the returned state always satisfies:

1. Round tops have ``length_mm == width_mm`` within the diameter limit.
2. Rounded rectangles keep ``50 <= edge_radius_mm <= width_mm // 2``.
3. ``thickness_mm`` belongs to the active thickness set.
4. Length and width sit inside the effective shape/catalogue limits.
5. Custom shapes take length and width from the outline bounding box
   and are exempt from rule 4.

Typed text is held in ``ConfiguratorState.drafts`` until it parses, so a
field can be cleared and retyped without snapping back mid-edit. A draft
is dropped as soon as its field's committed value changes any other way,
and on blur. What a text box shows is derived by ``display_text``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Union

from ..entities import CatalogueMaterial, TabletopConfig
from ..value_objects import (
    DimensionLimits,
    EdgeProfile,
    Finish,
    MaterialKind,
    OutlineBounds,
    ParsedCustomOutline,
    TableShape,
)
from .catalogue_rules import (
    MAX_QUANTITY,
    MAX_SUPER_ELLIPSE_EXPONENT,
    MIN_EDGE_RADIUS_MM,
    MIN_QUANTITY,
    MIN_SUPER_ELLIPSE_EXPONENT,
    effective_limits,
    map_finish,
    map_material_kind,
)
from .measurements import round_half_up
from .thickness import ThicknessCatalogResolver

logger = logging.getLogger(__name__)

ENUM_FIELDS: dict[str, type] = {
    "shape": TableShape,
    "material": MaterialKind,
    "finish": Finish,
    "edge_profile": EdgeProfile,
}
BOOL_FIELDS = frozenset({"round_front_corners", "include_cable_contour"})
PASS_THROUGH_FIELDS = frozenset(
    {
        "left_return_mm",
        "right_return_mm",
        "internal_radius_mm",
        "external_radius_mm",
        "cable_contour_length_mm",
        "cable_contour_depth_mm",
        "workstation_front_radius_mm",
    }
)
DIMENSION_FIELDS = frozenset({"length_mm", "width_mm"})
NUMERIC_FIELDS = (
    DIMENSION_FIELDS
    | PASS_THROUGH_FIELDS
    | {"thickness_mm", "edge_radius_mm", "super_ellipse_exponent", "quantity"}
)


@dataclass(frozen=True)
class ConfiguratorState:
    """Everything the resolver needs to keep a configuration consistent.

    Attributes:
        config: The committed configuration.
        material: Selected catalogue material, if any.
        outline: Most recently parsed custom outline, if any.
        drafts: Provisional text per field while the user is typing.
    """

    config: TabletopConfig = field(default_factory=TabletopConfig)
    material: CatalogueMaterial | None = None
    outline: ParsedCustomOutline | None = None
    drafts: Mapping[str, str] = field(default_factory=dict)


# --- Events ---


@dataclass(frozen=True)
class ShapeChanged:
    shape: TableShape


@dataclass(frozen=True)
class FieldChanged:
    """A committed value from a slider, toggle or select."""

    field: str
    value: Any


@dataclass(frozen=True)
class ManualTextEdited:
    """Raw text typed into a numeric input."""

    field: str
    text: str


@dataclass(frozen=True)
class ManualTextCommitted:
    """A numeric input lost focus."""

    field: str


@dataclass(frozen=True)
class MaterialSelected:
    material: CatalogueMaterial | None


@dataclass(frozen=True)
class OutlineParsed:
    outline: ParsedCustomOutline


@dataclass(frozen=True)
class OutlineCleared:
    pass


ConfigEvent = Union[
    ShapeChanged,
    FieldChanged,
    ManualTextEdited,
    ManualTextCommitted,
    MaterialSelected,
    OutlineParsed,
    OutlineCleared,
]


def _clamp(value, low, high):
    # The upper bound wins when the window is inverted.
    return min(high, max(low, value))


def _parse_manual(text: str | None) -> float | None:
    if text is None:
        return None
    try:
        number = float(text.strip())
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _discard_drafts(
    state: ConfiguratorState, previous: TabletopConfig, always: str | None = None
) -> ConfiguratorState:
    """Drop drafts whose committed value no longer matches ``previous``."""
    drafts = {
        name: text
        for name, text in state.drafts.items()
        if name != always and getattr(state.config, name) == getattr(previous, name)
    }
    if len(drafts) == len(state.drafts):
        return state
    return replace(state, drafts=drafts)


def outline_extents(bounds: OutlineBounds) -> tuple[int, int]:
    """Return (length, width) in whole millimetres for an outline's box."""
    return max(1, round_half_up(bounds.width)), max(1, round_half_up(bounds.height))


class ConfigConstraintResolver:
    """Applies configuration events while preserving every invariant.

    Example:
        >>> resolver = ConfigConstraintResolver()
        >>> state = resolver.normalize(ConfiguratorState())
        >>> state = resolver.apply(state, ShapeChanged(TableShape.ROUND))
        >>> state.config.length_mm == state.config.width_mm
        True
    """

    def __init__(self, thicknesses: ThicknessCatalogResolver | None = None) -> None:
        self.thicknesses = thicknesses or ThicknessCatalogResolver()

    # --- Queries ---

    def available_thicknesses(self, state: ConfiguratorState) -> tuple[int, ...]:
        return self.thicknesses.available_for(state.material)

    def limits(self, state: ConfiguratorState) -> DimensionLimits:
        return effective_limits(state.config.shape, state.material)

    def display_text(self, state: ConfiguratorState, name: str) -> str:
        """Text a numeric input should show: the draft, else the committed value."""
        if name in state.drafts:
            return state.drafts[name]
        value = getattr(state.config, name)
        if isinstance(value, float):
            return f"{value:g}"
        return str(value)

    # --- Reducer ---

    def apply(self, state: ConfiguratorState, event: ConfigEvent) -> ConfiguratorState:
        """Return a new consistent state with ``event`` applied."""
        match event:
            case ShapeChanged(shape=shape):
                config = replace(state.config, shape=TableShape(shape))
                return self._settle(replace(state, config=config))
            case FieldChanged(field=name, value=value):
                return self._apply_field(state, name, value)
            case ManualTextEdited(field=name, text=text):
                return self._apply_manual_text(state, name, text)
            case ManualTextCommitted(field=name):
                return self._apply_blur(state, name)
            case MaterialSelected(material=material):
                return self._apply_material(state, material)
            case OutlineParsed(outline=outline):
                config = replace(state.config, shape=TableShape.CUSTOM)
                return self._settle(replace(state, outline=outline, config=config))
            case OutlineCleared():
                return replace(state, outline=None)
        raise TypeError(f"Unsupported configuration event: {type(event).__name__}")

    def apply_all(
        self, state: ConfiguratorState, events: list[ConfigEvent]
    ) -> ConfiguratorState:
        for event in events:
            state = self.apply(state, event)
        return state

    def normalize(self, state: ConfiguratorState) -> ConfiguratorState:
        """Re-apply every invariant without any new input (idempotent)."""
        return self._settle(state)

    # --- Event handlers ---

    def _apply_field(
        self, state: ConfiguratorState, name: str, value: Any
    ) -> ConfiguratorState:
        if name == "shape":
            return self.apply(state, ShapeChanged(TableShape(value)))
        if name in ENUM_FIELDS:
            config = replace(state.config, **{name: ENUM_FIELDS[name](value)})
            return self._settle(replace(state, config=config))
        if name in BOOL_FIELDS:
            config = replace(state.config, **{name: bool(value)})
            return replace(state, config=config)
        if name in NUMERIC_FIELDS:
            try:
                number = float(value)
            except (ValueError, OverflowError) as e:
                raise ValueError(f"{name} must be a finite number, got {value!r}") from e
            if not math.isfinite(number):
                raise ValueError(f"{name} must be a finite number, got {value!r}")
            return self._commit_number(state, name, number)
        raise ValueError(f"Unknown configuration field: {name}")

    def _apply_manual_text(
        self, state: ConfiguratorState, name: str, text: str
    ) -> ConfiguratorState:
        if name not in NUMERIC_FIELDS:
            raise ValueError(f"{name} does not accept typed input")
        number = _parse_manual(text)
        if number is None:
            return replace(state, drafts={**state.drafts, name: text})
        committed = self._commit_number(state, name, number)
        return replace(committed, drafts={**committed.drafts, name: text})

    def _apply_blur(self, state: ConfiguratorState, name: str) -> ConfiguratorState:
        # Parsable text was committed while typing, so blur only has to
        # discard the draft and fall back to the committed value.
        if name not in NUMERIC_FIELDS:
            raise ValueError(f"{name} does not accept typed input")
        drafts = {key: text for key, text in state.drafts.items() if key != name}
        return self._settle(replace(state, drafts=drafts))

    def _apply_material(
        self, state: ConfiguratorState, material: CatalogueMaterial | None
    ) -> ConfiguratorState:
        config = state.config
        if material is not None:
            kind = map_material_kind(material.material_type)
            finish = map_finish(material.finish, config.finish)
            if kind != config.material or finish != config.finish:
                config = replace(config, material=kind, finish=finish)
        return self._settle(replace(state, material=material, config=config))

    # --- Helpers ---

    def _commit_number(
        self, state: ConfiguratorState, name: str, number: float
    ) -> ConfiguratorState:
        """Clamp or snap a single numeric field, then settle the rest.

        The field's own draft is discarded, along with the draft of any
        other field whose committed value moves as a result.
        """
        previous = state.config
        state = _discard_drafts(state, previous, always=name)
        config = state.config

        if name in DIMENSION_FIELDS:
            if config.shape == TableShape.CUSTOM:
                logger.debug(f"Ignoring {name} edit while the outline drives dimensions")
                return state
            limits = effective_limits(config.shape, state.material)
            value = round_half_up(number)
            if config.shape == TableShape.ROUND:
                diameter = _clamp(value, limits.min_length, limits.max_diameter)
                config = replace(config, length_mm=diameter, width_mm=diameter)
            elif name == "length_mm":
                config = replace(
                    config,
                    length_mm=_clamp(value, limits.min_length, limits.max_length),
                )
            else:
                config = replace(
                    config, width_mm=_clamp(value, limits.min_width, limits.max_width)
                )
        elif name == "thickness_mm":
            available = self.available_thicknesses(state)
            config = replace(config, thickness_mm=self.thicknesses.coerce(number, available))
        elif name == "edge_radius_mm":
            upper = max(MIN_EDGE_RADIUS_MM, config.width_mm // 2)
            config = replace(
                config,
                edge_radius_mm=_clamp(round_half_up(number), MIN_EDGE_RADIUS_MM, upper),
            )
        elif name == "super_ellipse_exponent":
            config = replace(
                config,
                super_ellipse_exponent=_clamp(
                    number, MIN_SUPER_ELLIPSE_EXPONENT, MAX_SUPER_ELLIPSE_EXPONENT
                ),
            )
        elif name == "quantity":
            config = replace(
                config, quantity=_clamp(round_half_up(number), MIN_QUANTITY, MAX_QUANTITY)
            )
        else:
            config = replace(config, **{name: max(0, round_half_up(number))})

        settled = self._settle(replace(state, config=config))
        return _discard_drafts(settled, previous)

    def _settle(self, state: ConfiguratorState) -> ConfiguratorState:
        config = self._enforce(state.config, state.material, state.outline)
        if config == state.config:
            return state
        return _discard_drafts(replace(state, config=config), state.config)

    def _enforce(
        self,
        config: TabletopConfig,
        material: CatalogueMaterial | None,
        outline: ParsedCustomOutline | None,
    ) -> TabletopConfig:
        limits = effective_limits(config.shape, material)
        length, width = config.length_mm, config.width_mm

        if config.shape == TableShape.CUSTOM:
            if outline is not None and outline.bounds is not None:
                length, width = outline_extents(outline.bounds)
        elif config.shape == TableShape.ROUND:
            diameter = _clamp(min(length, width), limits.min_length, limits.max_diameter)
            length = width = diameter
        else:
            length = _clamp(length, limits.min_length, limits.max_length)
            width = _clamp(width, limits.min_width, limits.max_width)

        edge_radius = config.edge_radius_mm
        if config.shape == TableShape.ROUNDED_RECT:
            edge_radius = _clamp(
                edge_radius, MIN_EDGE_RADIUS_MM, max(MIN_EDGE_RADIUS_MM, width // 2)
            )

        thickness = self.thicknesses.coerce(
            config.thickness_mm, self.thicknesses.available_for(material)
        )

        return replace(
            config,
            length_mm=length,
            width_mm=width,
            edge_radius_mm=edge_radius,
            thickness_mm=thickness,
            super_ellipse_exponent=_clamp(
                config.super_ellipse_exponent,
                MIN_SUPER_ELLIPSE_EXPONENT,
                MAX_SUPER_ELLIPSE_EXPONENT,
            ),
            quantity=_clamp(config.quantity, MIN_QUANTITY, MAX_QUANTITY),
        )


def resolve_config(
    config: TabletopConfig,
    event: ConfigEvent,
    material: CatalogueMaterial | None = None,
    outline: ParsedCustomOutline | None = None,
) -> TabletopConfig:
    """Apply one event to a bare configuration and return the result."""
    state = ConfiguratorState(config=config, material=material, outline=outline)
    return ConfigConstraintResolver().apply(state, event).config
