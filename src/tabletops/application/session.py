"""Configurator session: one buyer's live configuration.

The session owns the ``ConfiguratorState``, routes every change through
the constraint resolver, feeds the result to the price estimator and tells
collaborators (3D preview, persistence, price display, outline renderer)
what changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from tabletops.application.price_estimator import PriceEstimator, PriceUpdate
from tabletops.application.uploads import CustomShapeDetails, ingest_drawing
from tabletops.domain.entities import CatalogueMaterial, TabletopConfig
from tabletops.domain.services.constraint_resolver import (
    ConfigConstraintResolver,
    ConfigEvent,
    ConfiguratorState,
    MaterialSelected,
    OutlineParsed,
)
from tabletops.domain.value_objects import ParsedCustomOutline

if TYPE_CHECKING:
    from tabletops.contracts.protocols import CatalogueFeedProtocol, Unsubscribe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensionsChanged:
    length_mm: int
    width_mm: int


@dataclass(frozen=True)
class OutlineReady:
    outline: ParsedCustomOutline


@dataclass(frozen=True)
class PriceChanged:
    update: PriceUpdate


SessionEvent = Union[DimensionsChanged, OutlineReady, PriceChanged]
SessionListener = Callable[[SessionEvent], None]


class ConfiguratorSession:
    """Coordinates resolver, estimator and catalogue for one configuration.

    Attributes:
        resolver: Constraint resolver applied to every change.
        estimator: Price estimator fed after every committed change.

    Example:
        >>> session = ConfiguratorSession(estimator=PriceEstimator())
        >>> session.dispatch(ShapeChanged(TableShape.ROUND))
        >>> session.config.length_mm == session.config.width_mm
        True
    """

    def __init__(
        self,
        config: TabletopConfig | None = None,
        resolver: ConfigConstraintResolver | None = None,
        estimator: PriceEstimator | None = None,
    ) -> None:
        self.resolver = resolver or ConfigConstraintResolver()
        self.estimator = estimator or PriceEstimator()
        self._state = self.resolver.normalize(
            ConfiguratorState(config=config or TabletopConfig())
        )
        self._catalogue: tuple[CatalogueMaterial, ...] = ()
        self._unsubscribe_catalogue: Unsubscribe | None = None
        self._listeners: list[SessionListener] = []
        self._unsubscribe_price = self.estimator.subscribe(
            lambda update: self._emit(PriceChanged(update))
        )

    # --- Queries ---

    @property
    def state(self) -> ConfiguratorState:
        return self._state

    @property
    def config(self) -> TabletopConfig:
        return self._state.config

    @property
    def catalogue(self) -> tuple[CatalogueMaterial, ...]:
        return self._catalogue

    @property
    def available_thicknesses(self) -> tuple[int, ...]:
        return self.resolver.available_thicknesses(self._state)

    def display_text(self, name: str) -> str:
        return self.resolver.display_text(self._state, name)

    def subscribe(self, listener: SessionListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Commands ---

    def start(self) -> PriceUpdate:
        """Publish the first price for the initial configuration."""
        return self.estimator.update(self.config)

    def dispatch(self, event: ConfigEvent) -> ConfiguratorState:
        """Apply one change and notify collaborators of the outcome."""
        previous = self._state.config
        self._state = self.resolver.apply(self._state, event)
        config = self._state.config

        if (config.length_mm, config.width_mm) != (previous.length_mm, previous.width_mm):
            self._emit(DimensionsChanged(config.length_mm, config.width_mm))
        if config != previous:
            self.estimator.update(config)
        return self._state

    def select_material(self, material_id: str | None) -> ConfiguratorState:
        """Select a catalogue material by id, or clear the selection.

        Raises:
            KeyError: If the id is not in the current catalogue snapshot.
        """
        if material_id is None:
            return self.dispatch(MaterialSelected(None))
        material = next((m for m in self._catalogue if m.id == material_id), None)
        if material is None:
            raise KeyError(f"Unknown catalogue material: {material_id}")
        return self.dispatch(MaterialSelected(material))

    def upload_drawing(self, file_name: str, content: bytes | str) -> CustomShapeDetails:
        """Ingest an uploaded drawing and lock dimensions to its outline.

        DWG uploads leave the configuration untouched.

        Raises:
            UnsupportedFileTypeError: Extension is not dxf or dwg.
            NoOutlineFoundError: The DXF has no usable paths.
        """
        details = ingest_drawing(file_name, content)
        if details.outline is not None:
            self._emit(OutlineReady(details.outline))
            self.dispatch(OutlineParsed(details.outline))
        return details

    def connect_catalogue(self, feed: CatalogueFeedProtocol) -> None:
        """Follow a catalogue feed until ``close`` is called."""
        if self._unsubscribe_catalogue is not None:
            self._unsubscribe_catalogue()
        self._unsubscribe_catalogue = feed.subscribe(self._on_catalogue_snapshot)

    def close(self) -> None:
        if self._unsubscribe_catalogue is not None:
            self._unsubscribe_catalogue()
            self._unsubscribe_catalogue = None
        self._unsubscribe_price()
        self.estimator.close()

    # --- Internals ---

    def _on_catalogue_snapshot(self, materials: Sequence[CatalogueMaterial]) -> None:
        self._catalogue = tuple(materials)
        logger.info(f"Received catalogue snapshot with {len(self._catalogue)} material(s)")

        selected = self._state.material
        if selected is None:
            return
        refreshed = next((m for m in self._catalogue if m.id == selected.id), None)
        if refreshed is None:
            logger.warning(f"Selected material {selected.id} left the catalogue")
            self.dispatch(MaterialSelected(None))
        elif refreshed != selected:
            self.dispatch(MaterialSelected(refreshed))

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
