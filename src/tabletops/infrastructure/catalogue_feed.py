"""In-process catalogue snapshot feed.

Stands in for the live materials collection: every ``publish`` pushes a
full snapshot, ordered by name, to all subscribers. New subscribers
receive the current snapshot immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tabletops.contracts.protocols import CatalogueListener, Unsubscribe
from tabletops.domain.entities import CatalogueMaterial

logger = logging.getLogger(__name__)


class InMemoryCatalogueFeed:
    """Catalogue feed backed by a list held in memory.

    Example:
        >>> feed = InMemoryCatalogueFeed(materials)
        >>> unsubscribe = feed.subscribe(on_snapshot)
        >>> feed.publish(updated_materials)
        >>> unsubscribe()
    """

    def __init__(self, materials: Iterable[CatalogueMaterial] = ()) -> None:
        self._snapshot: tuple[CatalogueMaterial, ...] = _ordered(materials)
        self._listeners: list[CatalogueListener] = []

    @property
    def snapshot(self) -> tuple[CatalogueMaterial, ...]:
        return self._snapshot

    def find(self, material_id: str) -> CatalogueMaterial | None:
        return next((m for m in self._snapshot if m.id == material_id), None)

    def subscribe(self, on_snapshot: CatalogueListener) -> Unsubscribe:
        self._listeners.append(on_snapshot)
        on_snapshot(self._snapshot)

        def unsubscribe() -> None:
            if on_snapshot in self._listeners:
                self._listeners.remove(on_snapshot)

        return unsubscribe

    def publish(self, materials: Iterable[CatalogueMaterial]) -> None:
        """Replace the snapshot and notify every subscriber."""
        self._snapshot = _ordered(materials)
        logger.info(
            f"Publishing catalogue snapshot of {len(self._snapshot)} material(s) "
            f"to {len(self._listeners)} subscriber(s)"
        )
        for listener in list(self._listeners):
            listener(self._snapshot)


def _ordered(materials: Iterable[CatalogueMaterial]) -> tuple[CatalogueMaterial, ...]:
    return tuple(sorted(materials, key=lambda m: m.name))
