"""Legal thickness sets derived from catalogue materials."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..entities import CatalogueMaterial
from .measurements import parse_thickness_mm

logger = logging.getLogger(__name__)

DEFAULT_THICKNESSES: tuple[int, ...] = (12, 16, 18, 25, 33)


class ThicknessCatalogResolver:
    """Derives the active thickness set and snaps values into it.

    Example:
        >>> resolver = ThicknessCatalogResolver()
        >>> resolver.available_for(None)
        (12, 16, 18, 25, 33)
        >>> resolver.snap(20, (12, 16, 18, 25, 33))
        18
    """

    def __init__(self, default: Sequence[int] = DEFAULT_THICKNESSES) -> None:
        if not default:
            raise ValueError("Default thickness set must not be empty")
        self.default = tuple(sorted(set(default)))

    def available_for(self, material: CatalogueMaterial | None) -> tuple[int, ...]:
        """Return the ascending, de-duplicated thicknesses for a material.

        Entries that do not parse are dropped. Falls back to the default
        set when no material is selected or nothing usable remains.
        """
        if material is None:
            return self.default

        parsed: set[int] = set()
        for entry in material.available_thicknesses:
            value = parse_thickness_mm(entry)
            if value is None:
                logger.warning(
                    f"Ignoring unparsable thickness {entry!r} on material {material.id}"
                )
                continue
            parsed.add(value)

        return tuple(sorted(parsed)) or self.default

    @staticmethod
    def snap(value: float, available: Sequence[int]) -> int:
        """Return the member of ``available`` nearest to ``value``.

        The scan runs in ascending order and only replaces the best match
        on a strictly smaller distance, so midpoints go to the smaller
        candidate.
        """
        if not available:
            raise ValueError("Cannot snap to an empty thickness set")
        best = available[0]
        best_distance = abs(value - best)
        for candidate in available[1:]:
            distance = abs(value - candidate)
            if distance < best_distance:
                best = candidate
                best_distance = distance
        return best

    def coerce(self, value: float, available: Sequence[int]) -> int:
        """Keep members untouched and snap everything else."""
        if value in available:
            return int(value)
        return self.snap(value, available)
