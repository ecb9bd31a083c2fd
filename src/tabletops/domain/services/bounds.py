"""Bounding box reduction for outline paths."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from ..value_objects import OutlineBounds, OutlinePoint


def _fold(current: float, value: float, pick) -> float:
    # A NaN coordinate poisons its axis for the rest of the scan.
    if math.isnan(current) or math.isnan(value):
        return math.nan
    return pick(current, value)


def calculate_bounds(
    paths: Sequence[Iterable[OutlinePoint]],
) -> OutlineBounds | None:
    """Reduce paths to their axis-aligned bounding box.

    Each axis is tracked independently from +inf/-inf seeds.

    Args:
        paths: Point sequences as produced by the outline parser.

    Returns:
        The bounding box, or None when there are no paths or an axis
        never saw a finite value (including NaN coordinates).
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for path in paths:
        for point in path:
            min_x = _fold(min_x, point.x, min)
            min_y = _fold(min_y, point.y, min)
            max_x = _fold(max_x, point.x, max)
            max_y = _fold(max_y, point.y, max)

    if not paths or not all(map(math.isfinite, (min_x, min_y, max_x, max_y))):
        return None

    return OutlineBounds(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)
