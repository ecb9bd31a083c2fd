"""Normalisation of free-text catalogue measurements."""

from __future__ import annotations

import math
import re

_NON_NUMERIC = re.compile(r"[^0-9.]")

# Magnitudes at or below this are read as metres ("3.6" -> 3600 mm).
METRE_THRESHOLD = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding upwards."""
    return int(math.floor(value + 0.5))


def _strip_to_number(text: str | None) -> float | None:
    if not text:
        return None
    cleaned = _NON_NUMERIC.sub("", text)
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def normalize_measurement_mm(text: str | None) -> int | None:
    """Parse a catalogue measurement into whole millimetres.

    Everything except digits and ``.`` is discarded first, so units and
    spacing are ignored. Values above 10 are taken as millimetres; values
    of 10 or less are taken as metres.

    Args:
        text: Measurement such as "3600mm", "3.6m" or "3.6".

    Returns:
        Millimetres, or None for empty or unparsable input.

    Examples:
        >>> normalize_measurement_mm("3600mm")
        3600
        >>> normalize_measurement_mm("3.6m")
        3600
        >>> normalize_measurement_mm("") is None
        True
    """
    number = _strip_to_number(text)
    if number is None:
        return None
    if number > METRE_THRESHOLD:
        return round_half_up(number)
    return round_half_up(number * 1000)


def parse_thickness_mm(text: str | None) -> int | None:
    """Parse a catalogue thickness entry, always read as millimetres."""
    number = _strip_to_number(text)
    if number is None:
        return None
    return round_half_up(number)
