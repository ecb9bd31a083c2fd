"""Tests for bounding box reduction."""

from __future__ import annotations

import math

import pytest

from tabletops.domain.services import calculate_bounds
from tabletops.domain.value_objects import (
    OutlineBounds,
    OutlinePoint,
    ParsedCustomOutline,
    json_number,
)
from tabletops.web.schemas import OutlineSchema


def path(*points: tuple[float, float]) -> tuple[OutlinePoint, ...]:
    return tuple(OutlinePoint(x, y) for x, y in points)


class TestCalculateBounds:
    def test_single_square(self) -> None:
        square = path((0, 0), (10, 0), (10, 10), (0, 10), (0, 0))
        assert calculate_bounds([square]) == OutlineBounds(0, 0, 10, 10)

    def test_spans_every_path(self) -> None:
        bounds = calculate_bounds([path((0, 0), (5, 5)), path((-3, 2), (4, 12))])
        assert bounds == OutlineBounds(-3, 0, 5, 12)
        assert bounds.width == 8
        assert bounds.height == 12

    def test_no_paths(self) -> None:
        assert calculate_bounds([]) is None

    def test_only_empty_paths(self) -> None:
        assert calculate_bounds([()]) is None

    @pytest.mark.parametrize(
        "points",
        [
            ((math.nan, 0), (1, 1)),
            ((0, 0), (1, math.nan)),
            ((0, 0), (math.nan, math.nan), (5, 5)),
        ],
    )
    def test_nan_coordinate_gives_no_bounds(self, points) -> None:
        assert calculate_bounds([path(*points)]) is None

    def test_single_point_has_zero_extent(self) -> None:
        bounds = calculate_bounds([path((3, 4))])
        assert bounds == OutlineBounds(3, 4, 3, 4)
        assert bounds.width == 0


class TestOutlineBounds:
    def test_inverted_bounds_rejected(self) -> None:
        with pytest.raises(ValueError):
            OutlineBounds(min_x=10, min_y=0, max_x=0, max_y=5)

    def test_to_dict_uses_camel_case(self) -> None:
        assert OutlineBounds(0, 1, 2, 3).to_dict() == {
            "minX": 0,
            "minY": 1,
            "maxX": 2,
            "maxY": 3,
        }


class TestNonNumericCoordinates:
    def test_json_number(self) -> None:
        assert json_number(2.5) == 2.5
        assert json_number(math.nan) is None

    def test_domain_and_web_serialise_nan_as_null(self) -> None:
        broken = path((0, 0), (math.nan, 4))
        outline = ParsedCustomOutline(paths=(broken,), bounds=calculate_bounds([broken]))

        as_dict = outline.to_dict()
        schema = OutlineSchema.from_domain(outline)

        assert as_dict["paths"][0][1] == {"x": None, "y": 4}
        assert schema.paths[0][1].x is None
        assert schema.bounds is None
