"""Coordinate range helpers.

Python integers do not overflow, so every predicate in shapekit is exact at
any magnitude. Callers that hand coordinates to fixed-width consumers can
validate against MAX_SAFE_COORDINATE: inside that bound every intermediate
value a predicate forms, including the product of two orientation values,
fits in a signed 64-bit integer.
"""

import logging
from typing import Iterable, List

from .types import Point, Segment, Line, Ray, Circle

logger = logging.getLogger(__name__)

MAX_SAFE_COORDINATE = 2 ** 14


class GeometryError(Exception):
    """Base exception for shapekit."""


class CoordinateRangeError(GeometryError, ValueError):
    """A coordinate lies outside the safe range."""

    def __init__(self, value: int, bound: int):
        self.value = value
        self.bound = bound
        super().__init__(f"coordinate {value} outside [-{bound}, {bound}]")


def check_coordinates(*values: int, bound: int = MAX_SAFE_COORDINATE) -> None:
    """Raise CoordinateRangeError for the first value with |value| > bound."""
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"coordinate must be int, got {type(value).__name__}")
        if abs(value) > bound:
            logger.debug("Coordinate %d rejected (bound %d)", value, bound)
            raise CoordinateRangeError(value, bound)


def shape_coordinates(shape) -> List[int]:
    """Integer coordinates defining a shape, in field order.

    An anchored line reports its two defining points (the second is
    recovered as anchor - direction); a line built from bare coefficients
    reports the coefficients.
    """
    if isinstance(shape, Point):
        return [shape.x, shape.y]
    if isinstance(shape, Segment):
        return _flatten((shape.start, shape.finish))
    if isinstance(shape, Ray):
        return _flatten((shape.start, shape.through))
    if isinstance(shape, Circle):
        return [shape.center.x, shape.center.y, shape.radius]
    if isinstance(shape, Line):
        if shape.anchor is None:
            return [shape.a, shape.b, shape.c]
        direction = shape.direction()
        second = Point(shape.anchor.x - direction.x, shape.anchor.y - direction.y)
        return _flatten((shape.anchor, second))
    raise TypeError(f"not a shape: {type(shape).__name__}")


def _flatten(points: Iterable) -> List[int]:
    return [value for point in points for value in point]
