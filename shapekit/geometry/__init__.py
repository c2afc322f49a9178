"""Geometry primitives for shapekit."""

from .vector import Vector
from .types import Shape, Point, Segment, Line, Ray, Circle
from .predicates import (
    orientation,
    on_segment,
    segments_intersect,
)
from .limits import (
    MAX_SAFE_COORDINATE,
    GeometryError,
    CoordinateRangeError,
    check_coordinates,
    shape_coordinates,
)

__all__ = [
    "Vector",
    "Shape",
    "Point",
    "Segment",
    "Line",
    "Ray",
    "Circle",
    "orientation",
    "on_segment",
    "segments_intersect",
    "MAX_SAFE_COORDINATE",
    "GeometryError",
    "CoordinateRangeError",
    "check_coordinates",
    "shape_coordinates",
]
