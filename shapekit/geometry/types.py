"""Shape types for shapekit geometry.

Every shape implements the same four operations: move, contains_point,
cross_segment and clone. Coordinates are Python ints; see `limits` for the
range that stays safe for fixed-width consumers.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from .predicates import orientation, segments_intersect
from .vector import Vector

logger = logging.getLogger(__name__)


class Shape(ABC):
    """Common contract of all shapes."""

    @abstractmethod
    def move(self, vector: Vector) -> "Shape":
        """Translate in place and return self for chaining."""

    @abstractmethod
    def contains_point(self, point: "Point") -> bool:
        """Exact containment test, boundary inclusive."""

    @abstractmethod
    def cross_segment(self, segment: "Segment") -> bool:
        """True if this shape and `segment` share at least one point."""

    @abstractmethod
    def clone(self) -> "Shape":
        """Independent copy of the same concrete type."""


def _require_segment(segment) -> None:
    if not isinstance(segment, Segment):
        raise TypeError(f"expected Segment, got {type(segment).__name__}")


@dataclass
class Point(Shape):
    """2D integer point."""
    x: int = 0
    y: int = 0

    @classmethod
    def coerce(cls, value: Union["Point", tuple]) -> "Point":
        """Accept a Point or an (x, y) pair."""
        if isinstance(value, Point):
            return value
        try:
            x, y = value
        except (TypeError, ValueError):
            raise TypeError(f"cannot interpret {value!r} as a point") from None
        return cls(x, y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __sub__(self, other: "Point") -> Vector:
        return Vector.between(other, self)

    def move(self, vector: Vector) -> "Point":
        self.x += vector.x
        self.y += vector.y
        return self

    def contains_point(self, point: "Point") -> bool:
        return self.x == point.x and self.y == point.y

    def cross_segment(self, segment: "Segment") -> bool:
        # A point crosses a segment exactly when the segment contains it.
        _require_segment(segment)
        return segment.contains_point(self)

    def clone(self) -> "Point":
        return Point(self.x, self.y)


@dataclass
class Segment(Shape):
    """Closed segment between two integer points.

    Endpoint order matters only for the internal direction vector; every
    predicate is symmetric in the two ends.
    """
    start: Point
    finish: Point

    def __post_init__(self):
        # Copy so the segment never aliases points owned by the caller
        self.start = Point.coerce(self.start).clone()
        self.finish = Point.coerce(self.finish).clone()

    def direction(self) -> Vector:
        return Vector.between(self.start, self.finish)

    def move(self, vector: Vector) -> "Segment":
        self.start.move(vector)
        self.finish.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        if (point - self.start).cross(self.direction()) != 0:
            return False
        # Collinear points can still lie outside the segment's extent
        min_x, max_x = sorted((self.start.x, self.finish.x))
        min_y, max_y = sorted((self.start.y, self.finish.y))
        return min_x <= point.x <= max_x and min_y <= point.y <= max_y

    def cross_segment(self, segment: "Segment") -> bool:
        _require_segment(segment)
        return segments_intersect(self.start, self.finish,
                                  segment.start, segment.finish)

    def clone(self) -> "Segment":
        return Segment(self.start, self.finish)

    def distance_to(self, point: Union[Point, tuple]) -> float:
        """Euclidean distance from `point` to the closest point of the segment.

        Projects onto the supporting line and clamps the projection parameter
        to [0, 1]. A zero-length segment is treated as its start point.
        """
        point = Point.coerce(point)
        side = self.direction()
        len_sq = side.dot(side)
        param = (point - self.start).dot(side) / len_sq if len_sq != 0 else -1.0

        if param < 0:
            closest_x, closest_y = float(self.start.x), float(self.start.y)
        elif param > 1:
            closest_x, closest_y = float(self.finish.x), float(self.finish.y)
        else:
            closest_x = self.start.x + param * side.x
            closest_y = self.start.y + param * side.y

        return math.hypot(point.x - closest_x, point.y - closest_y)


@dataclass
class Line(Shape):
    """Infinite line in general form: a*x + b*y + c = 0.

    Built from two points with `Line.through`, which also keeps the first
    point as an anchor, or directly from coefficients.
    """
    a: int
    b: int
    c: int
    anchor: Optional[Point] = None

    def __post_init__(self):
        if self.anchor is not None:
            self.anchor = Point.coerce(self.anchor).clone()

    @classmethod
    def through(cls, first: Union[Point, tuple], second: Union[Point, tuple]) -> "Line":
        first = Point.coerce(first)
        second = Point.coerce(second)
        if first == second:
            logger.debug("Degenerate line through coincident points %s", first)
        a = second.y - first.y
        b = first.x - second.x
        return cls(a, b, -(a * first.x + b * first.y), anchor=first)

    def direction(self) -> Vector:
        return Vector(self.b, -self.a)

    def side_of(self, point: Point) -> int:
        """Signed position of `point` relative to the line.

        Equals direction() x (point - p) for any point p on the line, so the
        sign tells which side `point` is on and zero means on the line.
        """
        return self.a * point.x + self.b * point.y + self.c

    def move(self, vector: Vector) -> "Line":
        # (a, b) is translation invariant
        self.c = self.c - self.a * vector.x - self.b * vector.y
        if self.anchor is not None:
            self.anchor.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        return self.side_of(point) == 0

    def cross_segment(self, segment: Segment) -> bool:
        _require_segment(segment)
        return self.side_of(segment.start) * self.side_of(segment.finish) <= 0

    def clone(self) -> "Line":
        return Line(self.a, self.b, self.c, anchor=self.anchor)


@dataclass
class Ray(Shape):
    """Half-line from `start` through `through` and beyond."""
    start: Point
    through: Point

    def __post_init__(self):
        self.start = Point.coerce(self.start).clone()
        self.through = Point.coerce(self.through).clone()
        if self.start == self.through:
            logger.debug("Degenerate ray with start == through at %s", self.start)

    def direction(self) -> Vector:
        return Vector.between(self.start, self.through)

    def move(self, vector: Vector) -> "Ray":
        self.start.move(vector)
        self.through.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        offset = point - self.start
        direction = self.direction()
        return offset.cross(direction) == 0 and offset.dot(direction) >= 0

    def cross_segment(self, segment: Segment) -> bool:
        """Segment-vs-ray test with the ray unbounded past `through`.

        A segment straddling the supporting line counts as crossing
        regardless of which side of `start` the straddle happens on.
        """
        _require_segment(segment)
        to_first = orientation(self.start, self.through, segment.start)
        to_second = orientation(self.start, self.through, segment.finish)
        if to_first * to_second < 0:
            return True

        direction = self.direction()
        return (
            (to_first == 0 and (segment.start - self.start).dot(direction) >= 0)
            or (to_second == 0 and (segment.finish - self.start).dot(direction) >= 0)
        )

    def clone(self) -> "Ray":
        return Ray(self.start, self.through)


@dataclass
class Circle(Shape):
    """Circle with integer center and radius. Radius 0 is a single point."""
    center: Point
    radius: int = 0

    def __post_init__(self):
        self.center = Point.coerce(self.center).clone()
        if self.radius < 0:
            logger.debug("Circle at %s has negative radius %d", self.center, self.radius)

    def move(self, vector: Vector) -> "Circle":
        self.center.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        offset = point - self.center
        return offset.dot(offset) <= self.radius * self.radius

    def cross_segment(self, segment: Segment) -> bool:
        """Whether the circle reaches the segment.

        A segment lying strictly inside the circle, with both endpoints
        closer than the radius, does not count as crossing.
        """
        _require_segment(segment)
        if segment.distance_to(self.center) > self.radius:
            return False
        return ((segment.start - self.center).length() >= self.radius
                or (segment.finish - self.center).length() >= self.radius)

    def clone(self) -> "Circle":
        return Circle(self.center, self.radius)
