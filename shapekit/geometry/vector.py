"""Integer vector for shapekit geometry."""

import math
from dataclasses import dataclass


@dataclass
class Vector:
    """2D integer displacement.

    All arithmetic stays in integers except `length`, which truncates the
    square root toward zero.
    """
    x: int = 0
    y: int = 0

    @classmethod
    def between(cls, start, finish) -> "Vector":
        """Vector pointing from `start` to `finish` (anything with x/y)."""
        return cls(finish.x - start.x, finish.y - start.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: "Vector") -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> int:
        """Z component of the 3D cross product.

        Positive when `other` turns counter-clockwise from self, zero when
        the two are collinear.
        """
        return self.x * other.y - self.y * other.x

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: "Vector") -> "Vector":
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vector") -> "Vector":
        self.x -= other.x
        self.y -= other.y
        return self

    def scale(self, scalar: int) -> "Vector":
        """Multiply in place and return self."""
        self.x *= scalar
        self.y *= scalar
        return self

    def __imul__(self, scalar: int) -> "Vector":
        return self.scale(scalar)

    def negate(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __neg__(self) -> "Vector":
        return self.negate()

    def length(self) -> int:
        # isqrt is exact, so this matches truncating the real square root
        return math.isqrt(self.dot(self))
