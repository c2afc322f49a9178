"""shapekit: exact integer 2D geometry primitives."""

__version__ = "0.1.0"

from .geometry import Vector, Shape, Point, Segment, Line, Ray, Circle

__all__ = [
    "Vector",
    "Shape",
    "Point",
    "Segment",
    "Line",
    "Ray",
    "Circle",
]
