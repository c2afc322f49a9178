"""Orientation predicates over integer points.

Every function here uses exact integer arithmetic; results are never
subject to rounding.
"""

from .vector import Vector


def orientation(origin, target, probe) -> int:
    """Signed area of the parallelogram (target - origin) x (probe - origin).

    Positive if `probe` lies left of the directed line origin -> target,
    negative if right, zero if collinear.
    """
    return Vector.between(origin, target).cross(Vector.between(origin, probe))


def within_span(probe, a, b) -> bool:
    """Whether `probe` projects onto the closed span between `a` and `b`.

    Meant for a probe already known to be collinear with a and b: the
    vectors to both ends then point in opposite directions (or one is zero).
    """
    return Vector.between(probe, a).dot(Vector.between(probe, b)) <= 0


def on_segment(probe, a, b) -> bool:
    """Whether `probe` lies on the closed segment a-b."""
    return orientation(a, b, probe) == 0 and within_span(probe, a, b)


def segments_intersect(a1, a2, b1, b2) -> bool:
    """Check if closed segments a1-a2 and b1-b2 share at least one point.

    Proper crossings need both endpoint pairs strictly on opposite sides of
    the other segment's line. Touching endpoints, T-junctions and collinear
    overlap are caught by testing each endpoint against the other segment.
    """
    d1 = orientation(a1, a2, b1)
    d2 = orientation(a1, a2, b2)
    d3 = orientation(b1, b2, a1)
    d4 = orientation(b1, b2, a2)

    if d1 * d2 < 0 and d3 * d4 < 0:
        return True

    return (
        (d1 == 0 and within_span(b1, a1, a2))
        or (d3 == 0 and within_span(a1, b1, b2))
        or (d4 == 0 and within_span(a2, b1, b2))
        or (d2 == 0 and within_span(b2, a1, a2))
    )
