"""Cross-check segment predicates against Shapely on random integer input."""

import pytest

np = pytest.importorskip("numpy")
shapely_geometry = pytest.importorskip("shapely.geometry")

from shapekit.geometry import Point, Segment


def to_shapely(segment):
    a = tuple(segment.start)
    b = tuple(segment.finish)
    if a == b:
        return shapely_geometry.Point(a)
    return shapely_geometry.LineString([a, b])


def random_segments(count, seed, extent=6):
    # A small grid makes collinear and touching cases common
    rng = np.random.default_rng(seed)
    coords = rng.integers(-extent, extent + 1, size=(count, 2, 2))
    return [Segment((int(a[0]), int(a[1])), (int(b[0]), int(b[1]))) for a, b in coords]


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_cross_segment_matches_shapely(seed):
    segments = random_segments(40, seed)
    for first in segments:
        for second in segments:
            expected = to_shapely(first).intersects(to_shapely(second))
            assert first.cross_segment(second) == expected, (first, second)


@pytest.mark.parametrize("seed", [3, 4])
def test_contains_point_matches_shapely(seed):
    segments = random_segments(30, seed)
    for segment in segments:
        geom = to_shapely(segment)
        for x in range(-6, 7):
            for y in range(-6, 7):
                expected = geom.intersects(shapely_geometry.Point(x, y))
                assert segment.contains_point(Point(x, y)) == expected, (segment, x, y)


def test_distance_to_matches_shapely():
    segments = random_segments(50, 5, extent=100)
    probes = random_segments(20, 6, extent=100)
    for segment in segments:
        geom = to_shapely(segment)
        for probe in probes:
            expected = geom.distance(shapely_geometry.Point(tuple(probe.start)))
            assert segment.distance_to(probe.start) == pytest.approx(expected)
