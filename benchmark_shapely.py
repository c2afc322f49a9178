#!/usr/bin/env python3
"""
Shapely comparison benchmark for shapekit segment predicates.
Generates random integer segments and checks every pair for intersection
with both shapekit and Shapely, reporting timings and any disagreement.

Shapely works in floating point, so on integer input small enough to be
represented exactly the two should agree.

Usage:
    python benchmark_shapely.py [count] [seed]
    python benchmark_shapely.py 400 7
"""

import time
import sys

try:
    from shapely.geometry import LineString, Point as ShapelyPoint
    import numpy as np
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely numpy")
    sys.exit(1)

from shapekit import Point, Segment


def random_segments(count: int, seed: int = 0, extent: int = 50) -> list[tuple]:
    """Random integer segments as ((x1, y1), (x2, y2)) tuples."""
    rng = np.random.default_rng(seed)
    coords = rng.integers(-extent, extent + 1, size=(count, 2, 2))
    return [
        ((int(a[0]), int(a[1])), (int(b[0]), int(b[1])))
        for a, b in coords
    ]


def count_crossings_shapekit(pairs: list[tuple]) -> tuple[int, list[bool]]:
    segments = [Segment(a, b) for a, b in pairs]
    results = []
    for i, first in enumerate(segments):
        for second in segments[i + 1:]:
            results.append(first.cross_segment(second))
    return sum(results), results


def count_crossings_shapely(pairs: list[tuple]) -> tuple[int, list[bool]]:
    # Zero-length segments become points; LineString needs distinct ends
    geoms = [LineString([a, b]) if a != b else ShapelyPoint(a) for a, b in pairs]
    results = []
    for i, first in enumerate(geoms):
        for second in geoms[i + 1:]:
            results.append(bool(first.intersects(second)))
    return sum(results), results


def benchmark(count: int = 300, seed: int = 0):
    """Run the full benchmark."""
    pairs = random_segments(count, seed)
    total_pairs = count * (count - 1) // 2
    print(f"Generated {count} segments ({total_pairs} pairs, seed={seed})")

    start = time.perf_counter()
    ours, our_results = count_crossings_shapekit(pairs)
    ours_time = time.perf_counter() - start

    start = time.perf_counter()
    theirs, their_results = count_crossings_shapely(pairs)
    theirs_time = time.perf_counter() - start

    mismatches = sum(1 for a, b in zip(our_results, their_results) if a != b)

    probe = Point(0, 0)
    start = time.perf_counter()
    nearest = min(Segment(a, b).distance_to(probe) for a, b in pairs)
    distance_time = time.perf_counter() - start

    print()
    print("=" * 50)
    print("RESULTS (shapekit vs Shapely)")
    print("=" * 50)
    print(f"Crossings (shapekit): {ours}")
    print(f"Crossings (Shapely):  {theirs}")
    print(f"Mismatches:           {mismatches}")
    print(f"shapekit time:        {ours_time*1000:.1f}ms")
    print(f"Shapely time:         {theirs_time*1000:.1f}ms")
    print(f"Nearest to origin:    {nearest:.3f} ({distance_time*1000:.1f}ms)")
    print("=" * 50)

    return mismatches


if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 300
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 0

    if count < 2:
        print("Error: need at least 2 segments")
        print("Usage: python benchmark_shapely.py [count] [seed]")
        sys.exit(1)

    sys.exit(1 if benchmark(count, seed) else 0)
