"""Tests for Line in general form."""

from shapekit.geometry import Line, Point, Segment, Vector


def test_contains_point_on_diagonal():
    """All of (0,0), (1,1), (2,2) lie on y = x."""
    line = Line.through(Point(0, 0), Point(1, 1))
    assert line.contains_point(Point(2, 2))
    assert line.contains_point(Point(-7, -7))
    assert not line.contains_point(Point(2, 3))


def test_coefficients_from_points():
    line = Line.through(Point(0, 0), Point(1, 1))
    assert (line.a, line.b, line.c) == (1, -1, 0)
    assert line.anchor == Point(0, 0)

    horizontal = Line.through((1, 2), (3, 2))
    assert (horizontal.a, horizontal.b, horizontal.c) == (0, -2, 4)
    assert horizontal.contains_point(Point(100, 2))
    assert not horizontal.contains_point(Point(0, 3))


def test_direction_is_parallel_to_defining_points():
    line = Line.through((0, 0), (2, 1))
    assert line.direction().cross(Vector(2, 1)) == 0


def test_move_changes_only_c():
    """Translation keeps (a, b) and shifts c and the anchor."""
    line = Line.through(Point(0, 0), Point(1, 1))
    assert line.move(Vector(0, 1)) is line
    assert (line.a, line.b, line.c) == (1, -1, 1)
    assert line.anchor == Point(0, 1)
    assert line.contains_point(Point(0, 1))
    assert not line.contains_point(Point(0, 0))


def test_cross_segment_straddling():
    line = Line.through((0, 0), (1, 1))
    assert line.cross_segment(Segment((0, 1), (1, 0)))


def test_cross_segment_same_side():
    line = Line.through((0, 0), (1, 1))
    assert not line.cross_segment(Segment((2, 0), (3, 1)))


def test_cross_segment_touching_or_on_line():
    """An endpoint exactly on the line counts as crossing."""
    line = Line.through((0, 0), (1, 1))
    assert line.cross_segment(Segment((1, 1), (5, 0)))
    assert line.cross_segment(Segment((2, 2), (4, 4)))


def test_cross_segment_after_move():
    line = Line.through((0, 0), (1, 0))
    segment = Segment((0, 2), (3, 4))
    assert not line.cross_segment(segment)
    line.move(Vector(0, 3))
    assert line.cross_segment(segment)


def test_line_from_coefficients():
    """A coefficient line has no anchor but still supports every operation."""
    line = Line(0, 1, -3)  # y = 3
    assert line.anchor is None
    assert line.contains_point(Point(8, 3))
    assert line.cross_segment(Segment((0, 0), (0, 5)))
    assert not line.cross_segment(Segment((0, 4), (0, 5)))
    line.move(Vector(0, 2))
    assert line.contains_point(Point(0, 5))
    assert line.clone() == Line(0, 1, -5)


def test_clone_keeps_anchor():
    line = Line.through((3, 4), (5, 9))
    copy = line.clone()
    assert copy == line
    assert copy.anchor is not line.anchor
