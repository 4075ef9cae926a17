"""Tests for shapes/bbox.py: axis-aligned bounding box."""
import math
import pytest
from shapes.bbox import BoundingBox
from shapes.geometry import GeometryError, Transform
from shapes.types import Interval, Point


# ============================================================
# Construction
# ============================================================

class TestConstruction:
    def test_from_corners_sorts(self, box):
        assert BoundingBox.from_corners((10, 25), (0, 5)) == box

    def test_from_points(self, box):
        pts = [(0, 5), (1, 6), (10, 25), (9, 24)]
        assert BoundingBox.from_points(pts) == box

    def test_from_points_empty_raises(self):
        with pytest.raises(GeometryError, match="empty"):
            BoundingBox.from_points([])

    def test_degenerate_box_allowed(self):
        b = BoundingBox.from_points([(1, 1), (1, 5)])
        assert b.width == 0
        assert b.area == 0


# ============================================================
# Union / Intersection
# ============================================================

class TestUnionIntersection:
    def test_union_encloses_both(self):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        b = BoundingBox(Interval(20, 30), Interval(-10, 10))
        assert BoundingBox.union(a, b) == BoundingBox(Interval(0, 30), Interval(-10, 10))

    def test_no_x_overlap_gives_none(self):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        b = BoundingBox(Interval(20, 30), Interval(0, 10))
        assert BoundingBox.intersection(a, b) is None

    def test_no_y_overlap_gives_none(self):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        b = BoundingBox(Interval(0, 10), Interval(20, 30))
        assert BoundingBox.intersection(a, b) is None

    def test_overlapping_corners(self):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        b = BoundingBox(Interval(5, 15), Interval(5, 15))
        r = BoundingBox.intersection(a, b)
        assert r.min == (5, 5)
        assert r.max == (10, 10)

    def test_nested_gives_inner(self):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        b = BoundingBox(Interval(2, 7), Interval(2, 7))
        assert BoundingBox.intersection(a, b) == b

    def test_touching_edge_is_degenerate_overlap(self):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        b = BoundingBox(Interval(10, 20), Interval(0, 10))
        assert a.overlaps(b)
        r = BoundingBox.intersection(a, b)
        assert r.x_range == Interval(10, 10)
        assert r.y_range == Interval(0, 10)

    @pytest.mark.parametrize("b, expected", [
        (BoundingBox(Interval(-5, 1), Interval(-5, 1)), True),
        (BoundingBox(Interval(-5, -1), Interval(0, 1)), False),
        (BoundingBox(Interval(0, 1), Interval(11, 12)), False),
        (BoundingBox(Interval(3, 4), Interval(-20, 20)), True),
    ])
    def test_intersection_none_iff_an_axis_misses(self, b, expected):
        a = BoundingBox(Interval(0, 10), Interval(0, 10))
        r = BoundingBox.intersection(a, b)
        assert (r is not None) == expected
        if r is not None:
            assert r.x_range == a.x_range.intersection(b.x_range)
            assert r.y_range == a.y_range.intersection(b.y_range)


# ============================================================
# Measurements
# ============================================================

def test_area(box):
    assert box.area == 200


def test_center(box):
    assert box.center == (5, 15)


def test_min_max(box):
    assert box.min == (0, 5)
    assert box.max == (10, 25)


# ============================================================
# Queries
# ============================================================

class TestContains:
    def test_inside(self, box):
        assert box.contains(Point(5, 6))
        assert box.contains(Point(5, 6), strict=True)

    def test_outside(self, box):
        assert not box.contains(Point(5, 3))
        assert not box.contains(Point(5, 3), strict=True)

    def test_on_edge(self, box):
        assert box.contains(Point(5, 5))
        assert not box.contains(Point(5, 5), strict=True)

    def test_within_tolerance(self, box):
        assert box.contains(Point(10.0005, 10))
        assert not box.contains(Point(10.0005, 10), tolerance=0.0)


class TestClosestPoint:
    def test_outside_is_clamped(self, box):
        assert box.closest_point(Point(5, 3)) == (5, 5)

    def test_inside_is_unchanged(self, box):
        assert box.closest_point(Point(5, 6)) == (5, 6)

    def test_inside_without_interior_goes_to_edge(self, box):
        assert box.closest_point(Point(5, 6), include_interior=False) == (5, 5)

    def test_inside_without_interior_nearest_side(self, box):
        assert box.closest_point(Point(9, 15), include_interior=False) == (10, 15)


def test_corner(box):
    assert box.corner(True, True) == (0, 5)
    assert box.corner(True, False) == (0, 25)
    assert box.corner(False, True) == (10, 5)
    assert box.corner(False, False) == (10, 25)


def test_corners_order(box):
    assert box.corners() == [(0, 5), (10, 5), (10, 25), (0, 25)]


def test_edges_follow_corners(box):
    edges = box.edges()
    assert len(edges) == 4
    assert edges[0].start == (0, 5) and edges[0].end == (10, 5)
    assert edges[3].start == (0, 25) and edges[3].end == (0, 5)


# ============================================================
# Local <-> global mapping
# ============================================================

_MAPPED = [((0, 5), (0, 0)), ((10, 25), (1, 1)), ((1, 15), (0.1, 0.5))]


@pytest.mark.parametrize("global_pt, local_pt", _MAPPED)
def test_point_at(box, global_pt, local_pt):
    assert box.point_at(Point(*local_pt)) == pytest.approx(global_pt)


@pytest.mark.parametrize("global_pt, local_pt", _MAPPED)
def test_remap_to_box(box, global_pt, local_pt):
    assert box.remap_to_box(Point(*global_pt)) == pytest.approx(local_pt)


def test_point_at_and_remap_are_inverse():
    b = BoundingBox(Interval(-3.7, 12.1), Interval(0.25, 9.5))
    for u in (0.0, 0.13, 0.5, 0.77, 1.0):
        for v in (0.0, 0.31, 0.9, 1.0):
            back = b.remap_to_box(b.point_at(Point(u, v)))
            assert abs(back[0] - u) < 1e-9
            assert abs(back[1] - v) < 1e-9


# ============================================================
# Conversions and updates
# ============================================================

def test_to_polyline(box):
    pl = box.to_polyline()
    assert pl.is_closed
    assert pl.segment_count == 4
    assert pl.area == 200
    assert pl.points[0] == (0, 5)
    assert pl.points[2] == (10, 25)


def test_inflate_even(box):
    b = box.inflate(1)
    assert b == BoundingBox(Interval(-1, 11), Interval(4, 26))


def test_inflate_per_axis(box):
    b = box.inflate(1, 5)
    assert b == BoundingBox(Interval(-1, 11), Interval(0, 30))


def test_translate(box):
    b = box.translate(1, 2)
    assert b == BoundingBox(Interval(1, 11), Interval(7, 27))


def test_transform_translate_matches(box):
    assert box.transform(Transform.translate(1, 2)) == box.translate(1, 2)


def test_rotate_quarter_turn(box):
    b = box.rotate(math.pi / 2)
    assert abs(b.area - 200) < 1e-9
    assert b.x_range.min == pytest.approx(-25)
    assert b.x_range.max == pytest.approx(-5)
    assert b.y_range.min == pytest.approx(0)
    assert b.y_range.max == pytest.approx(10)


def test_scale_about_corner(box):
    b = box.scale(2, 3, Point(0, 5))
    assert b.x_range == pytest.approx((0, 20))
    assert b.y_range == pytest.approx((5, 65))


def test_with_ranges(box):
    assert box.with_x_range(Interval(-10, 5)).x_range == (-10, 5)
    assert box.with_y_range(Interval(-10, 5)).y_range == (-10, 5)
    assert box.with_x_range((5, -10)).x_range == (-10, 5)


def test_box_is_immutable(box):
    box.translate(100, 100)
    assert box.min == (0, 5)
