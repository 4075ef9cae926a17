"""Tests for shapes/geometry.py: errors, tolerance, winding and transforms."""
import math
import pytest
from shapes.geometry import (
    GeometryError, InvalidGeometry,
    approximately_equal, signed_area, orientation, Transform,
)
from shapes.types import Point

_SQUARE_CCW = [(0, 0), (1, 0), (1, 1), (0, 1)]


# --- errors ---

def test_invalid_geometry_is_geometry_error():
    assert issubclass(InvalidGeometry, GeometryError)
    assert issubclass(GeometryError, ValueError)


# --- approximately_equal ---

def test_approximately_equal_default_tolerance():
    assert approximately_equal(1.0, 1.0009)
    assert not approximately_equal(1.0, 1.002)


def test_approximately_equal_custom_epsilon():
    assert approximately_equal(1.0, 1.4, epsilon=0.5)


# --- signed_area / orientation ---

def test_signed_area_ccw_positive():
    assert abs(signed_area(_SQUARE_CCW) - 1.0) < 1e-12


def test_signed_area_cw_negative():
    assert abs(signed_area(_SQUARE_CCW[::-1]) + 1.0) < 1e-12


def test_signed_area_triangle():
    assert abs(signed_area([(0, 0), (4, 0), (0, 3)]) - 6.0) < 1e-12


def test_orientation():
    assert orientation(_SQUARE_CCW) == "CCW"
    assert orientation(_SQUARE_CCW[::-1]) == "CW"


def test_orientation_inverted_y_flips():
    assert orientation(_SQUARE_CCW, invert_y=True) == "CW"


# --- Transform ---

class TestTransform:
    def test_identity(self):
        assert Transform.identity().transform_point(Point(3, 4)) == Point(3, 4)

    def test_translate(self):
        p = Transform.translate(1, 2).transform_point(Point(3, 4))
        assert p == pytest.approx((4, 6))

    def test_rotate_quarter_turn_ccw(self):
        p = Transform.rotate(math.pi / 2).transform_point(Point(1, 0))
        assert p == pytest.approx((0, 1))

    def test_rotate_about_pivot(self):
        p = Transform.rotate(math.pi, Point(1, 1)).transform_point(Point(2, 1))
        assert p == pytest.approx((0, 1))

    def test_scale_about_center(self):
        p = Transform.scale(2, 3, Point(0, 5)).transform_point(Point(10, 25))
        assert p == pytest.approx((20, 65))

    def test_uniform_scale(self):
        assert Transform.scale(2).transform_point(Point(1, 1)) == pytest.approx((2, 2))

    def test_combine_applies_left_first(self):
        t = Transform.translate(1, 0).combine(Transform.scale(2))
        assert t.transform_point(Point(0, 0)) == pytest.approx((2, 0))

    def test_transform_points_matches_transform_point(self):
        t = Transform.rotate(0.3).combine(Transform.translate(5, -2))
        pts = [Point(0, 0), Point(1, 2), Point(-3, 4)]
        for a, b in zip(t.transform_points(pts), pts):
            assert a == pytest.approx(t.transform_point(b))

    def test_transform_points_empty(self):
        assert Transform.translate(1, 1).transform_points([]) == []

    def test_mirror_flips(self):
        assert Transform.mirror().flips
        assert not Transform.rotate(1.0).flips

    def test_bad_matrix_raises(self):
        with pytest.raises(GeometryError, match="3x3"):
            Transform([[1, 0], [0, 1]])

    def test_equality(self):
        assert Transform.translate(1, 2) == Transform.translate(1, 2)
        assert Transform.translate(1, 2) != Transform.translate(2, 1)
