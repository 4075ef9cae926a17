"""Shared test fixtures for shape kernel tests."""
import pytest
from shapes.bbox import BoundingBox
from shapes.polygon import Polygon
from shapes.polyline import Polyline
from shapes.types import Interval


@pytest.fixture(scope="session")
def box():
    """10 wide, 20 tall box: x 0..10, y 5..25."""
    return BoundingBox(Interval(0, 10), Interval(5, 25))


@pytest.fixture(scope="session")
def square4():
    """4x4 square at the origin, as a closed polyline (CCW)."""
    return Polyline(((0, 0), (4, 0), (4, 4), (0, 4)), closed=True)


@pytest.fixture(scope="session")
def square_with_hole():
    """4x4 square with a 2x2 hole in the middle, both given clockwise."""
    boundary = Polyline(((0, 0), (0, 4), (4, 4), (4, 0)), closed=True)
    hole = Polyline(((1, 1), (1, 3), (3, 3), (3, 1)), closed=True)
    return Polygon(boundary, (hole,))


@pytest.fixture(scope="session")
def zigzag():
    """Open polyline with three segments."""
    return Polyline(((0, 0), (2, 2), (4, 0), (6, 2)))
