"""Errors, tolerance predicates, loop winding and the affine transform matrix."""
import math
from typing import Iterable, Sequence

import numpy as np

from .constants import ABSOLUTE_TOLERANCE, INVERT_Y
from .types import Point, Orientation

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class InvalidGeometry(GeometryError):
    """Raised when a shape is constructed in violation of its invariant."""

# ============================================================
# Tolerance / Equality
# ============================================================
def approximately_equal(value1: float, value2: float, epsilon: float = ABSOLUTE_TOLERANCE) -> bool:
    """True if the two values differ by less than *epsilon*."""
    return abs(value1 - value2) < epsilon

# ============================================================
# Loop Winding
# ============================================================
def signed_area(verts: Sequence[Point]) -> float:
    """Shoelace area of a closed loop. Positive for CCW in a y-up frame."""
    n = len(verts); a = 0.0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return a/2

def orientation(verts: Sequence[Point], invert_y: bool = INVERT_Y) -> Orientation:
    """Winding of a closed loop as seen on screen.

    With *invert_y* the y-axis points down, so a loop that is CCW in the
    maths frame appears clockwise.
    """
    ccw = signed_area(verts) > 0
    if invert_y:
        ccw = not ccw
    return "CCW" if ccw else "CW"

# ============================================================
# Transform
# ============================================================
class Transform:
    """2D affine transform stored as a 3x3 homogeneous matrix.

    Compose with ``combine``: ``a.combine(b)`` applies *a* first, then *b*.
    """
    __slots__ = ("_m",)

    def __init__(self, matrix=None):
        m = np.identity(3) if matrix is None else np.array(matrix, dtype=float)
        if m.shape != (3, 3):
            raise GeometryError(f"Transform needs a 3x3 matrix, got shape {m.shape}")
        m.flags.writeable = False
        self._m = m

    @property
    def matrix(self) -> np.ndarray:
        return self._m

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def translate(cls, dx: float, dy: float) -> "Transform":
        return cls([[1, 0, dx], [0, 1, dy], [0, 0, 1]])

    @classmethod
    def rotate(cls, angle: float, pivot: Point = Point(0, 0)) -> "Transform":
        """Counter-clockwise rotation by *angle* radians about *pivot*."""
        c = math.cos(angle); s = math.sin(angle)
        r = cls([[c, -s, 0], [s, c, 0], [0, 0, 1]])
        return cls.translate(-pivot[0], -pivot[1]).combine(r).combine(cls.translate(pivot[0], pivot[1]))

    @classmethod
    def scale(cls, x: float, y: float | None = None, center: Point = Point(0, 0)) -> "Transform":
        y = x if y is None else y
        s = cls([[x, 0, 0], [0, y, 0], [0, 0, 1]])
        return cls.translate(-center[0], -center[1]).combine(s).combine(cls.translate(center[0], center[1]))

    @classmethod
    def mirror(cls, horizontal: bool = True) -> "Transform":
        """Reflect across the y-axis (*horizontal*) or the x-axis."""
        return cls.scale(-1, 1) if horizontal else cls.scale(1, -1)

    def combine(self, other: "Transform") -> "Transform":
        return Transform(other.matrix @ self._m)

    @property
    def flips(self) -> bool:
        """True if the transform reverses loop winding."""
        return float(np.linalg.det(self._m[:2, :2])) < 0

    def transform_point(self, p: Point) -> Point:
        v = self._m @ np.array([p[0], p[1], 1.0])
        return Point(float(v[0]), float(v[1]))

    def transform_points(self, pts: Iterable[Point]) -> list[Point]:
        arr = np.array([(p[0], p[1]) for p in pts], dtype=float)
        if arr.size == 0:
            return []
        out = arr @ self._m[:2, :2].T + self._m[:2, 2]
        return [Point(float(x), float(y)) for x, y in out]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.allclose(self._m, other.matrix))

    def __repr__(self) -> str:
        return f"Transform({self._m.tolist()})"
