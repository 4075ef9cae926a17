"""Straight shapes: the bounded Line segment and the half-infinite Ray."""
import math
from typing import NamedTuple

from .constants import ABSOLUTE_TOLERANCE
from .geometry import Transform
from .types import Point, typed_eq, typed_ne


def _lerp(a: Point, b: Point, t: float) -> Point:
    # Exact at t=0 and t=1.
    return Point((1-t)*a[0] + t*b[0], (1-t)*a[1] + t*b[1])


class Line(NamedTuple):
    """Segment from *start* (t=0) to *end* (t=1)."""
    start: Point; end: Point
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    @property
    def direction(self) -> Point:
        return Point(self.end[0]-self.start[0], self.end[1]-self.start[1])

    @property
    def length(self) -> float:
        return math.hypot(*self.direction)

    @property
    def bounding_box(self):
        from .bbox import BoundingBox
        return BoundingBox.from_corners(self.start, self.end)

    def point_at(self, t: float, limit: bool = False) -> Point:
        """Point at parameter *t*; with *limit*, t is clamped to [0, 1]."""
        if limit:
            t = min(max(t, 0.0), 1.0)
        return _lerp(self.start, self.end, t)

    def closest_parameter(self, p: Point, limit: bool = False) -> float:
        """Parameter of the foot of the perpendicular from *p*.

        A zero-length line returns 0.
        """
        dx, dy = self.direction
        L2 = dx*dx + dy*dy
        if L2 == 0:
            return 0.0
        t = ((p[0]-self.start[0])*dx + (p[1]-self.start[1])*dy) / L2
        if limit:
            t = min(max(t, 0.0), 1.0)
        return t

    def closest_point(self, p: Point, limit: bool = True) -> Point:
        return self.point_at(self.closest_parameter(p, limit), limit)

    def distance_to(self, p: Point, limit: bool = True) -> float:
        return self.closest_point(p, limit).distance_to(p)

    def is_point_on(self, p: Point, tolerance: float = ABSOLUTE_TOLERANCE) -> bool:
        return self.distance_to(p) <= tolerance

    def reverse(self) -> "Line":
        return Line(self.end, self.start)

    def transform(self, change: Transform) -> "Line":
        return Line(change.transform_point(self.start), change.transform_point(self.end))

    def translate(self, dx: float, dy: float) -> "Line":
        return Line(Point(self.start[0]+dx, self.start[1]+dy), Point(self.end[0]+dx, self.end[1]+dy))


class Ray(NamedTuple):
    """Half-line from *start* along *direction*; parameter t >= 0.

    *direction* need not be a unit vector: point_at(1) is start + direction.
    """
    start: Point; direction: Point
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    @classmethod
    def from_points(cls, start: Point, through: Point) -> "Ray":
        return cls(Point(*start), Point(through[0]-start[0], through[1]-start[1]))

    def point_at(self, t: float) -> Point:
        t = max(t, 0.0)
        return Point(self.start[0] + t*self.direction[0], self.start[1] + t*self.direction[1])

    def closest_parameter(self, p: Point) -> float:
        dx, dy = self.direction
        L2 = dx*dx + dy*dy
        if L2 == 0:
            return 0.0
        return max(((p[0]-self.start[0])*dx + (p[1]-self.start[1])*dy) / L2, 0.0)

    def closest_point(self, p: Point) -> Point:
        return self.point_at(self.closest_parameter(p))

    def transform(self, change: Transform) -> "Ray":
        s = change.transform_point(self.start)
        tip = change.transform_point(Point(self.start[0]+self.direction[0], self.start[1]+self.direction[1]))
        return Ray(s, Point(tip[0]-s[0], tip[1]-s[1]))

    def translate(self, dx: float, dy: float) -> "Ray":
        return Ray(Point(self.start[0]+dx, self.start[1]+dy), self.direction)
