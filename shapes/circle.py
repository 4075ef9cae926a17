"""Circle and rotated Rectangle: closed-form shapes with polyline conversions."""
import math
from typing import NamedTuple

from .bbox import BoundingBox
from .constants import ABSOLUTE_TOLERANCE, CIRCLE_SEGMENTS
from .geometry import Transform
from .polyline import Polyline
from .types import Containment, Interval, Point, typed_eq, typed_ne


class Circle(NamedTuple):
    center: Point; radius: float
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    @property
    def bounding_box(self) -> BoundingBox:
        cx, cy = self.center
        return BoundingBox(Interval(cx-self.radius, cx+self.radius), Interval(cy-self.radius, cy+self.radius))

    @property
    def area(self) -> float:
        return math.pi * self.radius**2

    @property
    def circumference(self) -> float:
        return 2 * math.pi * self.radius

    def point_at(self, angle: float) -> Point:
        """Point at *angle* radians, counter-clockwise from +x."""
        return Point(self.center[0]+self.radius*math.cos(angle), self.center[1]+self.radius*math.sin(angle))

    def contains(self, p: Point, tolerance: float = ABSOLUTE_TOLERANCE) -> Containment:
        d = math.hypot(p[0]-self.center[0], p[1]-self.center[1])
        if abs(d - self.radius) <= tolerance:
            return "coincident"
        return "inside" if d < self.radius else "outside"

    def to_polyline(self, segments: int = CIRCLE_SEGMENTS) -> Polyline:
        """Inscribed closed polyline with *segments* sides, starting at angle 0."""
        return Polyline(tuple(self.point_at(2*math.pi*i/segments) for i in range(segments)), closed=True)

    def translate(self, dx: float, dy: float) -> "Circle":
        return Circle(Point(self.center[0]+dx, self.center[1]+dy), self.radius)


class Rectangle(NamedTuple):
    """Rectangle with a corner at *origin*, sides rotated by *angle* radians."""
    origin: Point; width: float; height: float; angle: float = 0.0
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    def corners(self) -> list[Point]:
        """Origin, +width side, opposite corner, +height side."""
        c = math.cos(self.angle); s = math.sin(self.angle)
        ox, oy = self.origin
        ux, uy = self.width*c, self.width*s
        vx, vy = -self.height*s, self.height*c
        return [Point(ox, oy), Point(ox+ux, oy+uy), Point(ox+ux+vx, oy+uy+vy), Point(ox+vx, oy+vy)]

    @property
    def area(self) -> float:
        return abs(self.width * self.height)

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.corners())

    def to_polyline(self) -> Polyline:
        return Polyline(tuple(self.corners()), closed=True)

    def contains(self, p: Point, tolerance: float = ABSOLUTE_TOLERANCE) -> Containment:
        return self.to_polyline().contains(p, tolerance)

    def transform(self, change: Transform) -> Polyline:
        """Transformed outline. A general affine map does not keep a rectangle."""
        return self.to_polyline().transform(change)

    def translate(self, dx: float, dy: float) -> "Rectangle":
        return Rectangle(Point(self.origin[0]+dx, self.origin[1]+dy), self.width, self.height, self.angle)
