"""Axis-aligned bounding box built from two sorted intervals."""
from typing import Iterable, NamedTuple, Optional

from .constants import ABSOLUTE_TOLERANCE
from .geometry import GeometryError, Transform
from .line import Line
from .types import Interval, Point, typed_eq, typed_ne


class BoundingBox(NamedTuple):
    """Axis-aligned box. Zero width or height is allowed.

    Corner order everywhere is (min,min) -> (max,min) -> (max,max) -> (min,max).
    Intersection dispatch reports segment indices in this order, so it must
    not change.
    """
    x_range: Interval; y_range: Interval
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    @classmethod
    def from_corners(cls, a: Point, b: Point) -> "BoundingBox":
        return cls(Interval.sorted(a[0], b[0]), Interval.sorted(a[1], b[1]))

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        pts = list(points)
        if not pts:
            raise GeometryError("Cannot compute bounds from empty point list")
        xs = [p[0] for p in pts]; ys = [p[1] for p in pts]
        return cls(Interval(min(xs), max(xs)), Interval(min(ys), max(ys)))

    @staticmethod
    def union(a: "BoundingBox", b: "BoundingBox") -> "BoundingBox":
        return BoundingBox(a.x_range.union(b.x_range), a.y_range.union(b.y_range))

    @staticmethod
    def intersection(a: "BoundingBox", b: "BoundingBox") -> Optional["BoundingBox"]:
        """Overlapping region, or None. Touching edges give a degenerate box."""
        xr = a.x_range.intersection(b.x_range)
        yr = a.y_range.intersection(b.y_range)
        if xr is None or yr is None:
            return None
        return BoundingBox(xr, yr)

    # --- measurements ---

    @property
    def min(self) -> Point:
        return Point(self.x_range.min, self.y_range.min)

    @property
    def max(self) -> Point:
        return Point(self.x_range.max, self.y_range.max)

    @property
    def width(self) -> float:
        return self.x_range.length

    @property
    def height(self) -> float:
        return self.y_range.length

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def center(self) -> Point:
        return Point(self.x_range.mid, self.y_range.mid)

    # --- queries ---

    def overlaps(self, other: "BoundingBox") -> bool:
        return self.x_range.overlaps(other.x_range) and self.y_range.overlaps(other.y_range)

    def contains(self, p: Point, strict: bool = False, tolerance: float = ABSOLUTE_TOLERANCE) -> bool:
        """True if *p* is inside the box (grown by *tolerance*).

        *strict* excludes points on the boundary and ignores *tolerance*.
        """
        return (self.x_range.contains(p[0], strict, tolerance)
                and self.y_range.contains(p[1], strict, tolerance))

    def closest_point(self, p: Point, include_interior: bool = True) -> Point:
        """Nearest point of the box to *p*.

        Without *include_interior* only the edges count, so a point inside
        is projected onto the nearest edge.
        """
        x = min(max(p[0], self.x_range.min), self.x_range.max)
        y = min(max(p[1], self.y_range.min), self.y_range.max)
        if include_interior or not self.contains(p, strict=True):
            return Point(x, y)
        candidates = [
            (x - self.x_range.min, Point(self.x_range.min, y)),
            (self.x_range.max - x, Point(self.x_range.max, y)),
            (y - self.y_range.min, Point(x, self.y_range.min)),
            (self.y_range.max - y, Point(x, self.y_range.max)),
        ]
        return min(candidates, key=lambda c: c[0])[1]

    def corner(self, left: bool, bottom: bool) -> Point:
        return Point(self.x_range.min if left else self.x_range.max,
                     self.y_range.min if bottom else self.y_range.max)

    def corners(self) -> list[Point]:
        return [self.corner(True, True), self.corner(False, True),
                self.corner(False, False), self.corner(True, False)]

    def edges(self) -> list[Line]:
        c = self.corners()
        return [Line(c[i], c[(i+1)%4]) for i in range(4)]

    def point_at(self, local: Point) -> Point:
        """Map box-local unit coordinates (0..1 per axis) to global ones."""
        return Point(self.x_range.value_at(local[0]), self.y_range.value_at(local[1]))

    def remap_to_box(self, p: Point) -> Point:
        """Inverse of point_at."""
        return Point(self.x_range.remap(p[0]), self.y_range.remap(p[1]))

    def to_polyline(self):
        from .polyline import Polyline
        return Polyline(self.corners(), closed=True)

    # --- functional updates ---

    def inflate(self, x: float, y: float | None = None) -> "BoundingBox":
        y = x if y is None else y
        return BoundingBox(self.x_range.inflate(x), self.y_range.inflate(y))

    def with_x_range(self, x_range: Interval) -> "BoundingBox":
        return BoundingBox(Interval.sorted(*x_range), self.y_range)

    def with_y_range(self, y_range: Interval) -> "BoundingBox":
        return BoundingBox(self.x_range, Interval.sorted(*y_range))

    def transform(self, change: Transform) -> "BoundingBox":
        """Box around the transformed corners."""
        return BoundingBox.from_points(change.transform_points(self.corners()))

    def translate(self, dx: float, dy: float) -> "BoundingBox":
        return BoundingBox(self.x_range.translate(dx), self.y_range.translate(dy))

    def rotate(self, angle: float, pivot: Point = Point(0, 0)) -> "BoundingBox":
        return self.transform(Transform.rotate(angle, pivot))

    def scale(self, x: float, y: float | None = None, center: Point = Point(0, 0)) -> "BoundingBox":
        return self.transform(Transform.scale(x, y, center))
