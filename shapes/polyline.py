"""Open or closed chain of straight segments with a global parameterization.

Parameter p along a polyline splits into floor(p), the segment index, and
p - floor(p), the position within that segment.
"""
import math
from dataclasses import dataclass
from typing import Sequence

from .bbox import BoundingBox
from .constants import ABSOLUTE_TOLERANCE, INVERT_Y
from .geometry import GeometryError, InvalidGeometry, Transform, signed_area, orientation
from .line import Line
from .types import Containment, Orientation, Point


@dataclass(frozen=True)
class Polyline:
    """Immutable chain of points.

    A closed polyline stores each vertex once; the closing segment from the
    last point back to the first is implied. A repeated first point at the
    end of the input is dropped.
    """
    points: tuple[Point, ...]
    closed: bool = False

    def __post_init__(self):
        pts = tuple(Point(p[0], p[1]) for p in self.points)
        if self.closed and len(pts) > 1 and pts[0] == pts[-1]:
            pts = pts[:-1]
        if len(pts) < 2:
            raise InvalidGeometry(f"Polyline needs at least 2 points, got {len(pts)}")
        if self.closed and len(pts) < 3:
            raise InvalidGeometry(f"Closed polyline needs at least 3 points, got {len(pts)}")
        object.__setattr__(self, "points", pts)
        n = len(pts) if self.closed else len(pts) - 1
        object.__setattr__(self, "_segments", tuple(Line(pts[i], pts[(i+1)%len(pts)]) for i in range(n)))
        object.__setattr__(self, "_bbox", BoundingBox.from_points(pts))

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]], closed: bool | None = None) -> "Polyline":
        """Build from raw (x, y) pairs.

        When *closed* is None the polyline is closed iff the first and last
        coordinates are equal.
        """
        if closed is None:
            closed = len(coords) > 1 and tuple(coords[0]) == tuple(coords[-1])
        return cls(tuple(Point(c[0], c[1]) for c in coords), closed)

    # --- structure ---

    @property
    def is_closed(self) -> bool:
        return self.closed

    @property
    def segments(self) -> tuple[Line, ...]:
        return self._segments

    @property
    def segment_count(self) -> int:
        return len(self._segments)

    @property
    def bounding_box(self) -> BoundingBox:
        return self._bbox

    @property
    def length(self) -> float:
        return sum(s.length for s in self._segments)

    @property
    def signed_area(self) -> float:
        """Shoelace area of the loop the points form (open chains are closed implicitly)."""
        return signed_area(self.points)

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    def orientation(self, invert_y: bool = INVERT_Y) -> Orientation:
        return orientation(self.points, invert_y)

    def with_orientation(self, wanted: Orientation, invert_y: bool = INVERT_Y) -> "Polyline":
        if self.orientation(invert_y) == wanted:
            return self
        return self.reverse()

    def reverse(self) -> "Polyline":
        return Polyline(self.points[::-1], self.closed)

    def equals(self, other: "Polyline", tolerance: float = ABSOLUTE_TOLERANCE) -> bool:
        """Same vertices within *tolerance*, in the same direction.

        Closed loops may start at any vertex.
        """
        if self.closed != other.closed or len(self.points) != len(other.points):
            return False
        n = len(self.points)
        shifts = range(n) if self.closed else (0,)
        for s in shifts:
            if all(self.points[i].equals(other.points[(i+s)%n], tolerance) for i in range(n)):
                return True
        return False

    def as_ring(self) -> list[tuple[float, float]]:
        """Vertices as plain (x, y) tuples, without a repeated closing point."""
        return [(p.x, p.y) for p in self.points]

    # --- parameter space ---

    def point_at(self, p: float) -> Point:
        """Point at global parameter *p*, clamped to [0, segment_count]."""
        n = self.segment_count
        p = min(max(p, 0.0), float(n))
        i = min(int(math.floor(p)), n-1)
        return self._segments[i].point_at(p - i)

    def _closest(self, target: Point) -> tuple[int, float, Point]:
        best = None
        for i, seg in enumerate(self._segments):
            t = seg.closest_parameter(target, limit=True)
            pt = seg.point_at(t)
            d = pt.distance_to(target)
            if best is None or d < best[0]:
                best = (d, i, t, pt)
        return best[1], best[2], best[3]

    def closest_parameter(self, target: Point) -> float:
        i, t, _ = self._closest(target)
        return i + t

    def closest_point(self, target: Point) -> Point:
        return self._closest(target)[2]

    def distance_to(self, target: Point) -> float:
        return self.closest_point(target).distance_to(target)

    # --- containment ---

    def contains(self, target: Point, tolerance: float = ABSOLUTE_TOLERANCE) -> Containment:
        """Classify *target* against the closed loop (even-odd rule).

        Points within *tolerance* of an edge are "coincident".
        """
        if not self.closed:
            raise GeometryError("Containment needs a closed polyline")
        if not self._bbox.contains(target, tolerance=tolerance):
            return "outside"
        if self.distance_to(target) <= tolerance:
            return "coincident"
        px, py = target[0], target[1]
        crossings = 0
        for seg in self._segments:
            (x1, y1), (x2, y2) = seg.start, seg.end
            if (y1 <= py < y2) or (y2 <= py < y1):
                x = x1 + (py-y1)/(y2-y1)*(x2-x1)
                if x > px:
                    crossings += 1
        return "inside" if crossings % 2 else "outside"

    # --- transforms ---

    def transform(self, change: Transform) -> "Polyline":
        return Polyline(tuple(change.transform_points(self.points)), self.closed)

    def translate(self, dx: float, dy: float) -> "Polyline":
        return Polyline(tuple(p.translate(dx, dy) for p in self.points), self.closed)

    def rotate(self, angle: float, pivot: Point = Point(0, 0)) -> "Polyline":
        return self.transform(Transform.rotate(angle, pivot))

    def scale(self, x: float, y: float | None = None, center: Point = Point(0, 0)) -> "Polyline":
        return self.transform(Transform.scale(x, y, center))

