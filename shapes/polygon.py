"""Polygon with holes: canonical orientation, containment and boolean composition.

If the y-axis points up the boundary is always counter-clockwise and the
holes clockwise. With invert_y (y pointing down) both appear the other way
on screen. Either way boundary and holes wind in opposite directions.
"""
from dataclasses import dataclass
from typing import Sequence, Union

from clipping import ClippingError, Operation, RingSet, clip

from .bbox import BoundingBox
from .constants import ABSOLUTE_TOLERANCE, INVERT_Y
from .geometry import GeometryError, InvalidGeometry, Transform
from .polyline import Polyline
from .types import Containment, Point

Operand = Union[Polyline, "Polygon", Sequence[Polyline], Sequence["Polygon"]]


@dataclass(frozen=True)
class Polygon:
    boundary: Polyline
    holes: tuple[Polyline, ...] = ()
    invert_y: bool = INVERT_Y

    def __post_init__(self):
        if not self.boundary.is_closed:
            raise InvalidGeometry("Boundary must be closed to turn into polygon")
        holes = tuple(self.holes)
        for hole in holes:
            if not hole.is_closed:
                raise InvalidGeometry("Hole must be closed to turn into polygon")
        object.__setattr__(self, "boundary", self.boundary.with_orientation("CCW", self.invert_y))
        object.__setattr__(self, "holes", tuple(h.with_orientation("CW", self.invert_y) for h in holes))

    @classmethod
    def from_rings(cls, rings: Sequence[Sequence[Sequence[float]]], invert_y: bool = INVERT_Y) -> "Polygon":
        """First ring is the boundary, the rest are holes."""
        if len(rings) == 0:
            raise GeometryError("Polygon needs at least one ring")
        loops = [Polyline.from_coords(r, closed=True) for r in rings]
        return cls(loops[0], tuple(loops[1:]), invert_y)

    # ============================================================
    # Properties
    # ============================================================
    @property
    def area(self) -> float:
        return self.boundary.area - sum(h.area for h in self.holes)

    @property
    def bounding_box(self) -> BoundingBox:
        return self.boundary.bounding_box

    @property
    def loops(self) -> tuple[Polyline, ...]:
        return (self.boundary,) + self.holes

    def equals(self, other: "Polygon", tolerance: float = ABSOLUTE_TOLERANCE) -> bool:
        """Boundaries equal and holes equal pairwise, in order."""
        if len(self.holes) != len(other.holes):
            return False
        if not self.boundary.equals(other.boundary, tolerance):
            return False
        return all(h.equals(o, tolerance) for h, o in zip(self.holes, other.holes))

    def as_rings(self) -> RingSet:
        """Boundary ring followed by the hole rings, in stored orientation."""
        return [loop.as_ring() for loop in self.loops]

    # ============================================================
    # Point Queries
    # ============================================================
    def contains(self, p: Point, tolerance: float = ABSOLUTE_TOLERANCE) -> Containment:
        """Classify *p* as "outside", "inside" or "coincident".

        Inside a hole is outside the polygon. The first hole that reports
        inside or coincident decides.
        """
        boundary_containment = self.boundary.contains(p, tolerance)
        if boundary_containment != "inside":
            return boundary_containment
        for hole in self.holes:
            hole_containment = hole.contains(p, tolerance)
            if hole_containment == "inside":
                return "outside"
            if hole_containment == "coincident":
                return "coincident"
        return "inside"

    def closest_loop(self, p: Point) -> Polyline:
        """Boundary or hole whose edge passes nearest to *p*."""
        return min(self.loops, key=lambda loop: loop.distance_to(p))

    def closest_point(self, p: Point) -> Point:
        """*p* itself when inside, otherwise the nearest point on any loop."""
        if self.contains(p) == "inside":
            return Point(p[0], p[1])
        best_d = None; best = Point(p[0], p[1])
        for loop in self.loops:
            if best_d is not None:
                # A loop whose box is already farther away cannot be closer.
                box_pt = loop.bounding_box.closest_point(p, include_interior=True)
                if box_pt.distance_to(p) > best_d:
                    continue
            test = loop.closest_point(p)
            d = test.distance_to(p)
            if best_d is None or d < best_d:
                best_d, best = d, test
        return best

    # ============================================================
    # Boolean Composition
    # ============================================================
    def union(self, joiner: Operand) -> list["Polygon"]:
        """Join with a polyline, polygon or list of them. Disjoint inputs give several pieces."""
        return self._compose("union", joiner)

    def intersection(self, intersector: Operand) -> list["Polygon"]:
        return self._compose("intersection", intersector)

    def difference(self, subtractor: Operand) -> list["Polygon"]:
        return self._compose("difference", subtractor)

    def _compose(self, operation: Operation, operand: Operand) -> list["Polygon"]:
        try:
            pieces = clip(self.as_rings(), _to_multi(operand), operation)
        except ClippingError as e:
            raise GeometryError(f"Couldn't convert geometry for boolean: {e}") from e
        return [Polygon.from_rings(rings, self.invert_y) for rings in pieces if rings]

    # ============================================================
    # Transforms
    # ============================================================
    def transform(self, change: Transform) -> "Polygon":
        return Polygon(self.boundary.transform(change),
                       tuple(h.transform(change) for h in self.holes), self.invert_y)

    def translate(self, dx: float, dy: float) -> "Polygon":
        return Polygon(self.boundary.translate(dx, dy),
                       tuple(h.translate(dx, dy) for h in self.holes), self.invert_y)

    def rotate(self, angle: float, pivot: Point = Point(0, 0)) -> "Polygon":
        return self.transform(Transform.rotate(angle, pivot))

    def scale(self, x: float, y: float | None = None, center: Point = Point(0, 0)) -> "Polygon":
        return self.transform(Transform.scale(x, y, center))


def _to_multi(operand) -> list[RingSet]:
    """Operand as a list of ring-sets, one per shape."""
    if isinstance(operand, Polyline):
        return [[operand.as_ring()]]
    if isinstance(operand, Polygon):
        return [operand.as_rings()]
    if isinstance(operand, (list, tuple)):
        out = []
        for shape in operand:
            if isinstance(shape, Polyline):
                out.append([shape.as_ring()])
            elif isinstance(shape, Polygon):
                out.append(shape.as_rings())
            else:
                raise GeometryError(f"Couldn't convert {type(shape).__name__} for boolean")
        return out
    raise GeometryError(f"Couldn't convert {type(operand).__name__} for boolean")


# ============================================================
# Functional Interface
# ============================================================
def union(polygon: Polygon, joiner: Operand) -> list[Polygon]:
    return polygon.union(joiner)

def intersection(polygon: Polygon, intersector: Operand) -> list[Polygon]:
    return polygon.intersection(intersector)

def difference(polygon: Polygon, subtractor: Operand) -> list[Polygon]:
    return polygon.difference(subtractor)
