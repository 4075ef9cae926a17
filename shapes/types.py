"""Value types for the shape kernel: points, intervals, classification literals."""
import math
from typing import Literal, NamedTuple, Optional

from .constants import ABSOLUTE_TOLERANCE

Orientation = Literal["CW", "CCW"]
Containment = Literal["outside", "inside", "coincident"]


def typed_eq(self, other):
    """Tuple equality, except that shapes of different types are never equal."""
    if isinstance(other, tuple) and type(other) is not tuple and type(other) is not type(self):
        return False
    return tuple.__eq__(self, other)

def typed_ne(self, other):
    eq = typed_eq(self, other)
    return eq if eq is NotImplemented else not eq


class Point(NamedTuple):
    """2D point, also used as a displacement vector. Equality is exact."""
    x: float; y: float
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other[0]-self.x, other[1]-self.y)

    def translate(self, dx: float, dy: float) -> "Point":
        return Point(self.x+dx, self.y+dy)

    def equals(self, other: "Point", tolerance: float = ABSOLUTE_TOLERANCE) -> bool:
        """True if *other* lies within *tolerance* of this point."""
        return self.distance_to(other) < tolerance


class Interval(NamedTuple):
    """Closed scalar range with min <= max."""
    min: float; max: float
    __eq__ = typed_eq; __ne__ = typed_ne; __hash__ = tuple.__hash__

    @classmethod
    def sorted(cls, a: float, b: float) -> "Interval":
        return cls(a, b) if a <= b else cls(b, a)

    @property
    def length(self) -> float:
        return self.max - self.min

    @property
    def mid(self) -> float:
        return (self.min + self.max) / 2

    def contains(self, value: float, strict: bool = False,
                 tolerance: float = ABSOLUTE_TOLERANCE) -> bool:
        if strict:
            return self.min < value < self.max
        return self.min - tolerance <= value <= self.max + tolerance

    def overlaps(self, other: "Interval") -> bool:
        # Closed ranges: touching end points overlap.
        return self.min <= other.max and other.min <= self.max

    def union(self, other: "Interval") -> "Interval":
        return Interval(min(self.min, other.min), max(self.max, other.max))

    def intersection(self, other: "Interval") -> Optional["Interval"]:
        if not self.overlaps(other):
            return None
        return Interval(max(self.min, other.min), min(self.max, other.max))

    def value_at(self, t: float) -> float:
        """Value at normalised position t (0 -> min, 1 -> max)."""
        return self.min + t * (self.max - self.min)

    def remap(self, value: float) -> float:
        """Inverse of value_at. A zero-length interval maps everything to 0."""
        if self.length == 0:
            return 0.0
        return (value - self.min) / (self.max - self.min)

    def inflate(self, amount: float) -> "Interval":
        return Interval.sorted(self.min - amount, self.max + amount)

    def translate(self, amount: float) -> "Interval":
        return Interval(self.min + amount, self.max + amount)
