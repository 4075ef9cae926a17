"""Shape value types, tolerance helpers and the Polygon boolean layer."""

from .constants import ABSOLUTE_TOLERANCE, PARAMETER_EPSILON, INVERT_Y, CIRCLE_SEGMENTS
from .types import Point, Interval, Orientation, Containment
from .geometry import (
    GeometryError, InvalidGeometry,
    approximately_equal, signed_area, orientation,
    Transform,
)
from .line import Line, Ray
from .bbox import BoundingBox
from .polyline import Polyline
from .circle import Circle, Rectangle
from .polygon import Polygon, union, intersection, difference
