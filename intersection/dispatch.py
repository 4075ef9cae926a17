"""Intersection dispatch: where along a line, ray or polyline does it meet a target.

Every function returns the parameters along the *query* shape, ascending.
Use the query's point_at to turn them into points. Targets may be a Point,
Line, Ray, BoundingBox, Circle, Rectangle, Polyline, Polygon, or a list of
those. Unsupported targets give an empty list, the same as "no hit".
"""
import logging
from typing import Callable, Union

from shapes.bbox import BoundingBox
from shapes.circle import Circle, Rectangle
from shapes.constants import ABSOLUTE_TOLERANCE
from shapes.line import Line, Ray
from shapes.polygon import Polygon
from shapes.polyline import Polyline
from shapes.types import Point

from . import solvers

logger = logging.getLogger(__name__)

Shape = Union[Point, Line, Ray, BoundingBox, Circle, Rectangle, Polyline, Polygon]
Target = Union[Shape, list[Shape], tuple[Shape, ...]]

# NamedTuple shapes are tuples too; test for them before treating a target as a list.
_TUPLE_SHAPES = (Point, Line, Ray, BoundingBox, Circle, Rectangle)


def _is_collection(target) -> bool:
    return isinstance(target, (list, tuple)) and not isinstance(target, _TUPLE_SHAPES)


def _loop_hits(query, loop: Polyline, box_test: Callable, segment_hit: Callable) -> list[float]:
    """Query parameters at each segment of *loop* it crosses, unsorted, not deduplicated."""
    if not box_test(query, loop.bounding_box).intersects:
        return []
    hits = []
    for seg in loop.segments:
        u = segment_hit(query, seg)
        if u is not None:
            hits.append(u)
    return hits


def _line_segment_hit(query: Line, seg: Line) -> float | None:
    r = solvers.line_line(query, seg)
    return r.a_u if r.intersects else None


def _ray_segment_hit(query: Ray, seg: Line) -> float | None:
    r = solvers.ray_line(query, seg)
    return r.ray_u if r.intersects else None


# ============================================================
# Line
# ============================================================
def line(query: Line, target: Target) -> list[float]:
    """Parameters along the segment *query* (0..1) where it meets *target*."""
    if _is_collection(target):
        hits = []
        for geom in target:
            hits.extend(line(query, geom))
        return sorted(hits)
    if isinstance(target, Point):
        t = query.closest_parameter(target, limit=True)
        if query.point_at(t, limit=True) == target:
            return [t]
        return []
    if isinstance(target, Line):
        r = solvers.line_line(query, target)
        return [r.a_u] if r.intersects else []
    if isinstance(target, Ray):
        r = solvers.ray_line(target, query)
        return [r.line_u] if r.intersects else []
    if isinstance(target, (BoundingBox, Rectangle)):
        return line(query, target.to_polyline())
    if isinstance(target, Circle):
        return list(solvers.line_circle(query, target).u)
    if isinstance(target, Polyline):
        return sorted(_loop_hits(query, target, solvers.line_box, _line_segment_hit))
    if isinstance(target, Polygon):
        hits = []
        for loop in target.loops:
            hits.extend(_loop_hits(query, loop, solvers.line_box, _line_segment_hit))
        return sorted(hits)
    logger.debug("no line intersection for %s target", type(target).__name__)
    return []


# ============================================================
# Ray
# ============================================================
def ray(query: Ray, target: Target) -> list[float]:
    """Parameters along *query* (>= 0) where it meets *target*."""
    if _is_collection(target):
        hits = []
        for geom in target:
            hits.extend(ray(query, geom))
        return sorted(hits)
    if isinstance(target, Point):
        t = query.closest_parameter(target)
        if query.point_at(t) == target:
            return [t]
        return []
    if isinstance(target, Line):
        r = solvers.ray_line(query, target)
        return [r.ray_u] if r.intersects else []
    if isinstance(target, Ray):
        r = solvers.ray_ray(query, target)
        return [r.a_u] if r.intersects else []
    if isinstance(target, (BoundingBox, Rectangle)):
        return ray(query, target.to_polyline())
    if isinstance(target, Circle):
        return list(solvers.ray_circle(query, target).u)
    if isinstance(target, Polyline):
        return sorted(_loop_hits(query, target, solvers.ray_box, _ray_segment_hit))
    if isinstance(target, Polygon):
        hits = []
        for loop in target.loops:
            hits.extend(_loop_hits(query, loop, solvers.ray_box, _ray_segment_hit))
        return sorted(hits)
    logger.debug("no ray intersection for %s target", type(target).__name__)
    return []


# ============================================================
# Polyline
# ============================================================
def _may_touch(query: Polyline, target, tolerance: float) -> bool:
    """Bounding-box pre-check for a polyline query. Rays are never rejected."""
    box = query.bounding_box
    if isinstance(target, Point):
        return box.contains(target, tolerance=tolerance)
    if isinstance(target, BoundingBox):
        return box.overlaps(target)
    if isinstance(target, Ray):
        return True
    if isinstance(target, (Line, Circle, Rectangle, Polyline, Polygon)):
        return box.overlaps(target.bounding_box)
    logger.debug("no polyline intersection for %s target", type(target).__name__)
    return False


def polyline(query: Polyline, target: Target, tolerance: float = ABSOLUTE_TOLERANCE) -> list[float]:
    """Global parameters along *query* where it meets *target*.

    Segment i contributes i + u. A hit on a shared vertex is reported once.
    On a closed query the closing vertex is reported as 0, so every
    parameter lies in [0, segment_count).
    """
    if _is_collection(target):
        hits = []
        for geom in target:
            hits.extend(polyline(query, geom, tolerance))
        return sorted(hits)
    if not _may_touch(query, target, tolerance):
        return []
    n = query.segment_count
    found = set()
    for i, seg in enumerate(query.segments):
        for u in line(seg, target):
            p = i + u
            if query.is_closed and p >= n:
                p -= n
            found.add(p)
    return sorted(found)


def intersect(query: Line | Ray | Polyline, target: Target) -> list[float]:
    """Dispatch on the query kind. Other query kinds give an empty list."""
    if isinstance(query, Line):
        return line(query, target)
    if isinstance(query, Ray):
        return ray(query, target)
    if isinstance(query, Polyline):
        return polyline(query, target)
    logger.debug("cannot intersect from a %s query", type(query).__name__)
    return []
