"""Pairwise intersection solvers for straight shapes, circles and boxes.

Each solver reports whether the shapes meet and where, as parameters along
the participants. Range checks allow PARAMETER_EPSILON of slack and clamp
back, so a hit at an end point always reports exactly 0 or 1.
"""
import math
from typing import NamedTuple

from shapes.bbox import BoundingBox
from shapes.circle import Circle
from shapes.constants import PARAMETER_EPSILON
from shapes.line import Line, Ray


class LineLineResult(NamedTuple):
    intersects: bool; a_u: float = 0.0; b_u: float = 0.0

class RayLineResult(NamedTuple):
    intersects: bool; ray_u: float = 0.0; line_u: float = 0.0

class RayRayResult(NamedTuple):
    intersects: bool; a_u: float = 0.0; b_u: float = 0.0

class CircleResult(NamedTuple):
    intersects: bool; u: tuple[float, ...] = ()

class BoxResult(NamedTuple):
    intersects: bool; u_min: float = 0.0; u_max: float = 0.0


# ============================================================
# Helpers
# ============================================================
def _bounded(u: float, eps: float = PARAMETER_EPSILON) -> float | None:
    """u clamped to [0, 1], or None if it lies outside by more than eps."""
    if u < -eps or u > 1+eps:
        return None
    return min(max(u, 0.0), 1.0)

def _forward(u: float, eps: float = PARAMETER_EPSILON) -> float | None:
    """u clamped to [0, inf), or None if it is below -eps."""
    if u < -eps:
        return None
    return max(u, 0.0)

def _solve(p1, d1, p2, d2) -> tuple[float, float] | None:
    """Parameters (t, s) where p1+t*d1 == p2+s*d2; None if parallel."""
    det = d1[0]*d2[1]-d1[1]*d2[0]
    if abs(det) < 1e-12:
        return None
    wx = p2[0]-p1[0]; wy = p2[1]-p1[1]
    t = (wx*d2[1]-wy*d2[0])/det
    s = (wx*d1[1]-wy*d1[0])/det
    return t, s

def _circle_roots(p, d, c, r) -> list[float]:
    """Ascending t where p+t*d meets the circle at c with radius r.

    A discriminant within rounding slack of zero is a tangent: one root.
    """
    ax = p[0]-c[0]; ay = p[1]-c[1]
    A = d[0]**2+d[1]**2; B = 2*(ax*d[0]+ay*d[1]); C = ax**2+ay**2-r**2
    if A == 0:
        return []
    disc = B**2-4*A*C
    slack = PARAMETER_EPSILON*(B*B+4*A*r*r)
    if disc < -slack:
        return []
    if disc <= slack:
        return [-B/(2*A)]
    sq = math.sqrt(disc)
    return [(-B-sq)/(2*A), (-B+sq)/(2*A)]

def _clip_box(p, d, box: BoundingBox, u0: float, u1: float) -> BoxResult:
    """Liang-Barsky clip of p+u*d, u in [u0, u1], against box."""
    b = box.inflate(PARAMETER_EPSILON)
    checks = [(-d[0], p[0]-b.x_range.min), (d[0], b.x_range.max-p[0]),
              (-d[1], p[1]-b.y_range.min), (d[1], b.y_range.max-p[1])]
    for pk, qk in checks:
        if pk == 0:
            if qk < 0:
                return BoxResult(False)
            continue
        r = qk/pk
        if pk < 0:
            u0 = max(u0, r)
        else:
            u1 = min(u1, r)
        if u0 > u1:
            return BoxResult(False)
    return BoxResult(True, u0, u1)

# ============================================================
# Solvers
# ============================================================
def line_line(a: Line, b: Line) -> LineLineResult:
    """Intersection of two segments. Parallel and collinear segments miss."""
    sol = _solve(a.start, a.direction, b.start, b.direction)
    if sol is None:
        return LineLineResult(False)
    t, s = _bounded(sol[0]), _bounded(sol[1])
    if t is None or s is None:
        return LineLineResult(False)
    return LineLineResult(True, t, s)

def ray_line(ray: Ray, line: Line) -> RayLineResult:
    sol = _solve(ray.start, ray.direction, line.start, line.direction)
    if sol is None:
        return RayLineResult(False)
    t, s = _forward(sol[0]), _bounded(sol[1])
    if t is None or s is None:
        return RayLineResult(False)
    return RayLineResult(True, t, s)

def ray_ray(a: Ray, b: Ray) -> RayRayResult:
    sol = _solve(a.start, a.direction, b.start, b.direction)
    if sol is None:
        return RayRayResult(False)
    t, s = _forward(sol[0]), _forward(sol[1])
    if t is None or s is None:
        return RayRayResult(False)
    return RayRayResult(True, t, s)

def line_circle(line: Line, circle: Circle) -> CircleResult:
    """Parameters along *line* where it crosses or touches *circle*."""
    roots = [_bounded(t) for t in _circle_roots(line.start, line.direction, circle.center, circle.radius)]
    u = [t for t in roots if t is not None]
    return CircleResult(bool(u), tuple(u))

def ray_circle(ray: Ray, circle: Circle) -> CircleResult:
    roots = [_forward(t) for t in _circle_roots(ray.start, ray.direction, circle.center, circle.radius)]
    u = [t for t in roots if t is not None]
    return CircleResult(bool(u), tuple(u))

def line_box(line: Line, box: BoundingBox) -> BoxResult:
    """Parameter range of *line* inside *box*; used as a fast reject."""
    return _clip_box(line.start, line.direction, box, 0.0, 1.0)

def ray_box(ray: Ray, box: BoundingBox) -> BoxResult:
    return _clip_box(ray.start, ray.direction, box, 0.0, math.inf)
