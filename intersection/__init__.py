"""Pairwise solvers and the intersection dispatch engine."""

from .solvers import (
    LineLineResult, RayLineResult, RayRayResult, CircleResult, BoxResult,
    line_line, ray_line, ray_ray, line_circle, ray_circle, line_box, ray_box,
)
from .dispatch import line, ray, polyline, intersect
