"""Ring-set clipping on top of shapely.

A ring is a closed loop of (x, y) pairs, without a repeated closing point.
A ring-set is a list of rings: the outer boundary first, holes after it.
Ring-sets carry no winding requirement; shapely accepts either direction.
"""
import logging
from typing import Literal, Sequence

from shapely.geometry import GeometryCollection, MultiPolygon, Polygon
from shapely.ops import unary_union
from shapely.validation import make_valid

logger = logging.getLogger(__name__)

Ring = list[tuple[float, float]]
RingSet = list[Ring]
Operation = Literal["union", "intersection", "difference"]

_OPERATIONS = {
    "union": lambda a, b: a.union(b),
    "intersection": lambda a, b: a.intersection(b),
    "difference": lambda a, b: a.difference(b),
}


class ClippingError(ValueError):
    """Raised when a ring-set cannot be turned into an area."""


def _to_polygon(rings: Sequence[Sequence[Sequence[float]]]):
    if not rings:
        raise ClippingError("Ring-set needs at least one ring")
    for ring in rings:
        if len(ring) < 3:
            raise ClippingError(f"Ring needs at least 3 points, got {len(ring)}")
    poly = Polygon(rings[0], holes=list(rings[1:]))
    if poly.is_valid:
        return poly
    # Keep every lobe of a self-intersecting ring, drop collapsed linework.
    return unary_union([Polygon(r[0], r[1:]) for r in _explode(make_valid(poly))])


def _ring(coords) -> Ring:
    pts = [(float(x), float(y)) for x, y in coords]
    if len(pts) > 1 and pts[0] == pts[-1]:
        pts.pop()  # remove closing point
    return pts


def _explode(geom) -> list[RingSet]:
    """Split a shapely result into ring-sets, dropping non-areal pieces."""
    if geom is None or geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        return [[_ring(geom.exterior.coords)] + [_ring(r.coords) for r in geom.interiors]]
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        out = []
        for part in geom.geoms:
            if isinstance(part, (Polygon, MultiPolygon, GeometryCollection)):
                out.extend(_explode(part))
            else:
                logger.debug("discarding %s piece from clipping result", part.geom_type)
        return out
    logger.debug("discarding %s clipping result", geom.geom_type)
    return []


def clip(subject: RingSet, operands: Sequence[RingSet], operation: Operation) -> list[RingSet]:
    """Apply *operation* between *subject* and the union of *operands*.

    Returns one ring-set per disjoint output piece; the list may be empty.
    """
    try:
        op = _OPERATIONS[operation]
    except KeyError:
        raise ClippingError(f"Unknown clipping operation: {operation!r}") from None
    a = _to_polygon(subject)
    b = unary_union([_to_polygon(rs) for rs in operands])
    pieces = _explode(op(a, b))
    logger.debug("%s of %d operand(s) produced %d piece(s)", operation, len(operands), len(pieces))
    return pieces
