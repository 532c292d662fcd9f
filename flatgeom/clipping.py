"""
Boolean operations on closed shapes, backed by shapely.

Shapes cross the boundary as rings: lists of explicitly closed ``(x, y)``
tuples, outer ring first and holes after it.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Union

from shapely.geometry import MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.ops import unary_union

from flatgeom.errors import PreconditionError, UnsupportedGeometryError
from flatgeom.polygon import Polygon
from flatgeom.polyline import Polyline, Ring

logger = logging.getLogger(__name__)

Shape = Union[Polyline, Polygon]
ShapeInput = Union[Shape, Sequence[Shape]]


def to_rings(shape: Shape) -> List[Ring]:
    if isinstance(shape, Polygon):
        return shape.as_rings()
    if isinstance(shape, Polyline):
        if not shape.is_closed:
            raise PreconditionError("Polyline must be closed to export as a ring")
        return [shape.as_ring()]
    raise UnsupportedGeometryError("to_rings", shape)


def from_rings(rings: Sequence[Ring]) -> Shape:
    """A single ring comes back as a closed Polyline, several as a Polygon."""
    if not rings:
        raise PreconditionError("from_rings needs at least one ring")
    if len(rings) == 1:
        return Polyline.from_coords(rings[0]).make_closed()
    return Polygon.from_rings(rings)


def union(a: ShapeInput, b: ShapeInput) -> List[Shape]:
    return _run("union", unary_union([_to_shapely(a), _to_shapely(b)]))


def intersection(a: ShapeInput, b: ShapeInput) -> List[Shape]:
    return _run("intersection", _to_shapely(a).intersection(_to_shapely(b)))


def difference(a: ShapeInput, b: ShapeInput) -> List[Shape]:
    return _run("difference", _to_shapely(a).difference(_to_shapely(b)))


def _to_shapely(shape: ShapeInput):
    if isinstance(shape, (list, tuple)):
        return unary_union([_to_shapely(s) for s in shape])
    rings = to_rings(shape)
    geom = ShapelyPolygon(rings[0], holes=rings[1:])
    if not geom.is_valid:
        geom = geom.buffer(0)
    return geom


def _run(operation: str, geom) -> List[Shape]:
    if geom.is_empty:
        logger.debug("%s produced no pieces", operation)
        return []
    if isinstance(geom, (ShapelyPolygon, MultiPolygon)):
        parts = list(geom.geoms) if hasattr(geom, "geoms") else [geom]
    else:
        # Collections can carry lines or points where shapes only touch.
        parts = [g for g in getattr(geom, "geoms", []) if isinstance(g, ShapelyPolygon)]

    out: List[Shape] = []
    for g in parts:
        if g.is_empty:
            continue
        rings = [_ring(g.exterior.coords)] + [_ring(r.coords) for r in g.interiors]
        out.append(from_rings(rings))
    logger.debug("%s produced %d piece(s)", operation, len(out))
    return out


def _ring(coords) -> Ring:
    return [(float(x), float(y)) for x, y in coords]
