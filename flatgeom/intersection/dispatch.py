"""
Intersections between a primary curve and any supported geometry.

Each entry point returns parameters along its first argument, sorted
ascending. For a polyline the parameter is the segment index plus the local
parameter on that segment, so `Polyline.point_at` maps it back to a point.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Sequence, Union

from flatgeom.box import BoundingBox
from flatgeom.circle import Circle
from flatgeom.errors import UnsupportedGeometryError
from flatgeom.intersection.box import line_box, ray_box
from flatgeom.intersection.circle import line_circle, ray_circle
from flatgeom.intersection.line import line_line
from flatgeom.intersection.ray import ray_line, ray_ray
from flatgeom.line import Line
from flatgeom.point import Point
from flatgeom.polygon import Polygon
from flatgeom.polyline import Polyline
from flatgeom.ray import Ray, RayRange
from flatgeom.tolerance import resolve_eps

logger = logging.getLogger(__name__)

Geometry = Union[Point, Line, Ray, BoundingBox, Circle, Polyline, Polygon]
Operand = Union[Geometry, Sequence[Geometry]]


def line(
    the_line: Line,
    other: Operand,
    *,
    ray_range: Optional[RayRange] = None,
    unique: bool = True,
    eps: Optional[float] = None,
) -> List[float]:
    """
    Parameters along `the_line` where it meets `other`.

    `ray_range` only matters when `other` is (or contains) a ray and defaults
    to `RayRange.INCLUDE_ZERO`.
    """
    tol = resolve_eps(eps)
    rr = RayRange.INCLUDE_ZERO if ray_range is None else ray_range

    if isinstance(other, (list, tuple)):
        values: List[float] = []
        for geom in other:
            values.extend(line(the_line, geom, ray_range=rr, unique=False, eps=tol))
        return _finish(values, unique, tol)

    if isinstance(other, Point):
        t = the_line.closest_parameter(other)
        if the_line.point_at(t).distance_to(other) <= tol:
            return [t]
        return []

    if isinstance(other, Line):
        result = line_line(the_line, other, eps=tol)
        return [result.line_a_u] if result.intersects else []

    if isinstance(other, Ray):
        hit = ray_line(other, the_line, rr)
        return [hit.line_u] if hit.intersects else []

    if isinstance(other, Circle):
        return list(line_circle(the_line, other, tol).u)

    if isinstance(other, BoundingBox):
        if not line_box(the_line, _padded(other, tol, the_line.length)).intersects:
            logger.debug("line %s rejected by box %s", the_line, other)
            return []
        return _finish(_line_edges(the_line, other.to_polyline(), tol), unique, tol)

    if isinstance(other, Polyline):
        if not line_box(the_line, _padded(other.bounding_box, tol, the_line.length)).intersects:
            logger.debug("line %s rejected by polyline bounding box", the_line)
            return []
        return _finish(_line_edges(the_line, other, tol), unique, tol)

    if isinstance(other, Polygon):
        if not line_box(the_line, _padded(other.boundary.bounding_box, tol, the_line.length)).intersects:
            logger.debug("line %s rejected by polygon bounding box", the_line)
            return []
        values = _line_edges(the_line, other.boundary, tol)
        for hole in other.holes:
            if line_box(the_line, _padded(hole.bounding_box, tol, the_line.length)).intersects:
                values.extend(_line_edges(the_line, hole, tol))
        return _finish(values, unique, tol)

    raise UnsupportedGeometryError("line intersection", other)


def ray(
    the_ray: Ray,
    other: Operand,
    range: RayRange = RayRange.BOTH,
    *,
    unique: bool = True,
    eps: Optional[float] = None,
) -> List[float]:
    """
    Distances along `the_ray` where it meets `other`.

    `range` limits which distances count; the default treats the ray as an
    infinite line through its origin.
    """
    tol = resolve_eps(eps)

    if isinstance(other, (list, tuple)):
        values: List[float] = []
        for geom in other:
            values.extend(ray(the_ray, geom, range, unique=False, eps=tol))
        return _finish(values, unique, tol)

    if isinstance(other, Point):
        t = the_ray.closest_parameter(other)
        if range.admits(t) and the_ray.point_at(t).distance_to(other) <= tol:
            return [t]
        return []

    if isinstance(other, Line):
        hit = ray_line(the_ray, other, range)
        return [hit.ray_u] if hit.intersects else []

    if isinstance(other, Ray):
        pair = ray_ray(the_ray, other, range)
        return [pair.ray_a_u] if pair.intersects else []

    if isinstance(other, Circle):
        return list(ray_circle(the_ray, other, range, tol).u)

    if isinstance(other, BoundingBox):
        if not ray_box(the_ray, _padded(other, tol), range).intersects:
            logger.debug("ray %s rejected by box %s", the_ray, other)
            return []
        return _finish(_ray_edges(the_ray, other.to_polyline(), range), unique, tol)

    if isinstance(other, Polyline):
        if not ray_box(the_ray, _padded(other.bounding_box, tol), range).intersects:
            logger.debug("ray %s rejected by polyline bounding box", the_ray)
            return []
        return _finish(_ray_edges(the_ray, other, range), unique, tol)

    if isinstance(other, Polygon):
        if not ray_box(the_ray, _padded(other.boundary.bounding_box, tol), range).intersects:
            logger.debug("ray %s rejected by polygon bounding box", the_ray)
            return []
        values = _ray_edges(the_ray, other.boundary, range)
        for hole in other.holes:
            if ray_box(the_ray, _padded(hole.bounding_box, tol), range).intersects:
                values.extend(_ray_edges(the_ray, hole, range))
        return _finish(values, unique, tol)

    raise UnsupportedGeometryError("ray intersection", other)


def polyline(
    the_polyline: Polyline,
    other: Operand,
    *,
    ray_range: Optional[RayRange] = None,
    unique: bool = True,
    eps: Optional[float] = None,
) -> List[float]:
    """Parameters along `the_polyline` (segment index + local parameter) where it meets `other`."""
    tol = resolve_eps(eps)

    if isinstance(other, (list, tuple)):
        values: List[float] = []
        for geom in other:
            values.extend(polyline(the_polyline, geom, ray_range=ray_range, unique=False, eps=tol))
        return _finish(values, unique, tol)

    if isinstance(other, (BoundingBox, Polyline, Polygon)):
        other_box = other if isinstance(other, BoundingBox) else other.bounding_box
        if not the_polyline.bounding_box.overlaps(_padded(other_box, tol, _diagonal(the_polyline.bounding_box))):
            logger.debug("polyline rejected by bounding box of %s", type(other).__name__)
            return []
    elif not isinstance(other, (Point, Line, Ray, Circle)):
        raise UnsupportedGeometryError("polyline intersection", other)

    values = []
    for index, segment in enumerate(the_polyline.segments):
        for u in line(segment, other, ray_range=ray_range, unique=False, eps=tol):
            values.append(index + u)
    return _finish(values, unique, tol)


def polyline_polyline(a: Polyline, b: Polyline, eps: Optional[float] = None) -> List[Point]:
    """Points where two polylines cross, ordered along `a`."""
    tol = resolve_eps(eps)
    if not a.bounding_box.overlaps(_padded(b.bounding_box, tol, _diagonal(a.bounding_box))):
        return []
    last = float(a.segment_count)
    # Hits within tolerance of either end can land just outside [0, segment_count].
    return [a.point_at(min(last, max(0.0, u))) for u in polyline(a, b, eps=tol)]


def _line_edges(the_line: Line, loop: Polyline, eps: float) -> List[float]:
    values = []
    for edge in loop.segments:
        result = line_line(the_line, edge, eps=eps)
        if result.intersects:
            values.append(result.line_a_u)
    return values


def _ray_edges(the_ray: Ray, loop: Polyline, range: RayRange) -> List[float]:
    values = []
    for edge in loop.segments:
        hit = ray_line(the_ray, edge, range)
        if hit.intersects:
            values.append(hit.ray_u)
    return values


def _finish(values: Iterable[float], unique: bool, eps: float) -> List[float]:
    ordered = sorted(values)
    if not unique:
        return ordered
    # Near-duplicates collapse into the first value of each run.
    kept: List[float] = []
    for v in ordered:
        if not kept or abs(v - kept[-1]) >= eps:
            kept.append(v)
    return kept


def _padded(box: BoundingBox, eps: float, reach: float = 0.0) -> BoundingBox:
    """
    Grow a pre-rejection box so it never rejects a hit the edge walk accepts.

    Edge predicates allow parameters up to `eps` past either end of a segment,
    which moves a hit by at most `eps` times the length of each segment
    involved. `reach` is the length on the caller's side; the box's own
    diagonal bounds the other side.
    """
    return box.inflate(eps * (1.0 + reach + _diagonal(box)))


def _diagonal(box: BoundingBox) -> float:
    return math.hypot(box.x_range.length, box.y_range.length)
