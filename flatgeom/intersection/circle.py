from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from flatgeom.circle import Circle
from flatgeom.line import Line
from flatgeom.point import Point, Vector
from flatgeom.ray import Ray, RayRange
from flatgeom.tolerance import approximately_equal


class LineCircleIntersection(Enum):
    NONE = 0
    SINGLE = 1
    MULTIPLE = 2


@dataclass(frozen=True)
class CircleResult:
    intersects: LineCircleIntersection
    # Parameters along the line or ray, ascending.
    u: Tuple[float, ...] = ()


_MISS = CircleResult(LineCircleIntersection.NONE)


def line_circle(line: Line, circle: Circle, eps: Optional[float] = None) -> CircleResult:
    """Intersections of a segment with a circle; roots outside [0, 1] are dropped."""
    roots = _roots(line.start, line.direction, circle)
    if roots is None:
        return _MISS
    return _classify([t for t in roots if 0.0 <= t <= 1.0], eps)


def ray_circle(ray: Ray, circle: Circle, range: RayRange = RayRange.BOTH, eps: Optional[float] = None) -> CircleResult:
    """Intersections of a ray with a circle; each root is filtered by `range` first."""
    roots = _roots(ray.origin, ray.direction, circle)
    if roots is None:
        return _MISS
    return _classify([t for t in roots if range.admits(t)], eps)


def _roots(origin: Point, direction: Vector, circle: Circle) -> Optional[Tuple[float, float]]:
    # Substitute origin + t * direction into |p - center|^2 = r^2.
    f = Vector.from_points(circle.center, origin)
    a = direction.dot(direction)
    if a == 0.0:
        return None
    b = 2.0 * f.dot(direction)
    c = f.dot(f) - circle.radius * circle.radius

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    root = math.sqrt(discriminant)
    return (-b - root) / (2.0 * a), (-b + root) / (2.0 * a)


def _classify(roots: List[float], eps: Optional[float]) -> CircleResult:
    if not roots:
        return _MISS
    if len(roots) == 1:
        return CircleResult(LineCircleIntersection.SINGLE, (roots[0],))
    t1, t2 = roots
    if approximately_equal(t1, t2, eps):
        # Tangent.
        return CircleResult(LineCircleIntersection.SINGLE, (t1,))
    return CircleResult(LineCircleIntersection.MULTIPLE, (t1, t2))
