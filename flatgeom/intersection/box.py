from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from flatgeom.box import BoundingBox
from flatgeom.interval import Interval
from flatgeom.line import Line
from flatgeom.point import Point, Vector
from flatgeom.ray import Ray, RayRange


@dataclass(frozen=True)
class BoxResult:
    intersects: bool
    # Portion of the line/ray inside the box. Not necessarily boundary crossings:
    # a segment fully inside the box reports its whole domain.
    domain: Interval = field(default_factory=lambda: Interval(0.0, 0.0))


_MISS = BoxResult(False)


def line_box(line: Line, box: BoundingBox) -> BoxResult:
    """Clip a segment against an axis-aligned box (Liang-Barsky)."""
    xr, yr = box.x_range, box.y_range
    s, e = line.start, line.end
    if (s.x < xr.min and e.x < xr.min) or (s.x > xr.max and e.x > xr.max):
        return _MISS
    if (s.y < yr.min and e.y < yr.min) or (s.y > yr.max and e.y > yr.max):
        return _MISS

    bounds = _clip(line.start, line.direction, box, 0.0, 1.0)
    if bounds is None:
        return _MISS
    return BoxResult(True, Interval(*bounds))


def ray_box(ray: Ray, box: BoundingBox, range: RayRange = RayRange.BOTH) -> BoxResult:
    """Clip a ray against an axis-aligned box; the domain may be unbounded."""
    lower = 0.0 if range.excludes_negative else -math.inf
    bounds = _clip(ray.origin, ray.direction, box, lower, math.inf)
    if bounds is None or not range.admits(bounds[1]):
        return _MISS
    return BoxResult(True, Interval(*bounds))


def _clip(origin: Point, direction: Vector, box: BoundingBox, lower: float, upper: float) -> Optional[Tuple[float, float]]:
    xr, yr = box.x_range, box.y_range
    # (p, q) pairs for the left, right, bottom and top slab planes.
    p = (-direction.x, direction.x, -direction.y, direction.y)
    q = (origin.x - xr.min, xr.max - origin.x, origin.y - yr.min, yr.max - origin.y)

    for pk, qk in zip(p, q):
        if pk == 0.0 and qk < 0.0:
            # Parallel to this slab and outside it.
            return None

    entering: List[float] = [lower]
    leaving: List[float] = [upper]
    for axis in (0, 2):
        if p[axis] == 0.0:
            continue
        r_neg = q[axis] / p[axis]
        r_pos = q[axis + 1] / p[axis + 1]
        if p[axis] < 0.0:
            entering.append(r_neg)
            leaving.append(r_pos)
        else:
            entering.append(r_pos)
            leaving.append(r_neg)

    t0 = max(entering)
    t1 = min(leaving)
    if t0 > t1:
        return None
    return t0, t1
