from __future__ import annotations

from typing import Optional

from flatgeom.line import Line
from flatgeom.point import Point
from flatgeom.polyline import Polyline
from flatgeom.tolerance import resolve_eps


def horizontal_ray_line(start: Point, line: Line, eps: Optional[float] = None) -> bool:
    """
    True if a ray cast from `start` towards +x crosses `line`.

    Cheaper than the general ray/line solve: edges fully above, fully below or
    fully behind `start` are rejected before any division. An edge counts only
    when exactly one endpoint lies strictly above the ray, so a ray through a
    shared vertex is counted once, and the crossing must be at least `eps`
    ahead of `start`. An edge that only touches the ray at its top endpoint,
    approaching from below, is not counted.
    """
    a, b = line.start, line.end
    if a.y < start.y and b.y < start.y:
        return False
    if a.y > start.y and b.y > start.y:
        return False
    if a.x < start.x and b.x < start.x:
        return False
    if (a.y > start.y) == (b.y > start.y):
        # Touches the ray at an endpoint, or lies along it.
        return False

    # Ray/line solve with the ray direction fixed at (1, 0).
    bx, by = line.direction.x, line.direction.y
    dx = start.x - a.x
    dy = start.y - a.y
    s = dy / by
    t = (bx * dy - by * dx) / by
    return 0.0 <= s <= 1.0 and t >= resolve_eps(eps)


def horizontal_ray_polyline(start: Point, polyline: Polyline, eps: Optional[float] = None) -> int:
    """Number of segments of `polyline` crossed by a +x ray from `start`."""
    tol = resolve_eps(eps)
    return sum(1 for edge in polyline.segments if horizontal_ray_line(start, edge, tol))
