from __future__ import annotations

from dataclasses import dataclass

from flatgeom.line import Line
from flatgeom.ray import Ray, RayRange


@dataclass(frozen=True)
class RayLineResult:
    intersects: bool
    # Distance along the ray.
    ray_u: float = 0.0
    # Parameter along the line, in [0, 1].
    line_u: float = 0.0


@dataclass(frozen=True)
class RayRayResult:
    intersects: bool
    ray_a_u: float = 0.0
    ray_b_u: float = 0.0


def ray_line(ray: Ray, line: Line, range: RayRange = RayRange.BOTH) -> RayLineResult:
    """
    Intersect a ray with a finite line.

    The line parameter must fall in [0, 1]; the ray parameter must be admitted
    by `range`. Parallel inputs never intersect.
    """
    ax, ay = ray.direction.x, ray.direction.y
    bx, by = line.direction.x, line.direction.y

    denom = -bx * ay + ax * by
    if denom == 0.0:
        return RayLineResult(False)

    dx = ray.origin.x - line.start.x
    dy = ray.origin.y - line.start.y
    s = (-ay * dx + ax * dy) / denom
    t = (bx * dy - by * dx) / denom

    if 0.0 <= s <= 1.0 and range.admits(t):
        return RayLineResult(True, t, s)
    return RayLineResult(False)


def ray_ray(a: Ray, b: Ray, range: RayRange = RayRange.BOTH) -> RayRayResult:
    """Intersect two rays; `range` applies to both of them."""
    ax, ay = a.direction.x, a.direction.y
    bx, by = b.direction.x, b.direction.y

    denom = -bx * ay + ax * by
    if denom == 0.0:
        return RayRayResult(False)

    dx = a.origin.x - b.origin.x
    dy = a.origin.y - b.origin.y
    s = (-ay * dx + ax * dy) / denom
    t = (bx * dy - by * dx) / denom

    if range.admits(s) and range.admits(t):
        return RayRayResult(True, t, s)
    return RayRayResult(False)
