from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from flatgeom.line import Line
from flatgeom.tolerance import resolve_eps


@dataclass(frozen=True)
class LineLineResult:
    intersects: bool
    # Parameter along the first line; use Line.point_at to get the point.
    line_a_u: float = 0.0
    # Parameter along the second line.
    line_b_u: float = 0.0


_MISS = LineLineResult(False)


def line_line(a: Line, b: Line, finite: bool = True, eps: Optional[float] = None) -> LineLineResult:
    """
    Intersect two lines by Cramer's rule.

    With `finite` both parameters must fall in [-eps, 1 + eps]; otherwise the
    lines are treated as infinite. Parallel and collinear lines never
    intersect, even when they overlap.
    """
    ax, ay = a.direction.x, a.direction.y
    bx, by = b.direction.x, b.direction.y

    denom = -bx * ay + ax * by
    if denom == 0.0:
        return _MISS

    dx = a.start.x - b.start.x
    dy = a.start.y - b.start.y
    s = (-ay * dx + ax * dy) / denom
    t = (bx * dy - by * dx) / denom

    if not finite:
        if math.isfinite(s) and math.isfinite(t):
            return LineLineResult(True, t, s)
        return _MISS

    tol = resolve_eps(eps)
    if -tol <= s <= 1.0 + tol and -tol <= t <= 1.0 + tol:
        return LineLineResult(True, t, s)
    return _MISS
