from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

import numpy as np

from flatgeom.interval import Interval
from flatgeom.point import Point
from flatgeom.tolerance import resolve_eps

if TYPE_CHECKING:
    from flatgeom.line import Line
    from flatgeom.polyline import Polyline
    from flatgeom.transform import Transform


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box made of two sorted intervals."""

    x_range: Interval
    y_range: Interval

    @staticmethod
    def from_corners(a: Point, b: Point) -> "BoundingBox":
        return BoundingBox(Interval(a.x, b.x), Interval(a.y, b.y))

    @staticmethod
    def from_points(points: Sequence[Point]) -> "BoundingBox":
        if not points:
            raise ValueError("BoundingBox.from_points needs at least one point")
        arr = np.asarray([(p.x, p.y) for p in points], dtype=float)
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return BoundingBox(Interval(float(lo[0]), float(hi[0])), Interval(float(lo[1]), float(hi[1])))

    @staticmethod
    def union(a: "BoundingBox", b: "BoundingBox") -> "BoundingBox":
        return BoundingBox(Interval.union(a.x_range, b.x_range), Interval.union(a.y_range, b.y_range))

    @staticmethod
    def intersection(a: "BoundingBox", b: "BoundingBox") -> Optional["BoundingBox"]:
        xr = Interval.intersection(a.x_range, b.x_range)
        if xr is None:
            return None
        yr = Interval.intersection(a.y_range, b.y_range)
        if yr is None:
            return None
        return BoundingBox(xr, yr)

    @property
    def area(self) -> float:
        return self.x_range.length * self.y_range.length

    @property
    def center(self) -> Point:
        return Point(self.x_range.mid, self.y_range.mid)

    @property
    def min(self) -> Point:
        return Point(self.x_range.min, self.y_range.min)

    @property
    def max(self) -> Point:
        return Point(self.x_range.max, self.y_range.max)

    def overlaps(self, other: "BoundingBox") -> bool:
        return BoundingBox.intersection(self, other) is not None

    def contains(self, point: Point, strict: bool = False, eps: Optional[float] = None) -> bool:
        tol = resolve_eps(eps)
        return self.x_range.contains(point.x, strict, tol) and self.y_range.contains(point.y, strict, tol)

    def closest_point(self, point: Point, include_interior: bool = True) -> Point:
        x, x_in = _closest_in_interval(self.x_range, point.x, include_interior)
        y, y_in = _closest_in_interval(self.y_range, point.y, include_interior)
        if not x_in and not y_in:
            return Point(x, y)
        if x_in and not y_in:
            return Point(point.x, y)
        if not x_in and y_in:
            return Point(x, point.y)
        if include_interior:
            return point
        # Inside: snap to whichever edge is nearer.
        if abs(point.x - x) < abs(point.y - y):
            return Point(x, point.y)
        return Point(point.x, y)

    def corners(self) -> List[Point]:
        """Corners in counterclockwise order starting at the minimum corner."""
        return [
            Point(self.x_range.min, self.y_range.min),
            Point(self.x_range.max, self.y_range.min),
            Point(self.x_range.max, self.y_range.max),
            Point(self.x_range.min, self.y_range.max),
        ]

    def edges(self) -> List["Line"]:
        from flatgeom.line import Line

        c = self.corners()
        return [Line(c[0], c[1]), Line(c[1], c[2]), Line(c[2], c[3]), Line(c[3], c[0])]

    def inflate(self, amount: float, amount_y: Optional[float] = None) -> "BoundingBox":
        ay = amount if amount_y is None else amount_y
        return BoundingBox(self.x_range.inflate(amount), self.y_range.inflate(ay))

    def point_at(self, u: float, v: float) -> Point:
        return Point(self.x_range.value_at(u), self.y_range.value_at(v))

    def remap_to_box(self, point: Point) -> Point:
        return Point(self.x_range.remap(point.x), self.y_range.remap(point.y))

    def equals(self, other: "BoundingBox", eps: Optional[float] = None) -> bool:
        return self.x_range.equals(other.x_range, eps) and self.y_range.equals(other.y_range, eps)

    def to_polyline(self) -> "Polyline":
        from flatgeom.polyline import Polyline

        c = self.corners()
        return Polyline(c + [c[0]])

    def transform(self, change: "Transform") -> "BoundingBox":
        return BoundingBox.from_points(change.transform_points(self.corners()))


def _closest_in_interval(interval: Interval, value: float, include_interior: bool) -> Tuple[float, bool]:
    if value <= interval.min:
        return interval.min, False
    if interval.max <= value:
        return interval.max, False
    if include_interior:
        return value, True
    if value - interval.min < interval.max - value:
        return interval.min, True
    return interval.max, True
