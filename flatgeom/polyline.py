from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import numpy as np

from flatgeom.box import BoundingBox
from flatgeom.containment import CurveOrientation, PointContainment
from flatgeom.errors import PreconditionError
from flatgeom.line import Line
from flatgeom.point import Point, Vector
from flatgeom.tolerance import current_policy, resolve_eps

if TYPE_CHECKING:
    from flatgeom.intersection.dispatch import Operand
    from flatgeom.polygon import Polygon
    from flatgeom.ray import RayRange
    from flatgeom.transform import Transform


Ring = List[Tuple[float, float]]


@dataclass(frozen=True, init=False)
class Polyline:
    """
    Ordered chain of points joined by straight segments.

    A polyline is closed when its first and last points coincide within the
    absolute tolerance. Segment `i` runs from `points[i]` to `points[i + 1]`,
    so a parameter `u` along the polyline is a segment index plus the local
    parameter on that segment.
    """

    points: Tuple[Point, ...]

    def __init__(self, points: Sequence[Point]) -> None:
        pts = tuple(points)
        if len(pts) < 2:
            raise PreconditionError(f"Polyline needs at least 2 points, got {len(pts)}")
        object.__setattr__(self, "points", pts)

    @staticmethod
    def from_coords(coords: Sequence[Sequence[float]]) -> "Polyline":
        return Polyline([Point(float(c[0]), float(c[1])) for c in coords])

    @staticmethod
    def from_flat(values: Sequence[float]) -> "Polyline":
        """Build from interleaved x, y values."""
        if len(values) % 2 != 0:
            raise PreconditionError("Polyline.from_flat needs an even number of values")
        return Polyline([Point(float(values[i]), float(values[i + 1])) for i in range(0, len(values), 2)])

    @property
    def is_closed(self) -> bool:
        return self.points[0].equals(self.points[-1])

    @property
    def segment_count(self) -> int:
        return len(self.points) - 1

    @cached_property
    def segments(self) -> Tuple[Line, ...]:
        return tuple(Line(self.points[i], self.points[i + 1]) for i in range(len(self.points) - 1))

    @cached_property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.points)

    @cached_property
    def area(self) -> float:
        if not self.is_closed:
            return 0.0
        arr = self.to_array()
        x, y = arr[:, 0], arr[:, 1]
        return float(abs(np.sum(x[:-1] * y[1:] - x[1:] * y[:-1])) / 2.0)

    @property
    def length(self) -> float:
        return sum(s.length for s in self.segments)

    @property
    def orientation(self) -> CurveOrientation:
        if not self.is_closed:
            return CurveOrientation.UNDEFINED
        total = 0.0
        for edge in self.segments:
            total += (edge.end.x - edge.start.x) * (edge.end.y + edge.start.y)
        clockwise = total > 0.0
        if current_policy().invert_y:
            clockwise = not clockwise
        return CurveOrientation.CLOCKWISE if clockwise else CurveOrientation.COUNTERCLOCKWISE

    def with_orientation(self, goal: CurveOrientation) -> "Polyline":
        current = self.orientation
        if current is CurveOrientation.UNDEFINED and goal is not CurveOrientation.UNDEFINED:
            raise PreconditionError("Polyline must be closed to have an orientation")
        if current is goal or current is CurveOrientation.UNDEFINED:
            return self
        return self.reverse()

    def reverse(self) -> "Polyline":
        return Polyline(tuple(reversed(self.points)))

    def make_closed(self) -> "Polyline":
        if self.is_closed:
            return self
        return Polyline(self.points + (self.points[0],))

    def offset(self, distance: float) -> "Polyline":
        """
        Move each edge of a closed polyline `distance` outward (inward if negative).

        Every corner is placed where its two offset edges meet, so convex and
        reflex corners both keep their angle. Edges too short to survive the
        offset are not removed.
        """
        orientation = self.orientation
        if orientation is CurveOrientation.UNDEFINED:
            raise PreconditionError("Polyline must be closed to offset")

        pts = self.points
        last = len(pts) - 1
        moved: List[Point] = []
        for i, corner in enumerate(pts):
            # The closing point repeats the first, so neighbours wrap past it.
            before = pts[i - 1] if i > 0 else pts[last - 1]
            after = pts[i + 1] if i < last else pts[1]
            n1 = _outward(Vector.from_points(before, corner), orientation)
            n2 = _outward(Vector.from_points(corner, after), orientation)
            denom = 1.0 + n1.dot(n2)
            if denom <= 0.0:
                raise PreconditionError(f"Cannot offset the corner at {corner}: the edges double back")
            moved.append(corner + (n1 + n2) * (distance / denom))
        return Polyline(moved)

    def segment_at(self, index: int) -> Optional[Line]:
        i = math.floor(index)
        if i < 0 or i >= self.segment_count:
            return None
        return self.segments[i]

    def point_at(self, u: float) -> Optional[Point]:
        if u < 0.0 or u > self.segment_count:
            return None
        index = min(math.floor(u), self.segment_count - 1)
        return self.segments[index].point_at(u - index)

    def closest_parameter(self, point: Point) -> float:
        best_distance = math.inf
        best_u = 0.0
        for i, edge in enumerate(self.segments):
            t = edge.closest_parameter(point)
            d = point.distance_to(edge.point_at(t))
            if d < best_distance:
                best_distance = d
                best_u = i + t
        return best_u

    def closest_point(self, point: Point) -> Point:
        best_distance = math.inf
        best = point
        for edge in self.segments:
            candidate = edge.closest_point(point)
            d = point.distance_to(candidate)
            if d < best_distance:
                best_distance = d
                best = candidate
        return best

    def normal_at(self, u: float) -> Optional[Vector]:
        """Unit normal of the segment at `u`; points inward on a closed polyline."""
        segment = self.segment_at(math.floor(u))
        if segment is None:
            return None
        # Right-hand side of travel.
        normal = segment.unit_tangent
        if self.orientation is CurveOrientation.COUNTERCLOCKWISE:
            return normal.reverse()
        return normal

    def contains(self, point: Point, eps: Optional[float] = None) -> PointContainment:
        """
        Classify `point` against this closed polyline.

        Uses a bounding-box pre-check, a closest-point test for points on the
        boundary, then counts crossings of a horizontal ray cast towards +x.
        """
        if not self.is_closed:
            raise PreconditionError("Polyline must be closed to test for containment")

        from flatgeom.intersection.horizontal_ray import horizontal_ray_polyline

        tol = resolve_eps(eps)
        if not self.bounding_box.contains(point, eps=tol):
            return PointContainment.OUTSIDE
        if point.distance_to(self.closest_point(point)) <= tol:
            return PointContainment.COINCIDENT
        if horizontal_ray_polyline(point, self, eps=tol) % 2 == 1:
            return PointContainment.INSIDE
        return PointContainment.OUTSIDE

    def contains_polyline(self, other: "Polyline", eps: Optional[float] = None) -> bool:
        if not self.is_closed:
            raise PreconditionError("Polyline must be closed to test for containment")
        return all(self.contains(p, eps) is not PointContainment.OUTSIDE for p in other.points)

    def equals(self, other: "Polyline", eps: Optional[float] = None) -> bool:
        if len(self.points) != len(other.points):
            return False
        return all(a.equals(b, eps) for a, b in zip(self.points, other.points))

    def intersection_parameters(
        self,
        other: "Operand",
        *,
        ray_range: Optional["RayRange"] = None,
        unique: bool = True,
        eps: Optional[float] = None,
    ) -> List[float]:
        from flatgeom.intersection.dispatch import polyline as intersect_polyline

        return intersect_polyline(self, other, ray_range=ray_range, unique=unique, eps=resolve_eps(eps))

    def union(self, other: Union["Polyline", "Polygon", Sequence[Union["Polyline", "Polygon"]]]) -> List[Union["Polyline", "Polygon"]]:
        from flatgeom import clipping

        return clipping.union(self, other)

    def intersection(self, other: Union["Polyline", "Polygon", Sequence[Union["Polyline", "Polygon"]]]) -> List[Union["Polyline", "Polygon"]]:
        from flatgeom import clipping

        return clipping.intersection(self, other)

    def difference(self, other: Union["Polyline", "Polygon", Sequence[Union["Polyline", "Polygon"]]]) -> List[Union["Polyline", "Polygon"]]:
        from flatgeom import clipping

        return clipping.difference(self, other)

    def as_ring(self) -> Ring:
        return [p.to_tuple() for p in self.points]

    def to_array(self) -> np.ndarray:
        return np.asarray([(p.x, p.y) for p in self.points], dtype=float)

    def transform(self, change: "Transform") -> "Polyline":
        return Polyline(change.transform_points(self.points))


def _outward(edge: Vector, orientation: CurveOrientation) -> Vector:
    normal = edge.unitize().perpendicular()
    if orientation is CurveOrientation.CLOCKWISE:
        return normal.reverse()
    return normal
