from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from flatgeom.box import BoundingBox
from flatgeom.point import Point, Vector
from flatgeom.tolerance import resolve_eps

if TYPE_CHECKING:
    from flatgeom.intersection.dispatch import Operand
    from flatgeom.ray import RayRange
    from flatgeom.transform import Transform


@dataclass(frozen=True)
class Line:
    """
    Finite segment from `start` to `end`.

    Parameters run from 0 at `start` to 1 at `end`. Derived values
    (direction, bounding box) are computed on first access and then reused.
    """

    start: Point
    end: Point

    @staticmethod
    def from_coords(coords: Sequence[Sequence[float]]) -> "Line":
        (x0, y0), (x1, y1) = coords
        return Line(Point(float(x0), float(y0)), Point(float(x1), float(y1)))

    @staticmethod
    def from_vector(start: Point, direction: Vector, length: Optional[float] = None) -> "Line":
        return Line(start, start.translate(direction, length))

    @cached_property
    def direction(self) -> Vector:
        return Vector.from_points(self.start, self.end)

    @cached_property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_corners(self.start, self.end)

    @property
    def length(self) -> float:
        return self.direction.length

    @property
    def unit_tangent(self) -> Vector:
        return self.direction.perpendicular().unitize()

    def closest_parameter(self, point: Point, finite: bool = True) -> float:
        d = self.direction
        denom = d.length_squared
        if denom == 0.0:
            return 0.0
        u = ((point.x - self.start.x) * d.x + (point.y - self.start.y) * d.y) / denom
        if finite:
            return min(1.0, max(0.0, u))
        return u

    def closest_point(self, point: Point, finite: bool = True) -> Point:
        return self.point_at(self.closest_parameter(point, finite), finite)

    def distance_to(self, other: Union[Point, "Line"], finite: bool = True) -> float:
        if isinstance(other, Point):
            return self.closest_point(other, finite).distance_to(other)

        from flatgeom.intersection.line import line_line

        if line_line(self, other, finite).intersects:
            return 0.0
        # Without a crossing, one of the four endpoints is nearest.
        return min(
            self.distance_to(other.start, finite),
            self.distance_to(other.end, finite),
            other.distance_to(self.start, finite),
            other.distance_to(self.end, finite),
        )

    def equals(self, other: "Line", eps: Optional[float] = None) -> bool:
        return self.start.equals(other.start, eps) and self.end.equals(other.end, eps)

    def extend(self, start_distance: float, end_distance: float) -> "Line":
        d = self.direction
        return Line(self.start.translate(d, -start_distance), self.start.translate(d, self.length + end_distance))

    def flip(self) -> "Line":
        return Line(self.end, self.start)

    def point_at(self, u: float, finite: bool = True) -> Point:
        if finite:
            if u <= 0.0:
                return self.start
            if u >= 1.0:
                return self.end
        d = self.direction
        return Point(self.start.x + u * d.x, self.start.y + u * d.y)

    def point_at_length(self, distance: float, finite: bool = True) -> Point:
        return self.point_at(distance / self.length, finite)

    def with_start(self, new_start: Point) -> "Line":
        return Line(new_start, self.end)

    def with_end(self, new_end: Point) -> "Line":
        return Line(self.start, new_end)

    def with_length(self, distance: float) -> "Line":
        return Line(self.start, self.start.translate(self.direction, distance))

    def intersection(
        self,
        other: "Operand",
        *,
        ray_range: Optional["RayRange"] = None,
        unique: bool = True,
        eps: Optional[float] = None,
    ) -> List[float]:
        """Parameters along this line where `other` meets it, sorted ascending."""
        from flatgeom.intersection.dispatch import line as intersect_line

        return intersect_line(self, other, ray_range=ray_range, unique=unique, eps=resolve_eps(eps))

    def transform(self, change: "Transform") -> "Line":
        return Line(change.transform_point(self.start), change.transform_point(self.end))
