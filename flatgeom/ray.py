from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from flatgeom.point import Point, Vector
from flatgeom.tolerance import resolve_eps

if TYPE_CHECKING:
    from flatgeom.intersection.dispatch import Operand
    from flatgeom.transform import Transform


class RayRange(Enum):
    """Which parameters along a ray count as valid answers."""

    # Infinite line through the origin.
    BOTH = "both"
    # Forward of the origin; the origin itself is excluded.
    POSITIVE = "positive"
    # Forward of the origin, origin included.
    INCLUDE_ZERO = "include_zero"

    def admits(self, u: float) -> bool:
        if self is RayRange.BOTH:
            return True
        if self is RayRange.POSITIVE:
            return u > 0.0
        return u >= 0.0

    @property
    def excludes_negative(self) -> bool:
        return self is not RayRange.BOTH


@dataclass(frozen=True, init=False)
class Ray:
    """
    Half-infinite line with an origin and a unit direction.

    The direction is unitized on construction, so a parameter along the ray is
    also the distance from the origin. A zero direction is kept as-is and
    never intersects anything.
    """

    origin: Point
    direction: Vector

    def __init__(self, origin: Point, direction: Vector) -> None:
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "direction", direction.unitize())

    @staticmethod
    def from_points(origin: Point, point_on_ray: Point) -> "Ray":
        return Ray(origin, Vector.from_points(origin, point_on_ray))

    def closest_parameter(self, point: Point, range: RayRange = RayRange.BOTH) -> float:
        d = self.direction
        denom = d.length_squared
        if denom == 0.0:
            return 0.0
        u = ((point.x - self.origin.x) * d.x + (point.y - self.origin.y) * d.y) / denom
        if range.excludes_negative and u < 0.0:
            return 0.0
        return u

    def closest_point(self, point: Point, range: RayRange = RayRange.BOTH) -> Point:
        return self.point_at(self.closest_parameter(point, range))

    def point_at(self, distance: float) -> Point:
        return Point(self.origin.x + distance * self.direction.x, self.origin.y + distance * self.direction.y)

    def with_origin(self, new_origin: Point) -> "Ray":
        return Ray(new_origin, self.direction)

    def with_direction(self, new_direction: Vector) -> "Ray":
        return Ray(self.origin, new_direction)

    def intersection(
        self,
        other: "Operand",
        range: RayRange = RayRange.BOTH,
        *,
        unique: bool = True,
        eps: Optional[float] = None,
    ) -> List[float]:
        """Distances along this ray where `other` meets it, sorted ascending."""
        from flatgeom.intersection.dispatch import ray as intersect_ray

        return intersect_ray(self, other, range, unique=unique, eps=resolve_eps(eps))

    def transform(self, change: "Transform") -> "Ray":
        return Ray(change.transform_point(self.origin), change.transform_vector(self.direction))
