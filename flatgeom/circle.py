from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from flatgeom.box import BoundingBox
from flatgeom.containment import PointContainment
from flatgeom.errors import PreconditionError
from flatgeom.interval import Interval
from flatgeom.point import Point, Vector
from flatgeom.tolerance import approximately_equal, resolve_eps

if TYPE_CHECKING:
    from flatgeom.transform import Transform


@dataclass(frozen=True)
class Circle:
    """Circle with a strictly positive radius. Angles are measured from world +x."""

    center: Point
    radius: float

    def __post_init__(self) -> None:
        if not float(self.radius) > 0.0:
            raise PreconditionError(f"Circle radius must be greater than 0, got {self.radius}")

    @staticmethod
    def from_center_start(center: Point, start: Point) -> "Circle":
        return Circle(center, center.distance_to(start))

    @staticmethod
    def from_three_points(p1: Point, p2: Point, p3: Point, eps: Optional[float] = None) -> "Circle":
        temp = p2.x * p2.x + p2.y * p2.y
        bc = (p1.x * p1.x + p1.y * p1.y - temp) / 2.0
        cd = (temp - p3.x * p3.x - p3.y * p3.y) / 2.0
        det = (p1.x - p2.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p2.y)
        if approximately_equal(det, 0.0, eps):
            raise PreconditionError("Circle.from_three_points: points are collinear")
        cx = (bc * (p2.y - p3.y) - cd * (p1.y - p2.y)) / det
        cy = ((p1.x - p2.x) * cd - (p2.x - p3.x) * bc) / det
        center = Point(cx, cy)
        return Circle(center, center.distance_to(p1))

    @property
    def bounding_box(self) -> BoundingBox:
        r = self.radius
        return BoundingBox(
            Interval(self.center.x - r, self.center.x + r),
            Interval(self.center.y - r, self.center.y + r),
        )

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    @property
    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def contains(self, point: Point, eps: Optional[float] = None) -> PointContainment:
        distance = self.center.distance_to(point)
        if abs(distance - self.radius) <= resolve_eps(eps):
            return PointContainment.COINCIDENT
        if distance <= self.radius:
            return PointContainment.INSIDE
        return PointContainment.OUTSIDE

    def closest_parameter(self, point: Point) -> float:
        """Angle in [0, 2*pi) of the point on the circle nearest `point`."""
        a = math.atan2(point.y - self.center.y, point.x - self.center.x)
        if a < 0.0:
            return 2.0 * math.pi + a
        return a

    def closest_point(self, point: Point) -> Point:
        offset = Vector.from_points(self.center, point)
        if offset.length == 0.0:
            # Every point is equally near; pick angle 0.
            return self.point_at(0.0)
        return self.center + offset.with_length(self.radius)

    def point_at(self, angle: float) -> Point:
        return Point(self.center.x + math.cos(angle) * self.radius, self.center.y + math.sin(angle) * self.radius)

    def point_at_length(self, distance: float) -> Point:
        return self.point_at(distance / self.radius)

    def tangent_at(self, angle: float) -> Vector:
        return Vector(-math.sin(angle) * self.radius, math.cos(angle) * self.radius)

    def equals(self, other: "Circle", eps: Optional[float] = None) -> bool:
        return approximately_equal(self.radius, other.radius, eps) and self.center.equals(other.center, eps)

    def transform(self, change: "Transform") -> "Circle":
        sx = change.transform_vector(Vector.world_x()).length
        sy = change.transform_vector(Vector.world_y()).length
        if abs(sx - sy) > resolve_eps():
            raise PreconditionError("Circle can only be scaled uniformly")
        return Circle(change.transform_point(self.center), self.radius * sx)
