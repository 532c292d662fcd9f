from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from flatgeom.tolerance import approximately_equal, current_policy, resolve_angle, resolve_eps

if TYPE_CHECKING:
    from flatgeom.transform import Transform


@dataclass(frozen=True)
class Point:
    """A location in the plane. `==` is exact; use `equals` for tolerant comparison."""

    x: float
    y: float

    @staticmethod
    def origin() -> "Point":
        return Point(0.0, 0.0)

    def __add__(self, other: "Vector") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[float, float]:
        return (float(self.x), float(self.y))

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def equals(self, other: "Point", eps: Optional[float] = None) -> bool:
        if self.x == other.x and self.y == other.y:
            return True
        tol = resolve_eps(eps)
        if abs(self.x - other.x) > tol or abs(self.y - other.y) > tol:
            return False
        return self.distance_to(other) <= tol

    def translate(self, move: "Vector", distance: Optional[float] = None) -> "Point":
        step = move if distance is None else move.with_length(distance)
        return Point(self.x + step.x, self.y + step.y)

    def transform(self, change: "Transform") -> "Point":
        return change.transform_point(self)


@dataclass(frozen=True)
class Vector:
    """A direction and magnitude. Not a position: it has no origin."""

    x: float
    y: float

    @staticmethod
    def from_points(start: Point, end: Point) -> "Vector":
        return Vector(end.x - start.x, end.y - start.y)

    @staticmethod
    def world_x() -> "Vector":
        return Vector(1.0, 0.0)

    @staticmethod
    def world_y() -> "Vector":
        return Vector(0.0, 1.0)

    @staticmethod
    def zero() -> "Vector":
        return Vector(0.0, 0.0)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    def __rmul__(self, factor: float) -> "Vector":
        return self.__mul__(factor)

    def __truediv__(self, denominator: float) -> "Vector":
        return Vector(self.x / denominator, self.y / denominator)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def is_unit(self, eps: Optional[float] = None) -> bool:
        return approximately_equal(self.length, 1.0, eps)

    def is_zero(self, eps: Optional[float] = None) -> bool:
        return approximately_equal(self.length, 0.0, eps)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        """Z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def angle(self, other: "Vector") -> float:
        """Unsigned angle to `other` in radians, in [0, pi]."""
        return abs(math.atan2(self.cross(other), self.dot(other)))

    def angle_signed(self, other: "Vector") -> float:
        """
        Signed angle to `other` in radians.

        Positive when `other` is clockwise from this vector, negative when it is
        counterclockwise. The sign flips when the policy has `invert_y` set.
        """
        a = math.atan2(other.cross(self), other.dot(self))
        if current_policy().invert_y:
            return -a
        return a

    def is_parallel_to(self, other: "Vector", angle_eps: Optional[float] = None) -> bool:
        a = self.angle(other)
        if a == 0.0:
            return True
        # Anti-parallel vectors count as parallel.
        convex = a if a < math.pi / 2.0 else math.pi - a
        return convex < resolve_angle(angle_eps)

    def is_perpendicular_to(self, other: "Vector", angle_eps: Optional[float] = None) -> bool:
        return abs(self.angle(other) - math.pi / 2.0) < resolve_angle(angle_eps)

    def perpendicular(self) -> "Vector":
        if current_policy().invert_y:
            return Vector(-self.y, self.x)
        return Vector(self.y, -self.x)

    def reverse(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def unitize(self) -> "Vector":
        n = self.length
        if n == 0.0 or n == 1.0:
            return self
        return Vector(self.x / n, self.y / n)

    def with_length(self, new_length: float) -> "Vector":
        n = self.length
        if n == 0.0:
            return self
        factor = float(new_length) / n
        return Vector(self.x * factor, self.y * factor)

    def rotate(self, angle: float) -> "Vector":
        """Rotate counterclockwise by `angle` radians (clockwise with `invert_y`)."""
        a = -angle if current_policy().invert_y else angle
        c, s = math.cos(a), math.sin(a)
        return Vector(self.x * c - self.y * s, self.x * s + self.y * c)

    def equals(self, other: "Vector", eps: Optional[float] = None) -> bool:
        tol = resolve_eps(eps)
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def to_tuple(self) -> Tuple[float, float]:
        return (float(self.x), float(self.y))

    def transform(self, change: "Transform") -> "Vector":
        return change.transform_vector(self)
