"""
Affine transforms in the plane.

A transform is a 3x3 homogeneous matrix acting on column vectors
``[x, y, 1]``. Points pick up the translation column; vectors do not.
Compose with ``a @ b`` (apply ``b`` first, then ``a``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from flatgeom.errors import PreconditionError
from flatgeom.point import Point, Vector
from flatgeom.tolerance import current_policy, resolve_eps


@dataclass(frozen=True, eq=False)
class Transform:
    matrix: np.ndarray

    def __post_init__(self) -> None:
        m = np.array(self.matrix, dtype=float)
        if m.shape != (3, 3):
            raise ValueError(f"Transform matrix must be 3x3, got shape {m.shape}")
        m.flags.writeable = False
        object.__setattr__(self, "matrix", m)

    @staticmethod
    def identity() -> "Transform":
        return Transform(np.eye(3))

    @staticmethod
    def translate(move: Vector, distance: Optional[float] = None) -> "Transform":
        step = move if distance is None else move.with_length(distance)
        m = np.eye(3)
        m[0, 2] = step.x
        m[1, 2] = step.y
        return Transform(m)

    @staticmethod
    def rotate(angle: float, pivot: Optional[Point] = None) -> "Transform":
        """Counterclockwise rotation by `angle` radians about `pivot` (origin by default)."""
        a = -angle if current_policy().invert_y else angle
        c, s = math.cos(a), math.sin(a)
        rot = Transform(np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]))
        if pivot is None:
            return rot
        to_origin = Transform.translate(Vector(-pivot.x, -pivot.y))
        back = Transform.translate(Vector(pivot.x, pivot.y))
        return back @ rot @ to_origin

    @staticmethod
    def scale(x: float, y: Optional[float] = None, center: Optional[Point] = None) -> "Transform":
        sy = x if y is None else y
        sc = Transform(np.diag([float(x), float(sy), 1.0]))
        if center is None:
            return sc
        to_origin = Transform.translate(Vector(-center.x, -center.y))
        back = Transform.translate(Vector(center.x, center.y))
        return back @ sc @ to_origin

    def __matmul__(self, other: "Transform") -> "Transform":
        return Transform(self.matrix @ other.matrix)

    def combine(self, then: "Transform") -> "Transform":
        """Apply this transform, then `then`."""
        return then @ self

    @property
    def determinant(self) -> float:
        return float(np.linalg.det(self.matrix))

    def inverse(self) -> "Transform":
        if abs(self.determinant) <= resolve_eps():
            raise PreconditionError("Transform is singular and cannot be inverted")
        return Transform(np.linalg.inv(self.matrix))

    def equals(self, other: "Transform", eps: Optional[float] = None) -> bool:
        return bool(np.allclose(self.matrix, other.matrix, rtol=0.0, atol=resolve_eps(eps)))

    def transform_point(self, point: Point) -> Point:
        m = self.matrix
        return Point(
            float(m[0, 0] * point.x + m[0, 1] * point.y + m[0, 2]),
            float(m[1, 0] * point.x + m[1, 1] * point.y + m[1, 2]),
        )

    def transform_points(self, points: Sequence[Point]) -> List[Point]:
        if not points:
            return []
        arr = np.ones((len(points), 3), dtype=float)
        arr[:, 0] = [p.x for p in points]
        arr[:, 1] = [p.y for p in points]
        out = arr @ self.matrix.T
        return [Point(float(x), float(y)) for x, y in out[:, :2]]

    def transform_vector(self, vector: Vector) -> Vector:
        m = self.matrix
        return Vector(
            float(m[0, 0] * vector.x + m[0, 1] * vector.y),
            float(m[1, 0] * vector.x + m[1, 1] * vector.y),
        )
