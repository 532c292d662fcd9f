from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

from flatgeom.box import BoundingBox
from flatgeom.containment import CurveOrientation, PointContainment
from flatgeom.errors import PreconditionError
from flatgeom.point import Point
from flatgeom.polyline import Polyline, Ring

if TYPE_CHECKING:
    from flatgeom.transform import Transform


@dataclass(frozen=True, init=False)
class Polygon:
    """
    Closed boundary with zero or more holes.

    The boundary is stored counterclockwise and holes clockwise. Holes are
    expected to sit inside the boundary without overlapping each other; this
    is not checked.
    """

    boundary: Polyline
    holes: Tuple[Polyline, ...]

    def __init__(self, boundary: Polyline, holes: Sequence[Polyline] = ()) -> None:
        if not boundary.is_closed:
            raise PreconditionError("Boundary must be closed to turn into polygon")
        oriented_holes = []
        for hole in holes:
            if not hole.is_closed:
                raise PreconditionError("Hole must be closed to turn into polygon")
            oriented_holes.append(hole.with_orientation(CurveOrientation.CLOCKWISE))
        object.__setattr__(self, "boundary", boundary.with_orientation(CurveOrientation.COUNTERCLOCKWISE))
        object.__setattr__(self, "holes", tuple(oriented_holes))

    @staticmethod
    def from_rings(rings: Sequence[Sequence[Sequence[float]]]) -> "Polygon":
        if not rings:
            raise PreconditionError("Polygon.from_rings needs at least one ring")
        loops = [Polyline.from_coords(r).make_closed() for r in rings]
        return Polygon(loops[0], loops[1:])

    @property
    def area(self) -> float:
        return self.boundary.area - sum(h.area for h in self.holes)

    @property
    def bounding_box(self) -> BoundingBox:
        return self.boundary.bounding_box

    @property
    def loops(self) -> Tuple[Polyline, ...]:
        return (self.boundary,) + self.holes

    def closest_loop(self, point: Point) -> Polyline:
        return min(self.loops, key=lambda loop: point.distance_to(loop.closest_point(point)))

    def closest_point(self, point: Point, eps: Optional[float] = None) -> Point:
        """`point` itself when inside, otherwise the nearest point on any loop."""
        if self.contains(point, eps) is PointContainment.INSIDE:
            return point
        best_distance = math.inf
        best = point
        for loop in self.loops:
            # A loop whose box is already further away cannot beat the best.
            if point.distance_to(loop.bounding_box.closest_point(point)) > best_distance:
                continue
            candidate = loop.closest_point(point)
            d = point.distance_to(candidate)
            if d < best_distance:
                best_distance = d
                best = candidate
        return best

    def contains(self, point: Point, eps: Optional[float] = None) -> PointContainment:
        result = self.boundary.contains(point, eps)
        if result is not PointContainment.INSIDE:
            return result
        for hole in self.holes:
            in_hole = hole.contains(point, eps)
            if in_hole is PointContainment.INSIDE:
                return PointContainment.OUTSIDE
            if in_hole is PointContainment.COINCIDENT:
                return PointContainment.COINCIDENT
        return PointContainment.INSIDE

    def equals(self, other: "Polygon", eps: Optional[float] = None) -> bool:
        if len(self.holes) != len(other.holes):
            return False
        if not self.boundary.equals(other.boundary, eps):
            return False
        return all(a.equals(b, eps) for a, b in zip(self.holes, other.holes))

    def as_rings(self) -> List[Ring]:
        return [loop.as_ring() for loop in self.loops]

    def union(self, other: Union[Polyline, "Polygon", Sequence[Union[Polyline, "Polygon"]]]) -> List[Union[Polyline, "Polygon"]]:
        from flatgeom import clipping

        return clipping.union(self, other)

    def intersection(self, other: Union[Polyline, "Polygon", Sequence[Union[Polyline, "Polygon"]]]) -> List[Union[Polyline, "Polygon"]]:
        from flatgeom import clipping

        return clipping.intersection(self, other)

    def difference(self, other: Union[Polyline, "Polygon", Sequence[Union[Polyline, "Polygon"]]]) -> List[Union[Polyline, "Polygon"]]:
        from flatgeom import clipping

        return clipping.difference(self, other)

    def transform(self, change: "Transform") -> "Polygon":
        return Polygon(self.boundary.transform(change), [h.transform(change) for h in self.holes])
