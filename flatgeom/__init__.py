"""
Flatgeom

2D geometry primitives with intersection, containment and boolean helpers.
"""

from flatgeom.tolerance import (
    ABSOLUTE_TOLERANCE,
    ANGULAR_TOLERANCE,
    TolerancePolicy,
    approximately_equal,
    configure,
    current_policy,
    tolerance_context,
)
from flatgeom.errors import PreconditionError, UnsupportedGeometryError
from flatgeom.point import Point, Vector
from flatgeom.interval import Interval
from flatgeom.box import BoundingBox
from flatgeom.containment import CurveOrientation, PointContainment
from flatgeom.line import Line
from flatgeom.ray import Ray, RayRange
from flatgeom.circle import Circle
from flatgeom.polyline import Polyline
from flatgeom.polygon import Polygon
from flatgeom.transform import Transform
from flatgeom import intersection

__all__ = [
    "ABSOLUTE_TOLERANCE",
    "ANGULAR_TOLERANCE",
    "TolerancePolicy",
    "approximately_equal",
    "configure",
    "current_policy",
    "tolerance_context",
    "PreconditionError",
    "UnsupportedGeometryError",
    "Point",
    "Vector",
    "Interval",
    "BoundingBox",
    "CurveOrientation",
    "PointContainment",
    "Line",
    "Ray",
    "RayRange",
    "Circle",
    "Polyline",
    "Polygon",
    "Transform",
    "intersection",
]
