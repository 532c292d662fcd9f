from __future__ import annotations

from enum import Enum


class PointContainment(Enum):
    UNSET = "unset"
    INSIDE = "inside"
    OUTSIDE = "outside"
    # On the boundary, within tolerance.
    COINCIDENT = "coincident"


class CurveOrientation(Enum):
    UNDEFINED = "undefined"
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"
