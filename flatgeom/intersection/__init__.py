from .box import BoxResult, line_box, ray_box
from .circle import CircleResult, LineCircleIntersection, line_circle, ray_circle
from .horizontal_ray import horizontal_ray_line, horizontal_ray_polyline
from .line import LineLineResult, line_line
from .ray import RayLineResult, RayRayResult, ray_line, ray_ray

# Imported last: `line` and `ray` name the dispatch functions, not the submodules.
from .dispatch import Operand, line, polyline, polyline_polyline, ray

__all__ = [
    "BoxResult",
    "CircleResult",
    "LineCircleIntersection",
    "LineLineResult",
    "Operand",
    "RayLineResult",
    "RayRayResult",
    "horizontal_ray_line",
    "horizontal_ray_polyline",
    "line",
    "line_box",
    "line_circle",
    "line_line",
    "polyline",
    "polyline_polyline",
    "ray",
    "ray_box",
    "ray_circle",
    "ray_line",
    "ray_ray",
]
