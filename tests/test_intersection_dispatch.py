from __future__ import annotations

import logging
import math

import pytest

from flatgeom import intersection
from flatgeom.box import BoundingBox
from flatgeom.circle import Circle
from flatgeom.errors import UnsupportedGeometryError
from flatgeom.interval import Interval
from flatgeom.line import Line
from flatgeom.point import Point, Vector
from flatgeom.polygon import Polygon
from flatgeom.polyline import Polyline
from flatgeom.ray import Ray, RayRange


@pytest.fixture
def line() -> Line:
    return Line.from_coords([[0, 0], [10, 0]])


@pytest.fixture
def ray() -> Ray:
    return Ray(Point(0.0, 0.0), Vector(1.0, 0.0))


@pytest.fixture
def poly() -> Polyline:
    return Polyline.from_coords([(0, 0), (5, 5), (10, 0)])


def _rect(a: Point, b: Point) -> Polyline:
    return BoundingBox.from_corners(a, b).to_polyline()


def _polygon(with_hole: bool) -> Polygon:
    holes = [_rect(Point(4.0, -5.0), Point(6.0, 5.0))] if with_hole else []
    return Polygon(_rect(Point(0.0, -10.0), Point(10.0, 10.0)), holes)


# Line


@pytest.mark.parametrize(
    "point, expected",
    [(Point(5.0, 0.0), [0.5]), (Point(15.0, 0.0), []), (Point(5.0, 1.0), [])],
)
def test_line_point(line: Line, point: Point, expected: list) -> None:
    assert intersection.line(line, point) == pytest.approx(expected)


def test_line_line(line: Line) -> None:
    assert intersection.line(line, Line.from_coords([[5, -10], [5, 10]])) == pytest.approx([0.5])
    assert intersection.line(line, Line.from_coords([[5, -10], [5, 0]])) == pytest.approx([0.5])
    assert intersection.line(line, Line.from_coords([[5, -10], [5, -5]])) == []


def test_line_ray(line: Line) -> None:
    assert intersection.line(line, Ray(Point(5.0, 5.0), Vector(0.0, -1.0))) == pytest.approx([0.5])
    assert intersection.line(line, Ray(Point(10.0, 5.0), Vector(0.0, -1.0))) == pytest.approx([1.0])
    assert intersection.line(line, Ray(Point(15.0, 5.0), Vector(0.0, -1.0))) == []


def test_line_box(line: Line) -> None:
    through = BoundingBox(Interval(5.0, 10.0), Interval(-5.0, 5.0))
    assert intersection.line(line, through) == pytest.approx([0.5, 1.0])
    one_side = BoundingBox(Interval(5.0, 15.0), Interval(-5.0, 5.0))
    assert intersection.line(line, one_side) == pytest.approx([0.5])
    apart = BoundingBox(Interval(11.0, 15.0), Interval(-5.0, 5.0))
    assert intersection.line(line, apart) == []


def test_line_box_touching_corner_reports_once(line: Line) -> None:
    corner = BoundingBox.from_corners(Point(10.0, 0.0), Point(20.0, 10.0))
    assert intersection.line(line, corner) == pytest.approx([1.0])


def test_line_circle(line: Line) -> None:
    assert intersection.line(line, Circle(Point(5.0, 0.0), 1.0)) == pytest.approx([0.4, 0.6])
    assert intersection.line(line, Circle(Point(10.0, 0.0), 1.0)) == pytest.approx([0.9])
    assert intersection.line(line, Circle(Point(15.0, 0.0), 1.0)) == []


def test_line_polygon(line: Line) -> None:
    assert intersection.line(line, _polygon(with_hole=False)) == pytest.approx([0.0, 1.0])
    assert intersection.line(line, _polygon(with_hole=True)) == pytest.approx([0.0, 0.4, 0.6, 1.0])


def test_line_sequence(line: Line) -> None:
    outline = _rect(Point(0.0, -10.0), Point(10.0, 10.0))
    result = intersection.line(line, [outline, Point(5.0, 0.0)])
    assert result == pytest.approx([0.0, 0.5, 1.0])
    nested = intersection.line(line, (Point(5.0, 0.0), [Point(2.0, 0.0)]))
    assert nested == pytest.approx([0.2, 0.5])


# Ray


@pytest.mark.parametrize(
    "point, expected",
    [(Point(5.0, 0.0), [5.0]), (Point(-5.0, 0.0), [-5.0]), (Point(5.0, 1.0), [])],
)
def test_ray_point(ray: Ray, point: Point, expected: list) -> None:
    assert intersection.ray(ray, point) == pytest.approx(expected)


def test_ray_point_behind_with_forward_range(ray: Ray) -> None:
    assert intersection.ray(ray, Point(-5.0, 0.0), RayRange.POSITIVE) == []
    assert intersection.ray(ray, Point(0.0, 0.0), RayRange.INCLUDE_ZERO) == pytest.approx([0.0])
    assert intersection.ray(ray, Point(0.0, 0.0), RayRange.POSITIVE) == []


def test_ray_line(ray: Ray) -> None:
    assert intersection.ray(ray, Line.from_coords([[5, -10], [5, 10]])) == pytest.approx([5.0])
    assert intersection.ray(ray, Line.from_coords([[5, -10], [5, -5]])) == []


def test_ray_ray(ray: Ray) -> None:
    assert intersection.ray(ray, Ray(Point(5.0, 5.0), Vector(0.0, -1.0))) == pytest.approx([5.0])
    assert intersection.ray(ray, Ray(Point(15.0, 5.0), Vector(1.0, 0.0))) == []


def test_ray_box(ray: Ray) -> None:
    assert intersection.ray(ray, BoundingBox(Interval(5.0, 10.0), Interval(-5.0, 5.0))) == pytest.approx([5.0, 10.0])
    assert intersection.ray(ray, BoundingBox(Interval(5.0, 10.0), Interval(-5.0, -1.0))) == []


def test_ray_circle(ray: Ray) -> None:
    assert intersection.ray(ray, Circle(Point(5.0, 0.0), 1.0)) == pytest.approx([4.0, 6.0])
    assert intersection.ray(ray, Circle(Point(5.0, 5.0), 1.0)) == []
    assert intersection.ray(ray, Circle(Point(-5.0, 0.0), 1.0), RayRange.POSITIVE) == []


def test_ray_polygon(ray: Ray) -> None:
    assert intersection.ray(ray, _polygon(with_hole=False)) == pytest.approx([0.0, 10.0])
    assert intersection.ray(ray, _polygon(with_hole=True)) == pytest.approx([0.0, 4.0, 6.0, 10.0])
    assert intersection.ray(ray, _polygon(with_hole=True), RayRange.POSITIVE) == pytest.approx([4.0, 6.0, 10.0])


def test_ray_sequence(ray: Ray) -> None:
    outline = _rect(Point(0.0, -10.0), Point(10.0, 10.0))
    assert intersection.ray(ray, [outline, Point(5.0, 0.0)]) == pytest.approx([0.0, 5.0, 10.0])


# Polyline


def test_polyline_point(poly: Polyline) -> None:
    assert intersection.polyline(poly, Point(2.5, 2.5)) == pytest.approx([0.5])
    assert intersection.polyline(poly, Point(5.0, 5.0)) == pytest.approx([1.0])
    assert intersection.polyline(poly, Point(-5.0, 5.0)) == []


def test_polyline_shared_vertex_without_dedupe(poly: Polyline) -> None:
    assert intersection.polyline(poly, Point(5.0, 5.0), unique=False) == pytest.approx([1.0, 1.0])


def test_polyline_box(poly: Polyline) -> None:
    at_edges = BoundingBox(Interval(0.0, 10.0), Interval(0.0, 5.0))
    assert intersection.polyline(poly, at_edges) == pytest.approx([0.0, 1.0, 2.0])
    assert intersection.polyline(poly, BoundingBox(Interval(0.0, 10.0), Interval(20.0, 25.0))) == []


def test_polyline_outline(poly: Polyline) -> None:
    cuts = _rect(Point(0.0, 2.5), Point(10.0, 20.0))
    assert intersection.polyline(poly, cuts) == pytest.approx([0.5, 1.5])
    assert intersection.polyline(poly, _rect(Point(0.0, 6.0), Point(10.0, 20.0))) == []


def test_polyline_ray_uses_ray_range(poly: Polyline) -> None:
    across = Ray(Point(0.0, 2.5), Vector(1.0, 0.0))
    assert intersection.polyline(poly, across) == pytest.approx([0.5, 1.5])
    past = Ray(Point(5.0, 2.5), Vector(1.0, 0.0))
    assert intersection.polyline(poly, past) == pytest.approx([1.5])
    assert intersection.polyline(poly, past, ray_range=RayRange.BOTH) == pytest.approx([0.5, 1.5])


def test_polyline_sequence(poly: Polyline) -> None:
    cut = Line.from_coords([[0, 2.5], [10, 2.5]])
    assert intersection.polyline(poly, [cut, Point(5.0, 5.0)]) == pytest.approx([0.5, 1.0, 1.5])


def test_polyline_polyline_points() -> None:
    a = Polyline.from_coords([(0, 0), (10, 10)])
    b = Polyline.from_coords([(0, 10), (10, 0)])
    points = intersection.polyline_polyline(a, b)
    assert len(points) == 1
    assert points[0].equals(Point(5.0, 5.0))
    far = Polyline.from_coords([(20, 20), (30, 30)])
    assert intersection.polyline_polyline(a, far) == []


def test_polyline_method_matches_dispatch(poly: Polyline) -> None:
    box = BoundingBox(Interval(0.0, 10.0), Interval(0.0, 5.0))
    assert poly.intersection_parameters(box) == intersection.polyline(poly, box)


# Errors and logging


def test_unsupported_operands_raise(line: Line, ray: Ray, poly: Polyline) -> None:
    with pytest.raises(UnsupportedGeometryError):
        intersection.line(line, "not geometry")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        intersection.ray(ray, 42)  # type: ignore[arg-type]
    with pytest.raises(UnsupportedGeometryError, match="polyline intersection"):
        intersection.polyline(poly, object())  # type: ignore[arg-type]
    with pytest.raises(UnsupportedGeometryError):
        intersection.line(line, [Point(5.0, 0.0), 3.0])  # type: ignore[list-item]


def test_bounding_box_rejection_is_logged(line: Line, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="flatgeom.intersection.dispatch")
    far = _rect(Point(100.0, 100.0), Point(110.0, 110.0))
    assert intersection.line(line, far) == []
    assert "rejected" in caplog.text


def test_edge_just_past_line_end_is_found_whatever_the_wrapper(line: Line) -> None:
    edge = Line(Point(10.0000005, -1.0), Point(10.0000005, 1.0))
    direct = intersection.line(line, edge)
    assert direct == pytest.approx([1.00000005])
    assert intersection.line(line, Polyline([edge.start, edge.end])) == pytest.approx(direct)
    assert intersection.line(line, [edge]) == pytest.approx(direct)
    further = Line(Point(10.000005, -1.0), Point(10.000005, 1.0))
    assert intersection.line(line, Polyline([further.start, further.end])) == pytest.approx([1.0000005])
    as_polyline = Polyline([line.start, line.end])
    assert intersection.polyline(as_polyline, Polyline([edge.start, edge.end])) == pytest.approx(direct)


@pytest.mark.parametrize("range", [RayRange.BOTH, RayRange.POSITIVE, RayRange.INCLUDE_ZERO])
def test_ray_through_bounding_box_corner_is_not_rejected(range: RayRange) -> None:
    r = Ray(Point(-3.0, 3.0), Vector(3.0, -1.0))
    kite = Polyline.from_coords([(0, 2), (3, 3), (4, 6), (3, 2), (0, 2)])
    assert intersection.ray(r, kite, range) == pytest.approx([math.sqrt(10.0)])
