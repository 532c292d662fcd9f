from __future__ import annotations

import math

import pytest

from flatgeom.circle import Circle
from flatgeom.containment import PointContainment
from flatgeom.errors import PreconditionError
from flatgeom.point import Point, Vector
from flatgeom.polyline import Polyline
from flatgeom.transform import Transform


def test_radius_must_be_positive() -> None:
    with pytest.raises(PreconditionError):
        Circle(Point(0.0, 0.0), 0.0)
    with pytest.raises(ValueError):
        Circle(Point(0.0, 0.0), -1.0)


def test_measurements() -> None:
    c = Circle(Point(1.0, 2.0), 2.0)
    assert c.diameter == 4.0
    assert c.circumference == pytest.approx(4.0 * math.pi)
    assert c.area == pytest.approx(4.0 * math.pi)
    box = c.bounding_box
    assert (box.x_range.min, box.x_range.max) == (-1.0, 3.0)
    assert (box.y_range.min, box.y_range.max) == (0.0, 4.0)


def test_from_center_start() -> None:
    c = Circle.from_center_start(Point(0.0, 0.0), Point(3.0, 4.0))
    assert c.radius == pytest.approx(5.0)


def test_from_three_points() -> None:
    c = Circle.from_three_points(Point(4.0, 1.0), Point(2.0, 3.0), Point(0.0, 1.0))
    assert c.center.equals(Point(2.0, 1.0))
    assert c.radius == pytest.approx(2.0)


def test_from_three_points_rejects_collinear() -> None:
    with pytest.raises(PreconditionError):
        Circle.from_three_points(Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0))


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(0.5, 0.0), PointContainment.INSIDE),
        (Point(1.0, 0.0), PointContainment.COINCIDENT),
        (Point(0.0, -1.0), PointContainment.COINCIDENT),
        (Point(2.0, 0.0), PointContainment.OUTSIDE),
    ],
)
def test_contains(point: Point, expected: PointContainment) -> None:
    assert Circle(Point(0.0, 0.0), 1.0).contains(point) is expected


def test_contains_boundary_band_is_closed_like_polyline_and_point() -> None:
    circle = Circle(Point(0.0, 0.0), 1.0)
    assert circle.contains(Point(1.5, 0.0), eps=0.5) is PointContainment.COINCIDENT
    assert circle.contains(Point(0.5, 0.0), eps=0.5) is PointContainment.COINCIDENT
    assert Point(1.5, 0.0).equals(Point(1.0, 0.0), eps=0.5)
    square = Polyline.from_coords([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
    assert square.contains(Point(0.5, -0.5), eps=0.5) is PointContainment.COINCIDENT


def test_closest_parameter_is_in_zero_to_two_pi() -> None:
    c = Circle(Point(0.0, 0.0), 1.0)
    assert c.closest_parameter(Point(5.0, 0.0)) == 0.0
    assert c.closest_parameter(Point(0.0, 5.0)) == pytest.approx(math.pi / 2.0)
    assert c.closest_parameter(Point(0.0, -5.0)) == pytest.approx(3.0 * math.pi / 2.0)


def test_closest_point() -> None:
    c = Circle(Point(0.0, 0.0), 2.0)
    assert c.closest_point(Point(10.0, 0.0)).equals(Point(2.0, 0.0))
    assert c.closest_point(Point(0.0, -0.5)).equals(Point(0.0, -2.0))
    assert c.closest_point(Point(0.0, 0.0)).equals(Point(2.0, 0.0))


def test_point_at_and_tangent() -> None:
    c = Circle(Point(1.0, 1.0), 2.0)
    assert c.point_at(math.pi / 2.0).equals(Point(1.0, 3.0))
    assert c.point_at_length(math.pi).equals(Point(1.0, 3.0))
    assert c.tangent_at(0.0).equals(Vector(0.0, 2.0))


def test_equals() -> None:
    c = Circle(Point(0.0, 0.0), 1.0)
    assert c.equals(Circle(Point(0.0, 1.0e-9), 1.0))
    assert not c.equals(Circle(Point(0.0, 0.0), 1.5))


def test_transform_requires_uniform_scale() -> None:
    c = Circle(Point(1.0, 0.0), 1.0)
    moved = c.transform(Transform.translate(Vector(2.0, 3.0)) @ Transform.scale(2.0))
    assert moved.center.equals(Point(4.0, 3.0))
    assert moved.radius == pytest.approx(2.0)
    with pytest.raises(PreconditionError):
        c.transform(Transform.scale(2.0, 3.0))
