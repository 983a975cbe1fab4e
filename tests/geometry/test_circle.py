import pytest
import math
from hyperdisk.geometry.circle import UNIT_CIRCLE, Circle
from hyperdisk.geometry.errors import DegenerateInputError
from hyperdisk.geometry.line import Line
from hyperdisk.geometry.vector import ORIGIN, Vector2D


class TestCircle:
    def test_create_circle(self):
        circle = Circle(center=Vector2D(x=1.0, y=2.0), radius=3.0)
        assert circle.center == Vector2D(x=1.0, y=2.0)
        assert circle.radius == 3.0

    def test_unit_circle(self):
        assert UNIT_CIRCLE.center == ORIGIN
        assert UNIT_CIRCLE.radius == 1.0

    def test_non_positive_radius(self):
        with pytest.raises(DegenerateInputError):
            Circle(center=ORIGIN, radius=0.0)
        with pytest.raises(DegenerateInputError):
            Circle(center=ORIGIN, radius=-1.0)

    def test_non_finite_radius(self):
        with pytest.raises(ValueError):
            Circle(center=ORIGIN, radius=float('inf'))

    def test_from_three_points(self):
        circle = Circle.from_three_points(
            Vector2D(x=1.0, y=0.0),
            Vector2D(x=0.0, y=1.0),
            Vector2D(x=-1.0, y=0.0)
        )
        assert circle.center.x == pytest.approx(0.0)
        assert circle.center.y == pytest.approx(0.0)
        assert circle.radius == pytest.approx(1.0)

        circle = Circle.from_three_points(
            Vector2D(x=3.0, y=2.0),
            Vector2D(x=1.0, y=4.0),
            Vector2D(x=-1.0, y=2.0)
        )
        assert circle.center.x == pytest.approx(1.0)
        assert circle.center.y == pytest.approx(2.0)
        assert circle.radius == pytest.approx(2.0)

    def test_from_collinear_points(self):
        with pytest.raises(DegenerateInputError):
            Circle.from_three_points(
                Vector2D(x=0.0, y=0.0),
                Vector2D(x=1.0, y=1.0),
                Vector2D(x=2.0, y=2.0)
            )

    def test_contains_point(self):
        circle = Circle(center=Vector2D(x=1.0, y=1.0), radius=1.0)
        assert circle.contains_point(Vector2D(x=1.5, y=1.0))
        assert circle.contains_point(Vector2D(x=2.0, y=1.0))  # On the boundary
        assert not circle.contains_point(Vector2D(x=2.1, y=1.0))

    def test_intersect_line(self):
        line = Line(a=0.0, b=1.0, c=0.5)
        assert UNIT_CIRCLE.intersect_line(line) == line.intersect_circle(UNIT_CIRCLE)

    def test_intersect_circle(self):
        other = Circle(center=Vector2D(x=1.0, y=0.0), radius=1.0)
        points = sorted(UNIT_CIRCLE.intersect_circle(other), key=lambda p: p.y)

        assert len(points) == 2
        assert points[0].x == pytest.approx(0.5)
        assert points[0].y == pytest.approx(-math.sqrt(0.75))
        assert points[1].x == pytest.approx(0.5)
        assert points[1].y == pytest.approx(math.sqrt(0.75))

    def test_intersect_tangent_circles(self):
        # Externally tangent
        other = Circle(center=Vector2D(x=2.0, y=0.0), radius=1.0)
        points = UNIT_CIRCLE.intersect_circle(other)
        assert len(points) == 1
        assert points[0].x == pytest.approx(1.0)
        assert points[0].y == pytest.approx(0.0)

        # Internally tangent
        inner = Circle(center=Vector2D(x=0.5, y=0.0), radius=0.5)
        points = UNIT_CIRCLE.intersect_circle(inner)
        assert len(points) == 1
        assert points[0].x == pytest.approx(1.0)
        assert points[0].y == pytest.approx(0.0)

    def test_non_intersecting_circles(self):
        # Too far apart
        assert UNIT_CIRCLE.intersect_circle(Circle(center=Vector2D(x=3.0, y=0.0), radius=1.0)) == []

        # One inside the other
        big = Circle(center=ORIGIN, radius=3.0)
        assert big.intersect_circle(Circle(center=Vector2D(x=0.5, y=0.0), radius=1.0)) == []

        # Concentric
        assert UNIT_CIRCLE.intersect_circle(big) == []
        assert UNIT_CIRCLE.intersect_circle(UNIT_CIRCLE) == []

    def test_immutability(self):
        with pytest.raises(Exception):
            UNIT_CIRCLE.radius = 2.0
