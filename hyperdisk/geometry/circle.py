# geometry/circle.py
from typing import TYPE_CHECKING, List
from pydantic import Field, field_validator
import math
from hyperdisk.geometry.constants import EPSILON
from hyperdisk.geometry.errors import DegenerateInputError
from hyperdisk.geometry.vector import ORIGIN, Vector2D
from hyperdisk.utils.base_model import ImmutableModel

if TYPE_CHECKING:
    from hyperdisk.geometry.line import Line


class Circle(ImmutableModel):
    """Represents a circle with a center and a positive radius."""
    center: Vector2D = Field(description="Center of the circle")
    radius: float = Field(description="Radius of the circle")

    @field_validator("radius")
    @classmethod
    def validate_radius(cls, value: float) -> float:
        """Validate that the radius is positive and finite."""
        if not math.isfinite(value):
            raise ValueError(f"Radius must be a finite number, got {value}")
        if value <= 0:
            raise DegenerateInputError(f"Circle radius must be positive, got {value}")
        return value

    @classmethod
    def from_three_points(cls, p1: Vector2D, p2: Vector2D, p3: Vector2D) -> "Circle":
        """
        Create the circle passing through three points.

        Raises:
            DegenerateInputError: If the points are collinear
        """
        d = 2 * (p1.x * (p2.y - p3.y) + p2.x * (p3.y - p1.y) + p3.x * (p1.y - p2.y))
        if abs(d) <= EPSILON:
            raise DegenerateInputError(f"Points {p1}, {p2}, {p3} are collinear")

        s1, s2, s3 = p1.length_sq, p2.length_sq, p3.length_sq
        center = Vector2D(
            x=(s1 * (p2.y - p3.y) + s2 * (p3.y - p1.y) + s3 * (p1.y - p2.y)) / d,
            y=(s1 * (p3.x - p2.x) + s2 * (p1.x - p3.x) + s3 * (p2.x - p1.x)) / d
        )
        return cls(center=center, radius=center.distance_to(p1))

    def contains_point(self, point: Vector2D, tolerance: float = None) -> bool:
        """Check if a point lies in the closed disk bounded by the circle."""
        if tolerance is None:
            tolerance = EPSILON
        return self.center.distance_to(point) <= self.radius + tolerance

    def intersect_line(self, line: "Line") -> List[Vector2D]:
        """Find the intersection points with a line (see Line.intersect_circle)."""
        return line.intersect_circle(self)

    def intersect_circle(self, other: "Circle") -> List[Vector2D]:
        """
        Find the intersection points with another circle.

        Concentric circles are reported as not intersecting, even when equal.
        """
        v = other.center - self.center
        d = v.length
        if d <= EPSILON:
            return []

        outer = self.radius + other.radius
        inner = abs(self.radius - other.radius)
        if d > outer + EPSILON or d < inner - EPSILON:
            return []

        # Signed distance from this center to the radical line, along v
        x = (d * d - other.radius * other.radius + self.radius * self.radius) / (2 * d)
        base = self.center + v.scale(x / d)
        if abs(d - outer) <= EPSILON or abs(d - inner) <= EPSILON:
            return [base]

        h = math.sqrt(max(self.radius * self.radius - x * x, 0.0))
        offset = v.perpendicular().scale(h / d)
        return [base + offset, base - offset]

    def __str__(self) -> str:
        return f"Circle({self.center}, r={self.radius})"


UNIT_CIRCLE = Circle(center=ORIGIN, radius=1.0)
