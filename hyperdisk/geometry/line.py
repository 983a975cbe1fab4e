# geometry/line.py
from typing import Any, List, Optional, Union
from pydantic import Field, model_validator
import logging
import math
from hyperdisk.geometry.circle import Circle
from hyperdisk.geometry.constants import EPSILON
from hyperdisk.geometry.errors import DegenerateInputError
from hyperdisk.geometry.vector import Vector2D
from hyperdisk.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Line(ImmutableModel):
    """
    Represents an infinite line in implicit form a*x + b*y = c.

    The coefficients are stored normalized: the triple (a, b, c) has unit
    norm, and its sign is chosen so that a > 0, or a == 0 and b > 0. Two
    constructions of the same geometric line therefore carry the same
    coefficients up to round-off.
    """
    a: float = Field(description="Coefficient of x")
    b: float = Field(description="Coefficient of y")
    c: float = Field(description="Constant term")

    @model_validator(mode="before")
    @classmethod
    def normalize_coefficients(cls, data: Any) -> Any:
        """Reject a zero normal, then scale and orient the coefficient triple."""
        if not isinstance(data, dict) or not all(key in data for key in ("a", "b", "c")):
            return data

        a, b, c = (float(data[key]) for key in ("a", "b", "c"))
        if not all(math.isfinite(value) for value in (a, b, c)):
            raise ValueError(f"Line coefficients must be finite, got ({a}, {b}, {c})")
        if a == 0 and b == 0:
            raise DegenerateInputError(f"Degenerate line 0x + 0y = {c}")

        norm = math.sqrt(a * a + b * b + c * c)
        if a < 0 or (a == 0 and b < 0):
            norm = -norm

        return {**data, "a": a / norm, "b": b / norm, "c": c / norm}

    @classmethod
    def through_two_points(cls, p1: Vector2D, p2: Vector2D) -> "Line":
        """
        Create the line through two distinct points.

        Raises:
            DegenerateInputError: If the points coincide within EPSILON
        """
        if p1.is_close_to(p2):
            raise DegenerateInputError(f"Degenerate line through {p1} and itself")
        normal = (p1 - p2).normalize().perpendicular()
        return cls(a=normal.x, b=normal.y, c=normal.dot(p1))

    @classmethod
    def from_point_and_direction(cls, src: Vector2D, direction: Vector2D) -> "Line":
        """
        Create the line through a point with the given direction.

        Raises:
            DegenerateInputError: If the direction has zero length
        """
        if direction.length_sq == 0:
            raise DegenerateInputError("Degenerate line with no direction")
        normal = direction.normalize().perpendicular()
        return cls(a=normal.x, b=normal.y, c=normal.dot(src))

    @classmethod
    def bisector(cls, p1: Vector2D, p2: Vector2D) -> "Line":
        """Create the perpendicular bisector of the segment from p1 to p2."""
        if p1.is_close_to(p2):
            raise DegenerateInputError(f"No bisector between {p1} and itself")
        return cls.from_point_and_direction(p1.midpoint(p2), (p2 - p1).perpendicular())

    @property
    def normal(self) -> Vector2D:
        """Get the (non-unit) normal vector (a, b)."""
        return Vector2D(x=self.a, y=self.b)

    @property
    def direction(self) -> Vector2D:
        """Get the unit direction vector, the normal rotated 90° counterclockwise."""
        return self.normal.perpendicular().normalize()

    def _residual(self, point: Vector2D) -> float:
        return self.a * point.x + self.b * point.y - self.c

    def intersect(self, other: Union["Line", Circle]) -> Union[Optional[Vector2D], List[Vector2D]]:
        """
        Intersect with another line or with a circle.

        See intersect_line and intersect_circle for the result of each case.
        """
        if isinstance(other, Line):
            return self.intersect_line(other)
        if isinstance(other, Circle):
            return self.intersect_circle(other)
        raise TypeError(f"Cannot intersect a line with {type(other).__name__}")

    def intersect_line(self, other: "Line") -> Optional[Vector2D]:
        """
        Find the intersection point with another line.

        Parallel and identical lines have no single intersection; that is a
        regular outcome, not an error.

        Returns:
            The intersection point if it exists, None otherwise
        """
        # [a1 b1][x]   [c1]
        # [a2 b2][y] = [c2]
        det = self.a * other.b - self.b * other.a

        # Compare the sine of the angle between the normals, not the raw
        # determinant, since normalization shrinks (a, b) for lines far away
        if abs(det) <= EPSILON * self.normal.length * other.normal.length:
            logger.debug(f"No intersection between parallel lines {self} and {other}")
            return None

        return Vector2D(
            x=(other.b * self.c - self.b * other.c) / det,
            y=(self.a * other.c - other.a * self.c) / det
        )

    def intersect_circle(self, circle: Circle) -> List[Vector2D]:
        """
        Find the intersection points with a circle.

        Returns:
            An empty list if the line misses the circle, the tangency point if
            it touches it (within EPSILON), or the two crossing points ordered
            along the line's direction
        """
        center = circle.center
        radius = circle.radius

        # Work with the origin at the circle's center
        cc = self.c - (self.a * center.x + self.b * center.y)

        # Foot of the perpendicular from the center. Horizontal and vertical
        # lines are solved by substitution.
        if self.a == 0:
            foot = Vector2D(x=0.0, y=cc / self.b)
        elif self.b == 0:
            foot = Vector2D(x=cc / self.a, y=0.0)
        else:
            foot = self.normal.scale(cc / (self.a * self.a + self.b * self.b))

        distance = foot.length
        if distance > radius + EPSILON:
            return []
        if abs(distance - radius) <= EPSILON:
            logger.debug(f"{self} is tangent to circle at {foot + center}")
            return [foot + center]

        offset = self.direction.scale(math.sqrt(radius * radius - distance * distance))
        return [foot - offset + center, foot + offset + center]

    def contains_point(self, point: Vector2D, tolerance: float = None) -> bool:
        """
        Check if a point satisfies the line equation.

        Args:
            point: The point to check
            tolerance: Allowed residual |a*x + b*y - c|. If None, uses EPSILON.

        Returns:
            True if the point is on the line within the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        return abs(self._residual(point)) <= tolerance

    def distance_to_point(self, point: Vector2D) -> float:
        """Calculate the perpendicular distance from a point to the line."""
        return abs(self._residual(point)) / self.normal.length

    def project(self, point: Vector2D) -> Vector2D:
        """Find the foot of the perpendicular from a point to the line."""
        normal = self.normal
        return point - normal.scale(self._residual(point) / normal.length_sq)

    def perpendicular_at(self, point: Vector2D) -> "Line":
        """Create the line through a point perpendicular to this line."""
        return Line.from_point_and_direction(point, self.normal)

    def is_parallel(self, other: "Line", tolerance: float = None) -> bool:
        """Check if the two lines are parallel (or identical) within a tolerance on the angle's sine."""
        if tolerance is None:
            tolerance = EPSILON
        return abs(self.normal.cross(other.normal)) <= tolerance * self.normal.length * other.normal.length

    def is_close_to(self, other: "Line", tolerance: float = None) -> bool:
        """Check if the normalized coefficients of two lines agree within a tolerance."""
        if tolerance is None:
            tolerance = EPSILON
        return (abs(self.a - other.a) <= tolerance
                and abs(self.b - other.b) <= tolerance
                and abs(self.c - other.c) <= tolerance)

    def __str__(self) -> str:
        return f"Line({self.a}x + {self.b}y = {self.c})"
