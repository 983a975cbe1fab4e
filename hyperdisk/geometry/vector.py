# geometry/vector.py
from pydantic import Field, field_validator
import math
from hyperdisk.geometry.constants import EPSILON
from hyperdisk.geometry.errors import DegenerateInputError
from hyperdisk.utils.base_model import ImmutableModel


class Vector2D(ImmutableModel):
    """
    Represents a 2D Euclidean vector.

    Depending on the call site a vector stands for a point or for a
    displacement/direction. All operations return new vectors.
    """
    x: float = Field(description="X component")
    y: float = Field(description="Y component")

    @field_validator("x", "y")
    @classmethod
    def validate_components(cls, value: float) -> float:
        """Validate that components are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Component must be a finite number, got {value}")
        return value

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x - other.x, y=self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(x=-self.x, y=-self.y)

    def __mul__(self, factor: float) -> "Vector2D":
        return self.scale(factor)

    __rmul__ = __mul__

    def scale(self, factor: float) -> "Vector2D":
        """Scale both components by a factor."""
        return Vector2D(x=self.x * factor, y=self.y * factor)

    def dot(self, other: "Vector2D") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2D") -> float:
        """Z component of the cross product of the two vectors embedded in 3D."""
        return self.x * other.y - self.y * other.x

    @property
    def length_sq(self) -> float:
        """Squared Euclidean norm."""
        return self.x * self.x + self.y * self.y

    @property
    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.length_sq)

    def distance_to(self, other: "Vector2D") -> float:
        """Calculate the Euclidean distance to another vector."""
        return math.sqrt(self.distance_to_sq(other))

    def distance_to_sq(self, other: "Vector2D") -> float:
        """Calculate the squared Euclidean distance to another vector."""
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def normalize(self, target_length: float = 1.0) -> "Vector2D":
        """
        Return a vector pointing in the same direction with the given length.

        Args:
            target_length: Length of the result, 1.0 for a unit vector

        Raises:
            DegenerateInputError: If this vector has zero length
        """
        length = self.length
        if length == 0:
            raise DegenerateInputError("Cannot normalize a zero-length vector")
        return self.scale(target_length / length)

    def rotate(self, angle: float) -> "Vector2D":
        """Rotate counter-clockwise by an angle in radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2D(
            x=self.x * cos_a - self.y * sin_a,
            y=self.x * sin_a + self.y * cos_a
        )

    def perpendicular(self) -> "Vector2D":
        """Rotate by exactly 90° counter-clockwise, without trigonometric round-off."""
        return Vector2D(x=-self.y, y=self.x)

    def is_close_to(self, other: "Vector2D", tolerance: float = None) -> bool:
        """True when the two vectors lie within tolerance (default EPSILON) of each other."""
        if tolerance is None:
            tolerance = EPSILON
        return self.distance_to(other) <= tolerance

    def midpoint(self, other: "Vector2D") -> "Vector2D":
        """Calculate the midpoint between this vector and another vector."""
        return Vector2D(x=(self.x + other.x) / 2, y=(self.y + other.y) / 2)

    def polar_angle(self) -> float:
        """
        Calculate the polar angle of the vector.
        Returns angle in radians, in range [0, 2π).
        """
        angle = math.atan2(self.y, self.x)
        if angle < 0:
            angle += 2 * math.pi
        return angle

    def format_as_tuple(self) -> str:
        """Format the vector as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        return self.format_as_tuple()


ORIGIN = Vector2D(x=0.0, y=0.0)
