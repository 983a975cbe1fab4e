# hyperbolic/point.py
from pydantic import Field, field_validator
import math
from hyperdisk.geometry.constants import EPSILON
from hyperdisk.geometry.errors import DegenerateInputError, OutOfDomainError
from hyperdisk.geometry.vector import Vector2D
from hyperdisk.utils.base_model import ImmutableModel


def _validate_in_disk(v: Vector2D) -> None:
    if v.length_sq > 1 + EPSILON:
        raise OutOfDomainError(f"Point {v} lies outside the unit disk")


def _validate_radius(r: float) -> None:
    if abs(r) > 1 + EPSILON:
        raise OutOfDomainError(f"Radius {r} lies outside the unit disk")


class HyperPoint(ImmutableModel):
    """
    A point of the hyperbolic plane, stored in both the Klein and the Poincaré
    disk models.

    The two coordinates always describe the same point. Use from_klein or
    from_poincare to derive one from the other; the plain constructor trusts
    the caller to pass a consistent pair and only checks that both lie in the
    closed unit disk.

    Equality compares Poincaré coordinates: two points are equal when their
    Euclidean distance is below EPSILON squared. HyperPoint is not hashable.
    """
    klein: Vector2D = Field(description="Coordinates in the Klein disk model")
    poincare: Vector2D = Field(description="Coordinates in the Poincaré disk model")

    @field_validator("klein", "poincare")
    @classmethod
    def validate_coordinates(cls, value: Vector2D) -> Vector2D:
        """Validate that the coordinates lie in the closed unit disk."""
        _validate_in_disk(value)
        return value

    @classmethod
    def from_klein(cls, klein: Vector2D) -> "HyperPoint":
        """Create a point from its Klein coordinates."""
        return cls(klein=klein, poincare=cls.klein_to_poincare(klein))

    @classmethod
    def from_poincare(cls, poincare: Vector2D) -> "HyperPoint":
        """Create a point from its Poincaré coordinates."""
        return cls(klein=cls.poincare_to_klein(poincare), poincare=poincare)

    @staticmethod
    def klein_to_poincare(klein: Vector2D) -> Vector2D:
        """Map Klein coordinates to Poincaré coordinates."""
        _validate_in_disk(klein)
        # The radicand can dip below zero for boundary points
        return klein.scale(1 / (1 + math.sqrt(max(1 - klein.length_sq, 0))))

    @staticmethod
    def poincare_to_klein(poincare: Vector2D) -> Vector2D:
        """Map Poincaré coordinates to Klein coordinates."""
        _validate_in_disk(poincare)
        return poincare.scale(2 / (1 + poincare.length_sq))

    @property
    def is_ideal(self) -> bool:
        """Check if the point lies on the boundary circle (a point at infinity)."""
        return abs(self.klein.length_sq - 1) <= EPSILON

    def distance_to(self, other: "HyperPoint") -> float:
        """
        Calculate the hyperbolic distance to another point.

        Raises:
            DegenerateInputError: If the points are equal
        """
        from hyperdisk.hyperbolic.geodesic import HyperGeodesic
        return HyperGeodesic(start=self, end=other).length

    def translate(self, toward: "HyperPoint", distance: float) -> "HyperPoint":
        """
        Move along the geodesic towards another point.

        Args:
            toward: Point giving the direction of travel
            distance: Hyperbolic distance to travel; negative values move away

        Returns:
            The point at the given distance. Ideal points stay where they are.
        """
        if self.is_ideal:
            return self
        from hyperdisk.hyperbolic.geodesic import HyperGeodesic
        return HyperGeodesic(start=self, end=toward).point_at_distance(distance)

    @classmethod
    def interpolate(cls, a: "HyperPoint", b: "HyperPoint", fraction: float) -> "HyperPoint":
        """
        Find the point at a fraction of the hyperbolic distance from a to b.

        Fractions outside [0, 1] extrapolate along the same geodesic. If one of
        the points is ideal, that point is returned.

        Raises:
            DegenerateInputError: If both points are ideal
        """
        if a == b:
            return a
        if a.is_ideal and b.is_ideal:
            raise DegenerateInputError("Cannot interpolate between two ideal points")
        if a.is_ideal:
            return a
        if b.is_ideal:
            return b
        from hyperdisk.hyperbolic.geodesic import HyperGeodesic
        return HyperGeodesic(start=a, end=b).point_at(fraction)

    # Radial distances from the origin

    @staticmethod
    def true_to_poincare(distance: float) -> float:
        """Euclidean radius in the Poincaré disk of a point at a hyperbolic distance from the origin."""
        return math.tanh(distance / 2)

    @staticmethod
    def poincare_to_true(radius: float) -> float:
        """Hyperbolic distance from the origin of a point at a Poincaré radius."""
        _validate_radius(radius)
        if abs(radius) >= 1:
            return math.copysign(math.inf, radius)
        return 2 * math.atanh(radius)

    @staticmethod
    def true_to_klein(distance: float) -> float:
        """Euclidean radius in the Klein disk of a point at a hyperbolic distance from the origin."""
        p = HyperPoint.true_to_poincare(distance)
        return 2 * p / (1 + p * p)

    @staticmethod
    def klein_to_true(radius: float) -> float:
        """Hyperbolic distance from the origin of a point at a Klein radius."""
        _validate_radius(radius)
        p = radius / (1 + math.sqrt(max(1 - radius * radius, 0)))
        return HyperPoint.poincare_to_true(p)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HyperPoint):
            return NotImplemented
        # Linear distance against a squared tolerance
        return self.poincare.distance_to(other.poincare) < EPSILON * EPSILON

    __hash__ = None

    def __str__(self) -> str:
        return f"HyperPoint(klein={self.klein}, poincare={self.poincare})"
