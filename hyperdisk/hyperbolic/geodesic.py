# hyperbolic/geodesic.py
from typing import Any, Optional
from pydantic import Field, model_validator
import logging
import math
from hyperdisk.geometry.circle import UNIT_CIRCLE
from hyperdisk.geometry.constants import EPSILON
from hyperdisk.geometry.errors import DegenerateInputError, UnexpectedIntersectionCountError
from hyperdisk.geometry.line import Line
from hyperdisk.hyperbolic.point import HyperPoint
from hyperdisk.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)

# Cap on the argument to math.exp, below its overflow threshold (~709.8)
_MAX_EXPONENT = 700.0


class HyperGeodesic(ImmutableModel):
    """
    The geodesic segment between two distinct hyperbolic points.

    Besides its endpoints, a geodesic knows the two ideal points bounding the
    full geodesic on the unit circle: ideal_start is the one on the side of
    start, ideal_end the one on the side of end. Both are derived on
    construction and any value passed for them is replaced.
    """
    start: HyperPoint = Field(description="Starting point of the geodesic")
    end: HyperPoint = Field(description="Ending point of the geodesic")
    ideal_start: HyperPoint = Field(description="Ideal point beyond start")
    ideal_end: HyperPoint = Field(description="Ideal point beyond end")

    @model_validator(mode="before")
    @classmethod
    def compute_ideal_points(cls, data: Any) -> Any:
        """Find where the geodesic meets the boundary circle."""
        if not isinstance(data, dict) or "start" not in data or "end" not in data:
            return data

        start = HyperPoint.model_validate(data["start"])
        end = HyperPoint.model_validate(data["end"])
        if start == end:
            raise DegenerateInputError(f"Degenerate geodesic from {start} to itself")

        # Geodesics are straight chords in the Klein model, so the ideal points
        # are where that chord's line meets the unit circle
        line = Line.through_two_points(start.klein, end.klein)
        ideal_points = line.intersect_circle(UNIT_CIRCLE)
        if len(ideal_points) != 2:
            raise UnexpectedIntersectionCountError(
                f"Expected two intersections of {line} with the unit circle, got {len(ideal_points)}",
                count=len(ideal_points)
            )

        first, second = ideal_points
        if first.distance_to_sq(start.klein) < first.distance_to_sq(end.klein):
            ideal_start, ideal_end = first, second
        else:
            ideal_start, ideal_end = second, first
        logger.debug(f"Geodesic from {start.klein} to {end.klein} has ideal points {ideal_start} and {ideal_end}")

        return {
            **data,
            "start": start,
            "end": end,
            "ideal_start": HyperPoint.from_klein(ideal_start),
            "ideal_end": HyperPoint.from_klein(ideal_end),
        }

    @property
    def length(self) -> float:
        """
        Get the hyperbolic distance between start and end.

        Uses the cross-ratio of start, end and the two ideal points in the
        Klein model. The length is infinite when an endpoint is ideal.
        """
        xq = self.ideal_start.klein.distance_to(self.end.klein)
        py = self.start.klein.distance_to(self.ideal_end.klein)
        xp = self.ideal_start.klein.distance_to(self.start.klein)
        qy = self.end.klein.distance_to(self.ideal_end.klein)
        if self.start.is_ideal or self.end.is_ideal or xp == 0 or qy == 0:
            return math.inf
        return 0.5 * math.log(xq * py / (xp * qy))

    @property
    def klein_line(self) -> Line:
        """Get the Euclidean line carrying the geodesic in the Klein model."""
        return Line.through_two_points(self.start.klein, self.end.klein)

    def reversed(self) -> "HyperGeodesic":
        """Get the same geodesic traversed from end to start."""
        return HyperGeodesic(start=self.end, end=self.start)

    def point_at_distance(self, distance: float) -> HyperPoint:
        """
        Find the point at a hyperbolic distance from start, measured towards end.

        Negative distances go the other way, towards ideal_start. Distances
        too large to resolve in floating point end on the ideal point.
        """
        if self.start.is_ideal:
            return self.start
        # Position t along the chord from ideal_start to ideal_end solves
        # t / (1 - t) = exp(2 * distance) * |ideal_start start| / |start ideal_end|
        xp = self.ideal_start.klein.distance_to(self.start.klein)
        py = self.start.klein.distance_to(self.ideal_end.klein)
        log_ratio = 2 * distance + math.log(xp) - math.log(py)
        t = 1 / (1 + math.exp(min(-log_ratio, _MAX_EXPONENT)))
        chord = self.ideal_end.klein - self.ideal_start.klein
        return HyperPoint.from_klein(self.ideal_start.klein + chord.scale(t))

    def point_at(self, fraction: float) -> HyperPoint:
        """Find the point at a fraction of the length from start (0) to end (1)."""
        if fraction == 0:
            return self.start
        if fraction == 1:
            return self.end
        return self.point_at_distance(self.length * fraction)

    def _chord_parameter(self, point: HyperPoint) -> float:
        # 0 at start, 1 at end
        direction = self.end.klein - self.start.klein
        return (point.klein - self.start.klein).dot(direction) / direction.length_sq

    def contains_point(self, point: HyperPoint, tolerance: float = None) -> bool:
        """
        Check if a point lies on the geodesic segment between start and end.

        Args:
            point: The point to check
            tolerance: Tolerance for the line test and the segment bounds

        Returns:
            True if the point is on the segment within the tolerance
        """
        if tolerance is None:
            tolerance = EPSILON
        if not self.klein_line.contains_point(point.klein, tolerance):
            return False
        t = self._chord_parameter(point)
        return -tolerance <= t <= 1.0 + tolerance

    def intersect(self, other: "HyperGeodesic") -> Optional[HyperPoint]:
        """
        Find the point where two geodesic segments cross.

        Returns:
            The crossing point if both segments contain it, None otherwise
        """
        crossing = self.klein_line.intersect_line(other.klein_line)
        if crossing is None or crossing.length_sq > 1 + EPSILON:
            return None
        point = HyperPoint.from_klein(crossing)
        if self.contains_point(point) and other.contains_point(point):
            return point
        return None

    def __str__(self) -> str:
        return f"HyperGeodesic({self.start.klein} -> {self.end.klein})"
