"""
hyperdisk - distances and intersections in the Klein and Poincaré disk models
of the hyperbolic plane, with the Euclidean line and circle primitives they
are built on.
"""
__version__ = "1.0"

from hyperdisk.geometry.constants import EPSILON
from hyperdisk.geometry.errors import (
    GeometryError,
    OutOfDomainError,
    DegenerateInputError,
    UnexpectedIntersectionCountError,
)
from hyperdisk.geometry.vector import Vector2D, ORIGIN
from hyperdisk.geometry.circle import Circle, UNIT_CIRCLE
from hyperdisk.geometry.line import Line
from hyperdisk.hyperbolic.point import HyperPoint
from hyperdisk.hyperbolic.geodesic import HyperGeodesic
from hyperdisk.logging_config import configure_logging

# Make them available when someone does 'import hyperdisk'
__all__ = [
    'EPSILON',
    'GeometryError',
    'OutOfDomainError',
    'DegenerateInputError',
    'UnexpectedIntersectionCountError',
    'Vector2D',
    'ORIGIN',
    'Circle',
    'UNIT_CIRCLE',
    'Line',
    'HyperPoint',
    'HyperGeodesic',
    'configure_logging',
]
