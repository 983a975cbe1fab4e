# geometry/errors.py
"""
Errors raised by geometric constructions and queries.

These derive from ArithmeticError rather than ValueError: pydantic wraps a
ValueError raised inside a validator in a ValidationError, while any other
exception reaches the caller unchanged.
"""


class GeometryError(ArithmeticError):
    """Base class for all geometry failures."""


class OutOfDomainError(GeometryError):
    """A point lies outside the closed unit disk."""


class DegenerateInputError(GeometryError):
    """The inputs do not determine the requested object."""


class UnexpectedIntersectionCountError(GeometryError):
    """An intersection produced a different number of points than required."""

    def __init__(self, message: str, count: int):
        super().__init__(message)
        self.count = count
