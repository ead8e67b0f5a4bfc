"""Exceptions raised when a shape cannot be built from its inputs."""


class GeometryError(ValueError):
    """Base exception for invalid shape construction."""

    pass


class DegenerateShapeError(GeometryError):
    """Defining points coincide, so the shape has no direction."""

    pass


class InsufficientPointsError(GeometryError):
    """Not enough vertices for the requested shape."""

    pass
