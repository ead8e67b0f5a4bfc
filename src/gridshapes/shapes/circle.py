"""
Circle Shape

Containment is an exact squared-distance test. Segment crossing intersects
the segment's supporting line with the circle boundary: the line is derived
exactly in integers, the intersection points are irrational in general and
are computed in floating point, then accepted or rejected by
``Segment.contains_coordinates`` (the only tolerance boundary).
"""

import logging
import math
import numbers

from ..core.exceptions import GeometryError
from ..core.vector import Vector
from .base import Shape
from .line import implicit_coefficients
from .point import Point
from .segment import Segment

logger = logging.getLogger(__name__)


class Circle(Shape):
    """
    Circle with an integer center and radius.

    Parameters
    ----------
    center : Point
        Center of the circle (copied).
    radius : int
        Non-negative radius.

    Raises
    ------
    TypeError
        If ``radius`` is not an integer.
    GeometryError
        If ``radius`` is negative.
    """

    def __init__(self, center: Point, radius: int):
        if not isinstance(radius, numbers.Integral):
            raise TypeError(f"Circle radius must be an integer, got {type(radius).__name__}")
        if radius < 0:
            raise GeometryError(f"Circle radius must be non-negative, got {radius}")
        self._center = center.clone()
        self._radius = int(radius)

    @property
    def center(self) -> Point:
        return self._center.clone()

    @property
    def radius(self) -> int:
        return self._radius

    def move(self, vector: Vector) -> 'Circle':
        self._center.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        offset = self._center - point
        return offset.dot(offset) <= self._radius * self._radius

    def crosses_segment(self, segment: Segment) -> bool:
        """
        Whether the circle's boundary meets ``segment``.

        A segment lying strictly inside the disc does not cross the circle.
        """
        shift = -self._center.coordinate
        l = segment.l.move(shift)
        r = segment.r.move(shift)
        r_sq = self._radius * self._radius

        a, b, c = implicit_coefficients(l, r)
        norm_sq = a * a + b * b
        if norm_sq == 0:
            # Zero-length segment: a single point, on the boundary or not
            return l.x * l.x + l.y * l.y == r_sq

        discriminant = c * c - r_sq * norm_sq
        if discriminant > 0:
            return False

        # Foot of the perpendicular from the center, back in world coordinates
        x0 = -a * c / norm_sq + self._center.x
        y0 = -b * c / norm_sq + self._center.y
        if discriminant == 0:
            logger.debug("%r is tangent to the line of %r at (%s, %s)",
                         self, segment, x0, y0)
            return segment.contains_coordinates(x0, y0)

        offset = math.sqrt((r_sq - c * c / norm_sq) / norm_sq)
        return (
            segment.contains_coordinates(x0 + offset * b, y0 - offset * a)
            or segment.contains_coordinates(x0 - offset * b, y0 + offset * a)
        )

    def clone(self) -> 'Circle':
        return Circle(self._center, self._radius)

    def to_string(self) -> str:
        return f"Circle({self._center.to_string()}, {self._radius})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return self._center == other._center and self._radius == other._radius

    __hash__ = None
