"""
Ray shape: the half-line {origin + t * direction : t >= 0}.
"""

from ..core.exceptions import DegenerateShapeError
from ..core.numeric import sign
from ..core.vector import Vector
from .base import Shape
from .point import Point
from .segment import Segment


class Ray(Shape):
    """
    Half-line starting at ``origin`` and passing through ``through``.

    The direction is kept as the integer Vector ``through - origin`` and is
    never normalized.

    Parameters
    ----------
    origin : Point
        Start of the ray.
    through : Point
        Any other point on the ray.

    Raises
    ------
    DegenerateShapeError
        If ``through`` equals ``origin`` (no direction).
    """

    def __init__(self, origin: Point, through: Point):
        direction = through - origin
        if direction == Vector(0, 0):
            raise DegenerateShapeError(
                f"Ray needs a non-zero direction, got {origin.to_string()} twice"
            )
        self._origin = origin.clone()
        self._direction = direction

    @classmethod
    def from_direction(cls, origin: Point, direction: Vector) -> 'Ray':
        """Ray starting at ``origin`` heading along ``direction``."""
        return cls(origin, origin.clone().move(direction))

    @property
    def origin(self) -> Point:
        return self._origin.clone()

    @property
    def direction(self) -> Vector:
        return self._direction

    def move(self, vector: Vector) -> 'Ray':
        self._origin.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        v = self._direction
        dx = point.x - self._origin.x
        dy = point.y - self._origin.y
        # Collinear, and not behind the origin along either axis
        return (
            v.x * dy == v.y * dx
            and sign(v.x) * sign(dx) >= 0
            and sign(v.y) * sign(dy) >= 0
        )

    def crosses_segment(self, segment: Segment) -> bool:
        sl, sr = segment.l, segment.r
        if self.contains_point(sl) or self.contains_point(sr):
            return True

        v = self._direction
        to_l = sl - self._origin
        to_r = sr - self._origin
        if sign(v.cross(to_l)) * sign(v.cross(to_r)) != -1:
            return False

        # Supporting lines cross at origin + t * v; reject t < 0.
        # t = cross(to_l, edge) / cross(v, edge), denominator non-zero here.
        edge = sr - sl
        return sign(to_l.cross(edge)) * sign(v.cross(edge)) >= 0

    def clone(self) -> 'Ray':
        return Ray.from_direction(self._origin, self._direction)

    def to_string(self) -> str:
        return f"Ray({self._origin.to_string()}, {self._direction!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return self._origin == other._origin and self._direction == other._direction

    __hash__ = None
