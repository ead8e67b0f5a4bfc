"""
Line shape: an infinite line stored in implicit form a*x + b*y + c = 0.
"""

from ..core.exceptions import DegenerateShapeError
from ..core.numeric import sign
from ..core.vector import Vector
from .base import Shape
from .point import Point
from .segment import Segment


def implicit_coefficients(l: Point, r: Point):
    """
    Coefficients (a, b, c) of the line through ``l`` and ``r``.

    Every point (x, y) of the line satisfies ``a*x + b*y + c == 0``.
    (a, b) is zero only when ``l == r``.
    """
    a = r.y - l.y
    b = l.x - r.x
    c = l.y * (r.x - l.x) - l.x * (r.y - l.y)
    return a, b, c


class Line(Shape):
    """
    Infinite line through two distinct points.

    Parameters
    ----------
    l, r : Point
        Two distinct points on the line.

    Raises
    ------
    DegenerateShapeError
        If ``l`` and ``r`` coincide.
    """

    def __init__(self, l: Point, r: Point):
        if l == r:
            raise DegenerateShapeError(
                f"Line needs two distinct points, got {l.to_string()} twice"
            )
        self._l = l.clone()
        self._r = r.clone()
        self._a, self._b, self._c = implicit_coefficients(l, r)

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    @property
    def c(self) -> int:
        return self._c

    def move(self, vector: Vector) -> 'Line':
        self._l.move(vector)
        self._r.move(vector)
        # a and b are translation invariant
        self._c += -self._a * vector.x - self._b * vector.y
        return self

    def contains_point(self, point: Point) -> bool:
        return self._a * point.x + self._b * point.y + self._c == 0

    def crosses_segment(self, segment: Segment) -> bool:
        sl, sr = segment.l, segment.r
        if self.contains_point(sl) or self.contains_point(sr):
            return True
        direction = self._l - self._r
        return (
            sign(direction.cross(self._l - sl)) * sign(direction.cross(self._l - sr)) == -1
        )

    def clone(self) -> 'Line':
        return Line(self._l, self._r)

    def to_string(self) -> str:
        return f"Line({self._a}, {self._b}, {self._c})"
