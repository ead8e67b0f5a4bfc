"""
Segment shape: the closed chord between two points.

Point-on-segment is collinearity plus bounding-box membership. Segment
intersection accepts both touching configurations (an endpoint of one
segment lying on the other) and proper crossings (each segment's endpoints
strictly on opposite sides of the other's supporting line).
"""

from ..core.numeric import EPS, sign
from ..core.vector import Vector
from .base import Shape
from .point import Point


class Segment(Shape):
    """
    Finite segment between two endpoints.

    The endpoints are unordered. A zero-length segment (``l == r``) is
    accepted and behaves like a single point for containment.

    Parameters
    ----------
    l, r : Point
        Endpoints. They are copied, so moving the segment never moves the
        caller's points.
    """

    def __init__(self, l: Point, r: Point):
        self._l = l.clone()
        self._r = r.clone()

    @property
    def l(self) -> Point:
        return self._l.clone()

    @property
    def r(self) -> Point:
        return self._r.clone()

    def move(self, vector: Vector) -> 'Segment':
        self._l.move(vector)
        self._r.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        l, r = self._l, self._r
        return (
            sign((l - point).cross(point - r)) == 0
            and min(l.x, r.x) <= point.x <= max(l.x, r.x)
            and min(l.y, r.y) <= point.y <= max(l.y, r.y)
        )

    def contains_coordinates(self, x: float, y: float) -> bool:
        """
        Tolerant containment test for a non-integer point.

        Used for candidate intersection points computed in floating point
        (see ``Circle.crosses_segment``). Collinearity and the bounding box
        are both checked within ``EPS``.

        Parameters
        ----------
        x, y : float
            Coordinates of the candidate point.

        Returns
        -------
        bool
            True if (x, y) lies on the segment up to the tolerance.
        """
        l, r = self._l, self._r
        cross = (l.x - x) * (y - r.y) - (l.y - y) * (x - r.x)
        return (
            sign(float(cross)) == 0
            and min(l.x, r.x) - x < EPS
            and max(l.x, r.x) - x > -EPS
            and min(l.y, r.y) - y < EPS
            and max(l.y, r.y) - y > -EPS
        )

    def crosses_segment(self, segment: 'Segment') -> bool:
        l, r = self._l, self._r
        ol, or_ = segment._l, segment._r

        # Touching: an endpoint of one lies on the other
        if (segment.contains_point(l) or segment.contains_point(r)
                or self.contains_point(ol) or self.contains_point(or_)):
            return True

        # Proper crossing: strict opposite sides, both ways
        direction = l - r
        other_direction = ol - or_
        return (
            sign(direction.cross(l - or_)) * sign(direction.cross(l - ol)) == -1
            and sign(other_direction.cross(ol - r)) * sign(other_direction.cross(ol - l)) == -1
        )

    def clone(self) -> 'Segment':
        return Segment(self._l, self._r)

    def to_string(self) -> str:
        return f"Segment({self._l.to_string()}, {self._r.to_string()})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment):
            return NotImplemented
        return self._l == other._l and self._r == other._r

    __hash__ = None
