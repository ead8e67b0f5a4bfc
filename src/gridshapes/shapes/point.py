"""
Point shape: a single integer coordinate.
"""

from typing import TYPE_CHECKING

from ..core.vector import Vector
from .base import Shape

if TYPE_CHECKING:
    from .segment import Segment


class Point(Shape):
    """
    A point on the integer grid.

    Parameters
    ----------
    x, y : int
        Coordinates of the point.

    Attributes
    ----------
    coordinate : Vector
        Position of the point relative to the origin.
    """

    def __init__(self, x: int = 0, y: int = 0):
        self.coordinate = Vector(x, y)

    @classmethod
    def from_vector(cls, vector: Vector) -> 'Point':
        """Point located at ``vector`` from the origin."""
        return cls(vector.x, vector.y)

    @property
    def x(self) -> int:
        return self.coordinate.x

    @property
    def y(self) -> int:
        return self.coordinate.y

    def move(self, vector: Vector) -> 'Point':
        self.coordinate = self.coordinate + vector
        return self

    def contains_point(self, point: 'Point') -> bool:
        return self.coordinate == point.coordinate

    def crosses_segment(self, segment: 'Segment') -> bool:
        # A point crosses a segment iff it lies on it
        return segment.contains_point(self)

    def clone(self) -> 'Point':
        return Point(self.x, self.y)

    def to_string(self) -> str:
        return f"Point({self.x}, {self.y})"

    def __sub__(self, other: 'Point') -> Vector:
        if not isinstance(other, Point):
            return NotImplemented
        return self.coordinate - other.coordinate

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.coordinate == other.coordinate

    # Points are mutable through move()
    __hash__ = None

    def __iter__(self):
        return iter(self.coordinate)
