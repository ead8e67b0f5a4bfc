"""
Polygon Shape

A simple polygon given by its vertices in order; edges join consecutive
vertices and wrap around from the last vertex to the first.

Point containment:
- Boundary points are inside (checked exactly, edge by edge)
- Interior is decided by ray-casting parity
- Cast directions are taken from a fixed sequence of pairwise non-parallel
  integer directions. Each vertex can lie on at most one of them, so a ray
  avoiding every vertex is found within ``len(vertices) + 1`` attempts.
"""

import logging
from itertools import count, islice
from typing import Iterable, Iterator, Tuple

from ..core.exceptions import InsufficientPointsError
from ..core.vector import Vector
from .base import Shape
from .point import Point
from .ray import Ray
from .segment import Segment

logger = logging.getLogger(__name__)


def cast_directions() -> Iterator[Vector]:
    """
    Candidate directions for ray casting.

    Yields (1, 2), (2, 3), (3, 4), ...: primitive vectors with pairwise
    distinct slopes, none of them axis-aligned.
    """
    for k in count(1):
        yield Vector(k, k + 1)


class Polygon(Shape):
    """
    Simple polygon with integer vertices.

    Parameters
    ----------
    points : iterable of Point
        Vertices in boundary order (either orientation). Copied on
        construction. Simplicity (no self-intersection) is assumed, not
        checked.

    Raises
    ------
    InsufficientPointsError
        If fewer than 3 vertices are given.
    """

    def __init__(self, points: Iterable[Point]):
        self._points = [point.clone() for point in points]
        if len(self._points) < 3:
            raise InsufficientPointsError(
                f"Polygon must have at least 3 vertices, got {len(self._points)}"
            )

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return tuple(point.clone() for point in self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def edges(self) -> Iterator[Segment]:
        """Boundary segments, including the closing edge last -> first."""
        n = len(self._points)
        for i in range(n):
            yield Segment(self._points[i], self._points[(i + 1) % n])

    def move(self, vector: Vector) -> 'Polygon':
        for point in self._points:
            point.move(vector)
        return self

    def contains_point(self, point: Point) -> bool:
        if any(edge.contains_point(point) for edge in self.edges()):
            return True

        # point is not a vertex, so every vertex blocks at most one direction
        for direction in islice(cast_directions(), len(self._points) + 1):
            ray = Ray.from_direction(point, direction)
            if any(ray.contains_point(vertex) for vertex in self._points):
                logger.debug("Cast direction %r from %r hits a vertex, retrying",
                             direction, point)
                continue
            crossings = sum(1 for edge in self.edges() if ray.crosses_segment(edge))
            return crossings % 2 == 1

        raise RuntimeError("no vertex-free cast direction found")

    def crosses_segment(self, segment: Segment) -> bool:
        return any(segment.crosses_segment(edge) for edge in self.edges())

    def clone(self) -> 'Polygon':
        return Polygon(self._points)

    def to_string(self) -> str:
        inner = ", ".join(point.to_string() for point in self._points)
        return f"Polygon({inner})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._points == other._points

    __hash__ = None
