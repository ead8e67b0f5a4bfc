"""
Shape Capability Contract

Every shape in the package can be:
- translated in place by a Vector (``move``, returns the shape for chaining)
- asked whether it contains a Point
- asked whether it crosses a Segment
- cloned into an independent copy
- rendered to its canonical text form (``to_string``, also ``repr``/``str``)
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..core.vector import Vector

if TYPE_CHECKING:
    from .point import Point
    from .segment import Segment


class Shape(ABC):
    """Abstract base class for all 2-D shapes."""

    @abstractmethod
    def move(self, vector: Vector) -> 'Shape':
        """
        Translate the shape in place.

        Parameters
        ----------
        vector : Vector
            Displacement to apply.

        Returns
        -------
        Shape
            The same shape, so that moves can be chained.
        """

    @abstractmethod
    def contains_point(self, point: 'Point') -> bool:
        """Whether ``point`` lies in or on the shape."""

    @abstractmethod
    def crosses_segment(self, segment: 'Segment') -> bool:
        """Whether ``segment`` has at least one point in common with the shape's boundary."""

    @abstractmethod
    def clone(self) -> 'Shape':
        """Return an independent copy; moving it leaves ``self`` untouched."""

    @abstractmethod
    def to_string(self) -> str:
        """Canonical text form, e.g. ``Point(1, 2)``."""

    def __repr__(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()
