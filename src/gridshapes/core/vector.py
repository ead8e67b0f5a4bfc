"""
Integer 2-D vector.

Displacements and directions for every shape. Python integers never
overflow, so dot and cross products are exact for any coordinate range.
"""

import numbers
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """
    Immutable integer pair (x, y).

    Attributes
    ----------
    x : int
        Horizontal component.
    y : int
        Vertical component.
    """
    x: int = 0
    y: int = 0

    def __post_init__(self):
        for name in ('x', 'y'):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral):
                raise TypeError(
                    f"Vector.{name} must be an integer, got {type(value).__name__}"
                )
            # Store plain ints (numpy integers would otherwise leak through)
            object.__setattr__(self, name, int(value))

    def __add__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y)

    def __mul__(self, value: int) -> 'Vector':
        if not isinstance(value, numbers.Integral):
            return NotImplemented
        return Vector(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: 'Vector') -> int:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Vector') -> int:
        """
        Z component of the cross product.

        Positive when ``other`` is counter-clockwise from ``self``, negative
        when clockwise, zero when the two are parallel.
        """
        return self.x * other.y - self.y * other.x

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y})"
