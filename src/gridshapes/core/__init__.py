"""
Core primitives: tolerance, sign predicate, vectors and exceptions.
"""

from .numeric import EPS, sign
from .vector import Vector
from .exceptions import (
    GeometryError,
    DegenerateShapeError,
    InsufficientPointsError,
)

__all__ = [
    'EPS',
    'sign',
    'Vector',
    'GeometryError',
    'DegenerateShapeError',
    'InsufficientPointsError',
]
