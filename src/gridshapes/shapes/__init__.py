"""
Shape variants implementing the common capability contract.
"""

from .base import Shape
from .point import Point
from .segment import Segment
from .line import Line, implicit_coefficients
from .ray import Ray
from .polygon import Polygon, cast_directions
from .circle import Circle

__all__ = [
    'Shape',
    'Point',
    'Segment',
    'Line',
    'implicit_coefficients',
    'Ray',
    'Polygon',
    'cast_directions',
    'Circle',
]
