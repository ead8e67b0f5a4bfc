"""
gridshapes - Exact 2-D geometry on the integer grid.

This package provides a family of shapes sharing one contract:
- move(vector): translate in place, returns the shape
- contains_point(point): point in or on the shape
- crosses_segment(segment): segment meets the shape's boundary
- clone(): independent copy
- to_string(): canonical text form, e.g. ``Segment(Point(0, 0), Point(2, 2))``

Predicates use exact integer arithmetic; the only floating point work is
circle/line intersection, judged with the shared tolerance ``EPS``.

Shapes
------
Point, Segment, Line, Ray, Polygon, Circle

Example
-------
>>> from gridshapes import Point, Polygon, Segment, Vector

>>> square = Polygon([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)])
>>> square.contains_point(Point(2, 2))
True
>>> square.move(Vector(10, 0)).contains_point(Point(2, 2))
False
"""

import logging

from .core import (
    EPS,
    sign,
    Vector,
    GeometryError,
    DegenerateShapeError,
    InsufficientPointsError,
)
from .shapes import Shape, Point, Segment, Line, Ray, Polygon, Circle
from .interop import contains, polygon_area, signed_area2, ensure_ccw, to_numpy, to_shapely

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    'EPS',
    'sign',
    'Vector',
    # Shapes
    'Shape',
    'Point',
    'Segment',
    'Line',
    'Ray',
    'Polygon',
    'Circle',
    # Interop
    'contains',
    'polygon_area',
    'signed_area2',
    'ensure_ccw',
    'to_numpy',
    'to_shapely',
    # Errors
    'GeometryError',
    'DegenerateShapeError',
    'InsufficientPointsError',
]

__version__ = "1.0.0"
