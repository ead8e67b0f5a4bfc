"""
Interop with the numpy/shapely stack.

Contains utility functions for:
- Batch point containment over numpy arrays
- Polygon area and vertex ordering (CCW)
- Shape -> numpy and shape -> shapely conversions
"""

import numpy as np
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon as ShapelyPolygon

from .shapes import Circle, Point, Polygon, Segment, Shape


# Segments per quarter circle when approximating a Circle in shapely
CIRCLE_QUAD_SEGS = 64


def contains(shape: Shape, points: np.ndarray) -> np.ndarray:
    """
    Test many integer points against one shape.

    Parameters
    ----------
    shape : Shape
        Any shape.
    points : np.ndarray
        Integer points of shape (N, 2) or (2,).

    Returns
    -------
    np.ndarray
        Boolean array of shape (N,) indicating containment.
    """
    points = np.atleast_2d(np.asarray(points))
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected points of shape (N, 2), got {points.shape}")
    if not np.issubdtype(points.dtype, np.integer):
        raise TypeError(f"Expected integer coordinates, got dtype {points.dtype}")

    inside = np.zeros(len(points), dtype=bool)
    for i, (x, y) in enumerate(points):
        inside[i] = shape.contains_point(Point(x, y))
    return inside


def signed_area2(polygon: Polygon) -> int:
    """
    Twice the signed area of a polygon (exact).

    Positive for counter-clockwise vertex order, negative for clockwise.
    """
    vertices = polygon.vertices
    n = len(vertices)
    return sum(
        vertices[i].coordinate.cross(vertices[(i + 1) % n].coordinate)
        for i in range(n)
    )


def polygon_area(polygon: Polygon) -> float:
    """
    Compute the area of a polygon using the shoelace formula.

    Parameters
    ----------
    polygon : Polygon
        Polygon to measure.

    Returns
    -------
    float
        Area of the polygon.
    """
    return abs(signed_area2(polygon)) / 2


def ensure_ccw(polygon: Polygon) -> Polygon:
    """
    Return a copy of the polygon with counter-clockwise vertex order.

    Parameters
    ----------
    polygon : Polygon
        Polygon in either orientation.

    Returns
    -------
    Polygon
        New polygon; vertices reversed if the input was clockwise.
    """
    if signed_area2(polygon) < 0:
        return Polygon(reversed(polygon.vertices))
    return polygon.clone()


def to_numpy(shape: Shape) -> np.ndarray:
    """
    Defining points of a shape as an integer array.

    Parameters
    ----------
    shape : Point, Segment or Polygon
        Shape with a finite list of defining points.

    Returns
    -------
    np.ndarray
        Array of shape (1, 2), (2, 2) or (M, 2) respectively.
    """
    if isinstance(shape, Point):
        points = [shape]
    elif isinstance(shape, Segment):
        points = [shape.l, shape.r]
    elif isinstance(shape, Polygon):
        points = shape.vertices
    else:
        raise TypeError(f"Cannot convert {type(shape).__name__} to a vertex array")
    return np.array([[p.x, p.y] for p in points], dtype=np.int64)


def to_shapely(shape: Shape):
    """
    Convert a bounded shape to a shapely geometry.

    Circles become a buffered point, an approximation with
    ``CIRCLE_QUAD_SEGS`` segments per quarter turn. Lines and rays are
    unbounded and cannot be converted.

    Parameters
    ----------
    shape : Point, Segment, Polygon or Circle
        Shape to convert.

    Returns
    -------
    shapely geometry
        Point, LineString or Polygon.
    """
    if isinstance(shape, Point):
        return ShapelyPoint(shape.x, shape.y)
    if isinstance(shape, Segment):
        return LineString(to_numpy(shape))
    if isinstance(shape, Polygon):
        return ShapelyPolygon(to_numpy(shape))
    if isinstance(shape, Circle):
        center = shape.center
        return ShapelyPoint(center.x, center.y).buffer(
            shape.radius, quad_segs=CIRCLE_QUAD_SEGS
        )
    raise TypeError(f"{type(shape).__name__} is unbounded and has no shapely equivalent")
