"""
Contract tests shared by all six shapes.
"""

import pytest

from gridshapes import Circle, Line, Point, Polygon, Ray, Segment, Shape, Vector


SHAPE_FACTORIES = [
    lambda: Point(1, 2),
    lambda: Segment(Point(0, 0), Point(3, -2)),
    lambda: Line(Point(1, 2), Point(3, 5)),
    lambda: Ray(Point(-1, -1), Point(2, 3)),
    lambda: Polygon([Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]),
    lambda: Circle(Point(2, -3), 4),
]


SHAPE_IDS = ['point', 'segment', 'line', 'ray', 'polygon', 'circle']


@pytest.fixture(params=SHAPE_FACTORIES, ids=SHAPE_IDS)
def shape(request):
    return request.param()


class TestShapeContract:
    """Every shape honors move/clone/to_string the same way."""

    def test_is_shape(self, shape):
        assert isinstance(shape, Shape)

    def test_move_returns_self(self, shape):
        assert shape.move(Vector(0, 0)) is shape

    def test_move_round_trip(self, shape):
        """move(v) then move(-v) restores the shape exactly."""
        before = shape.to_string()
        v = Vector(7, -13)
        shape.move(v).move(-v)
        assert shape.to_string() == before

    def test_clone_is_independent(self, shape):
        before = shape.to_string()
        copy = shape.clone()
        assert copy is not shape
        assert type(copy) is type(shape)
        assert copy.to_string() == before

        copy.move(Vector(5, 5))
        assert shape.to_string() == before
        assert copy.to_string() != before

    def test_repr_and_str(self, shape):
        assert repr(shape) == shape.to_string()
        assert str(shape) == shape.to_string()

    def test_predicates_return_bool(self, shape):
        assert isinstance(shape.contains_point(Point(0, 0)), bool)
        assert isinstance(shape.crosses_segment(Segment(Point(-9, 0), Point(9, 1))), bool)


class TestCanonicalText:
    """Exact text forms."""

    def test_forms(self):
        assert [s.to_string() for s in (make() for make in SHAPE_FACTORIES)] == [
            "Point(1, 2)",
            "Segment(Point(0, 0), Point(3, -2))",
            "Line(3, -2, 1)",
            "Ray(Point(-1, -1), Vector(3, 4))",
            "Polygon(Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4))",
            "Circle(Point(2, -3), 4)",
        ]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
