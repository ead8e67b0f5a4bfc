"""
Unit tests for the Point shape.
"""

import pytest

from gridshapes import Point, Segment, Vector


class TestPointPredicates:
    """Tests for contains_point() and crosses_segment()."""

    def test_contains_itself_only(self):
        p = Point(2, 3)
        assert p.contains_point(Point(2, 3))
        assert not p.contains_point(Point(3, 2))

    def test_crosses_segment_when_on_it(self):
        """A point crosses a segment iff it lies on it."""
        seg = Segment(Point(0, 0), Point(4, 4))
        assert Point(2, 2).crosses_segment(seg)
        assert Point(4, 4).crosses_segment(seg)
        assert not Point(2, 3).crosses_segment(seg)
        assert not Point(5, 5).crosses_segment(seg)


class TestPointValue:
    """Tests for move(), clone(), text form and arithmetic."""

    def test_move_returns_self(self):
        p = Point(1, 1)
        assert p.move(Vector(2, 3)) is p
        assert p == Point(3, 4)

    def test_chained_moves(self):
        p = Point(0, 0).move(Vector(1, 0)).move(Vector(0, 1))
        assert p == Point(1, 1)

    def test_clone_independent(self):
        p = Point(5, 5)
        q = p.clone()
        q.move(Vector(1, 1))
        assert p == Point(5, 5)
        assert q == Point(6, 6)

    def test_to_string(self):
        assert Point(-1, 7).to_string() == "Point(-1, 7)"
        assert repr(Point(0, 0)) == "Point(0, 0)"

    def test_difference_is_vector(self):
        assert Point(5, 1) - Point(2, 3) == Vector(3, -2)

    def test_accessors(self):
        p = Point(4, -2)
        assert (p.x, p.y) == (4, -2)
        assert p.coordinate == Vector(4, -2)
        assert Point.from_vector(Vector(4, -2)) == p

    def test_unhashable(self):
        """Points are mutable and therefore not hashable."""
        with pytest.raises(TypeError):
            hash(Point(1, 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
