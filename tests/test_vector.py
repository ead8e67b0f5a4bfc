"""
Unit tests for the Vector primitive and the shared sign predicate.
"""

from fractions import Fraction

import numpy as np
import pytest

from gridshapes import EPS, Vector, sign


class TestVectorArithmetic:
    """Tests for Vector operators."""

    def test_add_sub(self):
        """Component-wise addition and subtraction."""
        assert Vector(1, 2) + Vector(3, 4) == Vector(4, 6)
        assert Vector(1, 2) - Vector(3, 4) == Vector(-2, -2)

    def test_negate(self):
        assert -Vector(3, -4) == Vector(-3, 4)

    def test_scalar_both_orders(self):
        """Scalar multiplication works with the integer on either side."""
        v = Vector(2, -5)
        assert v * 3 == Vector(6, -15)
        assert 3 * v == Vector(6, -15)

    def test_default_is_zero(self):
        assert Vector() == Vector(0, 0)

    def test_immutable(self):
        v = Vector(1, 1)
        with pytest.raises(AttributeError):
            v.x = 5

    def test_unpacking(self):
        x, y = Vector(7, 8)
        assert (x, y) == (7, 8)


class TestVectorProducts:
    """Tests for dot() and cross()."""

    def test_dot(self):
        assert Vector(1, 2).dot(Vector(3, 4)) == 11

    def test_cross_orientation(self):
        """Counter-clockwise turn is positive, clockwise negative."""
        assert Vector(1, 0).cross(Vector(0, 1)) == 1
        assert Vector(0, 1).cross(Vector(1, 0)) == -1

    def test_cross_parallel_is_zero(self):
        assert Vector(2, 3).cross(Vector(-4, -6)) == 0

    def test_large_coordinates_exact(self):
        """Products of large coordinates do not overflow."""
        big = 10 ** 12
        v = Vector(big, big)
        assert v.dot(v) == 2 * 10 ** 24
        assert v.cross(Vector(big, -big)) == -2 * 10 ** 24


class TestVectorConstruction:
    """Tests for input coercion and validation."""

    def test_numpy_integers_become_ints(self):
        v = Vector(np.int64(3), np.int32(4))
        assert type(v.x) is int
        assert type(v.y) is int
        assert v == Vector(3, 4)

    def test_float_rejected(self):
        with pytest.raises(TypeError, match="integer"):
            Vector(1.5, 2)

    def test_repr(self):
        assert repr(Vector(1, -2)) == "Vector(1, -2)"


class TestSign:
    """Tests for the sign predicate."""

    def test_integers_exact(self):
        assert sign(5) == 1
        assert sign(-3) == -1
        assert sign(0) == 0

    def test_float_dead_zone(self):
        """Floats within EPS of zero count as zero."""
        assert sign(EPS / 10) == 0
        assert sign(-EPS / 10) == 0
        assert sign(EPS) == 0
        assert sign(2 * EPS) == 1
        assert sign(-2 * EPS) == -1

    def test_fraction_exact(self):
        """Exact rationals never fall into the dead zone."""
        assert sign(Fraction(1, 10 ** 9)) == 1
        assert sign(Fraction(-1, 3)) == -1

    def test_numpy_values(self):
        assert sign(np.int64(-7)) == -1
        assert sign(np.float64(1e-9)) == 0

    @pytest.mark.parametrize("dtype", [np.int8, np.int32, np.int64, np.uint16])
    def test_numpy_integers_return_int(self, dtype):
        """numpy integer scalars give a plain int sign, never a numpy bool."""
        assert sign(dtype(3)) == 1
        assert sign(dtype(0)) == 0
        assert type(sign(dtype(3))) is int

    def test_numpy_negative_integer(self):
        result = sign(np.int64(-7))
        assert result == -1
        assert type(result) is int


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
