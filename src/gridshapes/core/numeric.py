"""
Numeric predicates shared by every shape.

The tolerance used for floating point comparisons lives here and nowhere
else. Integer quantities are always compared exactly.
"""

import numbers


# Numerical tolerance for floating point comparisons
EPS = 1e-6


def sign(x) -> int:
    """
    Three-valued sign of a number.

    Exact for integers and other exact numbers (``Fraction``). Floating values
    inside the dead zone ``[-EPS, EPS]`` are classified as zero.

    Parameters
    ----------
    x : int, Fraction or float
        Quantity to classify.

    Returns
    -------
    int
        -1, 0 or 1.
    """
    if isinstance(x, numbers.Rational):
        return int(x > 0) - int(x < 0)
    if x < -EPS:
        return -1
    if x > EPS:
        return 1
    return 0
