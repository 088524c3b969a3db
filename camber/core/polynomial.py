"""
Camber Polynomial Evaluation

Evaluates polynomials given by their coefficients using Horner's rule.
Coefficients are ordered from the highest degree term down to the constant
term, so ``[1., 6., 3.]`` is ``x^2 + 6x + 3``.
"""

from functools import reduce
from typing import Sequence


def poly_eval(coefficients: Sequence[float], x: float) -> float:
    """Evaluate a polynomial from its coefficients

    A polynomial of degree n has n+1 coefficients. A single coefficient is a
    constant function and an empty sequence is the zero polynomial.

    O(n) time for n coefficients, no powers are computed:
    p(x) = (((a_n*x + a_n-1)*x + ... + a_2)*x + a_1)*x + a_0

    Args:
        coefficients: Coefficients in the order a_n .. a_0
        x: Point at which to evaluate

    Returns:
        p(x) as a float. NaN and infinities propagate like any float
        arithmetic.

    Example:
        >>> poly_eval([1., 6., 3.], 0.)
        3.0
        >>> poly_eval([1., 6., 3.], 1.)
        10.0
        >>> poly_eval([], 5.)
        0.0
    """
    return reduce(lambda acc, c: acc * x + c, coefficients, 0.0)
