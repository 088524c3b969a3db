"""
Camber Composition Primitives

Small pointwise transforms used to build easing functions out of each
other. Flipping the *parameter* of an easing function mirrors it
horizontally, flipping its *result* mirrors it vertically::

    ts = Linspace(0., 1., 100)
    mirrored = [smooth_start_2(flip(t)) for t in ts]
"""

from scipy.special import comb


def flip(t: float) -> float:
    """Mirror a parameter, ``1 - t``"""
    return 1. - t


def mix(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between ``a`` and ``b``

    Exactly ``a`` at ``t = 0`` and exactly ``b`` at ``t = 1`` (finite inputs).
    Written as ``a*(1-t) + b*t`` rather than ``a + (b-a)*t`` to keep both
    endpoints exact; very large ``a`` and ``b`` of opposite sign can still lose
    precision to cancellation.

    Args:
        a: Value at t = 0
        b: Value at t = 1
        t: Blend factor

    Returns:
        Blended value
    """
    return a * (1. - t) + b * t


lerp = mix


def bernstein(n: int, i: int, t: float) -> float:
    """
    Bernstein basis polynomial ``C(n, i) * t^i * (1-t)^(n-i)``

    Args:
        n: Degree of the basis, n >= 0
        i: Index of the basis polynomial, 0 <= i <= n
        t: Parameter

    Returns:
        Value of the i-th degree n basis polynomial at t
    """
    assert isinstance(n, int) and n >= 0, f"degree must be a non-negative integer, got {n!r}"
    assert isinstance(i, int) and 0 <= i <= n, f"index must be in [0, {n}], got {i!r}"

    coefficient = comb(n, i, exact=True)
    value = float(coefficient)
    for _ in range(i):
        value *= t
    s = flip(t)
    for _ in range(n - i):
        value *= s
    return value
