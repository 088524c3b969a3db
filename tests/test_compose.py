import math

import pytest

from camber import flip, lerp, mix
from camber.core.compose import bernstein


def test_flip_is_an_involution(unit_ts):
    for t in unit_ts + [-3.5, 2.25, 1e-9]:
        assert flip(flip(t)) == pytest.approx(t, abs=1e-15)


def test_flip_mirrors_unit_interval():
    assert flip(0.) == 1.
    assert flip(1.) == 0.
    assert flip(0.25) == 0.75


def test_mix_endpoints_are_exact():
    for a, b in [(0., 1.), (-2., 2.), (3.3, -7.1), (1e10, 1e-10)]:
        assert mix(a, b, 0.) == a
        assert mix(a, b, 1.) == b


def test_mix_midpoint():
    assert mix(2., 4., 0.5) == 3.
    assert mix(-1., 1., 0.25) == -0.5


def test_lerp_is_mix():
    assert lerp is mix


def test_mix_propagates_nan():
    assert math.isnan(mix(0., 1., float("nan")))


def test_bernstein_values():
    assert bernstein(3, 1, 0.5) == pytest.approx(0.375)
    assert bernstein(0, 0, 0.3) == 1.
    assert bernstein(2, 2, 0.5) == 0.25


@pytest.mark.parametrize("n", [1, 2, 5, 9])
def test_bernstein_partition_of_unity(n, unit_ts):
    for t in unit_ts[::10]:
        total = sum(bernstein(n, i, t) for i in range(n + 1))
        assert total == pytest.approx(1.)


@pytest.mark.parametrize("n, i", [(3, 4), (3, -1), (-1, 0)])
def test_bernstein_asserts_on_bad_indices(n, i):
    with pytest.raises(AssertionError):
        bernstein(n, i, 0.5)
