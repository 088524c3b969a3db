import math
from functools import partial

import pytest

from camber import EASING_FUNCTIONS, Linspace, flip, get_easing, mix
from camber.core import ease
from camber.core.ease import DEGREES, FAMILIES, easing_names, family_functions
from camber.exceptions import CamberError, EasingNotFoundError


def _fixed(family, n):
    return getattr(ease, f"{family}_{n}")


@pytest.mark.parametrize("n", DEGREES)
def test_smooth_start_bounds_and_monotonic(n, unit_ts):
    f = _fixed("smooth_start", n)
    ys = [f(t) for t in unit_ts]
    assert ys[0] == 0.
    assert ys[-1] == 1.
    assert all(0. <= y <= 1. for y in ys)
    assert all(a <= b for a, b in zip(ys, ys[1:]))


@pytest.mark.parametrize("n", DEGREES)
def test_smooth_start_is_power(n, unit_ts):
    f = _fixed("smooth_start", n)
    for t in unit_ts + [-1.5, 2.]:
        assert f(t) == pytest.approx(t ** n, rel=1e-14, abs=1e-300)


@pytest.mark.parametrize("n", DEGREES)
def test_smooth_stop_is_flipped_start(n, unit_ts):
    start = _fixed("smooth_start", n)
    stop = _fixed("smooth_stop", n)
    for t in unit_ts + [-0.5, 1.5]:
        assert stop(t) == flip(start(flip(t)))


@pytest.mark.parametrize("n", DEGREES)
def test_smooth_stop_bounds_and_monotonic(n, unit_ts):
    f = _fixed("smooth_stop", n)
    ys = [f(t) for t in unit_ts]
    assert ys[0] == 0.
    assert ys[-1] == 1.
    assert all(a <= b for a, b in zip(ys, ys[1:]))


@pytest.mark.parametrize("n", DEGREES)
def test_smooth_step_endpoints_and_midpoint(n):
    start = _fixed("smooth_start", n)
    stop = _fixed("smooth_stop", n)
    step = _fixed("smooth_step", n)

    assert step(0.) == 0.
    assert step(1.) == 1.
    assert step(0.5) == mix(start(0.5), stop(0.5), 0.5)
    assert step(0.5) == pytest.approx(0.5)


@pytest.mark.parametrize("n", DEGREES)
def test_smooth_step_blends_start_into_stop(n, unit_ts):
    start = _fixed("smooth_start", n)
    stop = _fixed("smooth_stop", n)
    step = _fixed("smooth_step", n)
    for t in unit_ts:
        assert step(t) == mix(start(t), stop(t), t)
        assert -1e-12 <= step(t) <= 1. + 1e-12


@pytest.mark.parametrize("n", DEGREES)
def test_integer_variants_agree_with_fixed_degrees(n, unit_ts):
    for t in unit_ts:
        assert ease.smooth_start_i(n, t) == pytest.approx(_fixed("smooth_start", n)(t), rel=1e-14, abs=1e-300)
        assert ease.smooth_stop_i(n, t) == pytest.approx(_fixed("smooth_stop", n)(t), rel=1e-14, abs=1e-15)
        assert ease.smooth_step_i(n, t) == pytest.approx(_fixed("smooth_step", n)(t), rel=1e-14, abs=1e-15)


def test_high_degrees_share_the_integer_power():
    for t in (0.1, 0.5, 0.9):
        assert ease.smooth_start_7(t) == ease.smooth_start_i(7, t)
        assert ease.smooth_start_9(t) == ease.smooth_start_i(9, t)


def test_integer_power_edge_exponents():
    assert ease.smooth_start_i(0, 0.3) == 1.
    assert ease.smooth_start_i(1, 0.3) == 0.3
    assert ease.smooth_start_i(-1, 2.) == 0.5
    assert ease.smooth_start_i(-2, 0.) == math.inf
    assert ease.smooth_start_i(-3, -0.) == -math.inf
    assert ease.smooth_start_i(20, 1.) == 1.


def test_no_domain_errors():
    assert ease.smooth_start_9(1e308) == math.inf
    assert math.isnan(ease.smooth_step_3(float("nan")))
    assert ease.smooth_stop_2(2.) == 0.
    assert ease.smooth_start_3(-2.) == -8.


def test_smooth_step_sampled_over_linspace():
    f = ease.smooth_step_3
    ys = [f(t) for t in Linspace(0., 1., 5)]

    def direct(t):
        return mix(t ** 3, flip(flip(t) ** 3), t)

    expected = [0., direct(0.25), direct(0.5), direct(0.75), 1.]
    assert ys == pytest.approx(expected, abs=1e-9)


def test_registry_has_every_fixed_degree():
    assert len(EASING_FUNCTIONS) == len(FAMILIES) * len(DEGREES) == 24
    assert EASING_FUNCTIONS["smooth_step_5"] is ease.smooth_step_5
    assert easing_names()[0] == "smooth_start_2"
    assert easing_names()[-1] == "smooth_step_9"


def test_family_functions_in_degree_order():
    functions = family_functions("smooth_stop")
    assert list(functions) == [f"smooth_stop_{n}" for n in DEGREES]


def test_family_functions_unknown_family():
    with pytest.raises(EasingNotFoundError):
        family_functions("smooth_bounce")


def test_get_easing_by_name():
    assert get_easing("smooth_start_4") is ease.smooth_start_4


def test_get_easing_parameterized():
    f = get_easing("smooth_step_i:12")
    assert isinstance(f, partial)
    assert f(0.3) == ease.smooth_step_i(12, 0.3)
    assert get_easing("smooth_start_i:-2")(2.) == 0.25


@pytest.mark.parametrize("name", ["nope", "smooth_start_10", "smooth_start_i:x", ""])
def test_get_easing_unknown(name):
    with pytest.raises(EasingNotFoundError) as excinfo:
        get_easing(name)
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, CamberError)
    assert excinfo.value.error_code == "CB_EASING"
