import dataclasses
import json

import numpy as np
import pytest

from camber import Linspace, Stepper, flip
from camber.core.ease import smooth_start_2, smooth_start_3, smooth_stop_3
from camber.exceptions import ConfigurationError, SamplingError
from camber.utils.sampling import CurveSamples, SamplingConfig, make_range, sample_curve


def test_sample_curve_over_linspace():
    samples = sample_curve(smooth_start_2, Linspace(0., 1., 3))
    assert samples.label == "smooth_start_2"
    np.testing.assert_array_equal(samples.ts, [0., 0.5, 1.])
    np.testing.assert_array_equal(samples.ys, [0., 0.25, 1.])
    assert samples.ts.dtype == np.float64


def test_sample_curve_over_stepper_and_list():
    assert len(sample_curve(smooth_start_2, Stepper(0.25))) == 5
    samples = sample_curve(lambda t: 2 * t, [1., 2.], label="double")
    assert list(samples) == [(1., 2.), (2., 4.)]


def test_sample_curve_empty_range():
    samples = sample_curve(smooth_start_2, Linspace(0., 1., 0))
    assert len(samples) == 0
    assert samples.to_dict() == {'label': 'smooth_start_2', 't': [], 'y': []}


def test_stop_matches_flipped_start_when_sampled():
    stop = sample_curve(smooth_stop_3, Linspace(0., 1., 50))
    composed = sample_curve(lambda t: flip(smooth_start_3(flip(t))), Linspace(0., 1., 50))
    assert stop.max_abs_difference(composed) == 0.


def test_max_abs_difference_needs_same_parameters():
    a = sample_curve(smooth_start_2, Linspace(0., 1., 5))
    b = sample_curve(smooth_start_2, Linspace(0., 2., 5))
    with pytest.raises(ValueError):
        a.max_abs_difference(b)


def test_curve_samples_fields():
    samples = CurveSamples(ts=np.zeros(2), ys=np.ones(2), label="flat")
    assert [f.name for f in dataclasses.fields(samples)] == ["ts", "ys", "label"]
    assert samples.to_dict() == {"label": "flat", "t": [0.0, 0.0], "y": [1.0, 1.0]}


def test_curve_samples_shape_mismatch():
    with pytest.raises(ValueError):
        CurveSamples(ts=np.zeros(3), ys=np.zeros(2))


def test_to_json_round_trips_through_json_module():
    samples = sample_curve(smooth_start_2, Linspace(0., 1., 3), label="sq")
    data = json.loads(samples.to_json())
    assert data == {'label': 'sq', 't': [0., 0.5, 1.], 'y': [0., 0.25, 1.]}


def test_failing_function_raises_sampling_error():
    def broken(t):
        return 1. / t

    with pytest.raises(SamplingError) as excinfo:
        sample_curve(broken, [1., 0.])
    assert excinfo.value.label == "broken"
    assert isinstance(excinfo.value.original_error, ZeroDivisionError)


def test_make_range_defaults_to_linspace():
    rng = make_range()
    assert isinstance(rng, Linspace)
    assert len(rng) == 100


def test_make_range_stepper():
    rng = make_range(SamplingConfig(numel=0, sampler="stepper"))
    assert isinstance(rng, Stepper)
    assert list(rng) == []


@pytest.mark.parametrize("config", [
    SamplingConfig(numel=-1),
    SamplingConfig(numel=2.5),
    SamplingConfig(sampler="random"),
])
def test_invalid_sampling_config(config):
    with pytest.raises(ConfigurationError):
        config.validate()
