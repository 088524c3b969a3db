"""
Curve Sampling Utilities

Turns a range of parameters and a curve into ``(t, f(t))`` arrays. This is
the hand-off point between the numeric core and anything that draws or
exports curves.
"""

import json
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from ..core.ranges import Linspace, Stepper
from ..exceptions import ConfigurationError, ErrorContext, validate_numel

logger = logging.getLogger(__name__)

SAMPLERS = ("linspace", "stepper")


@dataclass
class SamplingConfig:
    """Configuration for sampling a curve"""
    start: float = 0.0
    end: float = 1.0
    numel: int = 100
    sampler: str = "linspace"  # 'linspace' (exact count) or 'stepper' (unit interval only)

    def validate(self) -> "SamplingConfig":
        """Check the configuration, raising ConfigurationError on bad values"""
        validate_numel(self.numel)

        if self.sampler not in SAMPLERS:
            raise ConfigurationError(
                f"Sampler must be one of {', '.join(SAMPLERS)}",
                config_key="sampler",
                config_value=str(self.sampler)
            )

        if self.sampler == "stepper" and (self.start, self.end) != (0.0, 1.0):
            logger.warning("Stepper always samples [0, 1]; ignoring start/end "
                           f"({self.start}, {self.end})")
        return self


@dataclass
class CurveSamples:
    """Container for a sampled curve"""
    ts: np.ndarray
    ys: np.ndarray
    label: str = "curve"

    def __post_init__(self):
        if self.ts.shape != self.ys.shape:
            raise ValueError(f"Shape mismatch: ts {self.ts.shape} vs ys {self.ys.shape}")

    def __len__(self) -> int:
        return len(self.ts)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return zip(self.ts.tolist(), self.ys.tolist())

    def max_abs_difference(self, other: "CurveSamples") -> float:
        """Largest absolute difference between two curves sampled on the same ts"""
        if not np.array_equal(self.ts, other.ts):
            raise ValueError("Curves were sampled on different parameters")
        if len(self) == 0:
            return 0.0
        return float(np.max(np.abs(self.ys - other.ys)))

    def to_dict(self) -> dict:
        """Plain JSON-friendly representation"""
        return {
            'label': self.label,
            't': self.ts.tolist(),
            'y': self.ys.tolist(),
        }

    def to_json(self, **kwargs) -> str:
        return json.dumps(self.to_dict(), **kwargs)


def make_range(config: Optional[SamplingConfig] = None) -> Union[Linspace, Stepper]:
    """Build the parameter range described by ``config``"""
    config = (config or SamplingConfig()).validate()

    if config.sampler == "stepper":
        return Stepper.with_numel(config.numel)
    return Linspace(config.start, config.end, config.numel)


def sample_curve(fn: Callable[[float], float],
                 ts: Iterable[float],
                 label: Optional[str] = None) -> CurveSamples:
    """
    Evaluate ``fn`` over a range of parameters

    Args:
        fn: Curve to sample, e.g. an easing function
        ts: Parameters, e.g. a Linspace, a Stepper or a list
        label: Name for the curve, defaults to the function name

    Returns:
        CurveSamples with float64 arrays of parameters and values

    Raises:
        SamplingError: If ``fn`` raises for one of the parameters
    """
    label = label or getattr(fn, '__name__', None) or repr(fn)

    with ErrorContext("sample_curve", label=label):
        params = np.fromiter(ts, dtype=np.float64)
        values = np.fromiter((fn(float(t)) for t in params), dtype=np.float64, count=len(params))

    logger.debug(f"Sampled {label} at {len(params)} points")
    return CurveSamples(ts=params, ys=values, label=label)
