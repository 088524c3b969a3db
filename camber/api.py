"""
Camber High-Level API

Simple functions for sampling easing functions and polynomials and for
writing plots of them. This is the interface the ``camber`` command line
tool is built on.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from .core.ease import FAMILIES, get_easing
from .core.polynomial import poly_eval
from .exceptions import DependencyError, EasingNotFoundError, validate_coefficients
from .utils.sampling import CurveSamples, SamplingConfig, make_range, sample_curve

logger = logging.getLogger(__name__)


def sample_easing(
    easing: Union[str, Callable[[float], float]],
    numel: int = 100,
    sampler: str = "linspace",
) -> CurveSamples:
    """
    Sample an easing function over [0, 1]

    Args:
        easing: Registered easing name (``"smooth_step_3"``,
            ``"smooth_stop_i:12"``) or any one argument callable
        numel: Number of samples (approximate for the stepper)
        sampler: ``"linspace"`` or ``"stepper"``

    Returns:
        CurveSamples with the parameters and eased values

    Example:
        >>> samples = sample_easing("smooth_start_2", numel=3)
        >>> list(samples)
        [(0.0, 0.0), (0.5, 0.25), (1.0, 1.0)]
    """
    if isinstance(easing, str):
        label = easing
        fn = get_easing(easing)
    else:
        label = getattr(easing, '__name__', 'easing')
        fn = easing

    config = SamplingConfig(start=0.0, end=1.0, numel=numel, sampler=sampler)
    logger.debug(f"Sampling {label} with {config}")
    return sample_curve(fn, make_range(config), label=label)


def evaluate_polynomial(
    coefficients: Sequence[float],
    start: float = -1.0,
    end: float = 1.0,
    numel: int = 50,
) -> CurveSamples:
    """
    Evaluate a polynomial over an evenly spaced range

    Args:
        coefficients: Coefficients from the highest degree down to the constant
        start: First parameter
        end: Last parameter
        numel: Number of samples

    Returns:
        CurveSamples of ``(x, p(x))``
    """
    values = validate_coefficients(coefficients)
    config = SamplingConfig(start=start, end=end, numel=numel)

    def p(x: float) -> float:
        return poly_eval(values, x)

    label = f"poly{values}"
    return sample_curve(p, make_range(config), label=label)


def plot_easing_functions(
    families: Optional[Sequence[str]] = None,
    output_dir: Union[str, Path] = "img",
    file_format: str = "svg",
    numel: int = 200,
    include_poly_demo: bool = False,
) -> List[Path]:
    """
    Write one plot per easing function of the requested families

    Args:
        families: Families to plot, all of them by default
        output_dir: Directory receiving the figures
        file_format: 'svg', 'png' or 'pdf'
        numel: Samples per curve
        include_poly_demo: Also write the polynomial demo figures

    Returns:
        Paths of every written file
    """
    try:
        from .visualization.curve_plots import PlotConfig, plot_easing_family, plot_poly_demo
    except ImportError as e:
        raise DependencyError(
            "Plotting needs matplotlib and seaborn",
            missing_package=getattr(e, 'name', None)
        ) from e

    families = list(families or FAMILIES)
    for family in families:
        if family not in FAMILIES:
            raise EasingNotFoundError(family, list(FAMILIES))

    config = PlotConfig(numel=numel, file_format=file_format, output_dir=str(output_dir))

    paths = []
    for family in families:
        paths.extend(plot_easing_family(family, config))

    if include_poly_demo:
        paths.extend(plot_poly_demo(config))

    logger.info(f"Wrote {len(paths)} figures to {output_dir}")
    return paths
