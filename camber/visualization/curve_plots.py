"""
Camber Visualization

Plots easing functions and polynomials with matplotlib. One figure per
function, saved as ``<output_dir>/<name>.<format>``, the same layout as the
``img/`` gallery of the project documentation.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import seaborn as sns

from ..core.ease import FAMILIES, family_functions
from ..core.polynomial import poly_eval
from ..core.ranges import Linspace
from ..exceptions import ConfigurationError, VisualizationError, validate_numel
from ..utils.sampling import CurveSamples, sample_curve

logger = logging.getLogger(__name__)

# Set style
sns.set_style("darkgrid")

SUPPORTED_FORMATS = ("svg", "png", "pdf")

# Coefficients of the polynomials in the poly_eval demo figures
POLY_DEMO_BASIC = {
    'linear': ([1., 0.], "red"),
    'quadratic': ([1., 0., 0.], "green"),
    'cubic': ([1., 0., 0., 0.], "blue"),
}
POLY_DEMO_COMPLICATED = [-2., -1., 1., -0.1]


@dataclass
class PlotConfig:
    """Configuration for curve plots"""
    numel: int = 200  # Samples per curve
    figsize: Tuple[float, float] = (6.0, 4.0)
    dpi: int = 100
    colour: str = "red"
    file_format: str = "svg"
    output_dir: str = "img"

    def validate(self) -> "PlotConfig":
        validate_numel(self.numel, minimum=2)

        if self.dpi <= 0:
            raise ConfigurationError(
                "dpi must be positive",
                config_key="dpi",
                config_value=str(self.dpi)
            )

        if self.file_format not in SUPPORTED_FORMATS:
            raise ConfigurationError(
                f"Unsupported file format, expected one of {', '.join(SUPPORTED_FORMATS)}",
                config_key="file_format",
                config_value=str(self.file_format)
            )
        return self


class CurveVisualizer:
    """
    Draws sampled curves and writes them to disk

    Provides methods to visualize:
    - a single function over an interval
    - several polynomials on shared axes
    """

    def __init__(self, config: Optional[PlotConfig] = None):
        """Initialize visualizer

        Args:
            config: Plot configuration, defaults to PlotConfig()
        """
        self.config = (config or PlotConfig()).validate()
        self.output_dir = Path(self.config.output_dir)

        logger.debug(f"Initialized CurveVisualizer writing {self.config.file_format} "
                     f"to {self.output_dir}")

    def sample(self, fn: Callable[[float], float], start: float = 0., end: float = 1.,
               label: Optional[str] = None) -> CurveSamples:
        return sample_curve(fn, Linspace(start, end, self.config.numel), label=label)

    def plot_function(self, fn: Callable[[float], float], name: str,
                      start: float = 0., end: float = 1.,
                      colour: Optional[str] = None) -> plt.Figure:
        """Plot one function over [start, end]

        Args:
            fn: Function to plot
            name: Title of the figure
            start: Lower end of the parameter range
            end: Upper end of the parameter range
            colour: Line colour, defaults to the configured colour

        Returns:
            Matplotlib figure object
        """
        return self.plot_functions({name: (fn, colour or self.config.colour)},
                                   title=name, start=start, end=end)

    def plot_functions(self, functions: Dict[str, Tuple[Callable[[float], float], str]],
                       title: str, start: float = 0., end: float = 1.) -> plt.Figure:
        """Plot several functions on shared axes

        Args:
            functions: Mapping of label to (function, colour)
            title: Title of the figure
            start: Lower end of the parameter range
            end: Upper end of the parameter range

        Returns:
            Matplotlib figure object
        """
        fig, ax = plt.subplots(figsize=self.config.figsize)

        try:
            for label, (fn, colour) in functions.items():
                samples = self.sample(fn, start, end, label=label)
                ax.plot(samples.ts, samples.ys, color=colour, label=label)

            ax.set_title(title)
            ax.set_xlabel('t')
            ax.set_ylabel('f(t)')
            if len(functions) > 1:
                ax.legend()

            fig.tight_layout()
            return fig

        except Exception as e:
            plt.close(fig)
            raise VisualizationError(f"Failed to plot {title}: {e}", plot_type="function") from e

    def save(self, fig: plt.Figure, name: str) -> Path:
        """Write a figure to ``<output_dir>/<name>.<format>`` and close it"""
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            path = self.output_dir / f"{name}.{self.config.file_format}"
            fig.savefig(path, dpi=self.config.dpi, bbox_inches='tight')
            logger.info(f"Figure saved to {path}")
            return path
        except OSError as e:
            raise VisualizationError(f"Could not write {name}: {e}", plot_type="save") from e
        finally:
            plt.close(fig)


def plot_easing_family(family: str, config: Optional[PlotConfig] = None) -> List[Path]:
    """
    Plot and save every fixed degree function of an easing family

    Args:
        family: 'smooth_start', 'smooth_stop' or 'smooth_step'
        config: Plot configuration

    Returns:
        Paths of the written figures, in degree order
    """
    visualizer = CurveVisualizer(config)
    paths = []

    for name, fn in family_functions(family).items():
        fig = visualizer.plot_function(fn, name)
        paths.append(visualizer.save(fig, name))

    logger.info(f"Plotted {len(paths)} {family} functions")
    return paths


def plot_all_families(config: Optional[PlotConfig] = None) -> List[Path]:
    """Plot every easing family"""
    paths = []
    for family in FAMILIES:
        paths.extend(plot_easing_family(family, config))
    return paths


def plot_poly_demo(config: Optional[PlotConfig] = None) -> List[Path]:
    """
    Plot the ``poly_eval`` demonstration figures

    ``polyeval_1`` shows linear, quadratic and cubic polynomials together on
    [-1, 1], ``polyeval_2`` a less regular cubic on its own.

    Returns:
        Paths of the two written figures
    """
    visualizer = CurveVisualizer(config)

    basic = {
        label: (_polynomial(coefficients), colour)
        for label, (coefficients, colour) in POLY_DEMO_BASIC.items()
    }
    fig = visualizer.plot_functions(basic, title='polyeval_1', start=-1., end=1.)
    first = visualizer.save(fig, 'polyeval_1')

    fig = visualizer.plot_function(_polynomial(POLY_DEMO_COMPLICATED), 'polyeval_2',
                                   start=-1., end=1., colour="blue")
    second = visualizer.save(fig, 'polyeval_2')

    return [first, second]


def _polynomial(coefficients: Sequence[float]) -> Callable[[float], float]:
    def p(x: float) -> float:
        return poly_eval(coefficients, x)
    return p
