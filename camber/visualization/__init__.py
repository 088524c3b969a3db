"""
Camber Visualization Module

Matplotlib figures of easing functions and polynomials.
"""

from .curve_plots import (
    PlotConfig, CurveVisualizer, SUPPORTED_FORMATS,
    plot_easing_family, plot_all_families, plot_poly_demo
)

__all__ = [
    'PlotConfig',
    'CurveVisualizer',
    'SUPPORTED_FORMATS',
    'plot_easing_family',
    'plot_all_families',
    'plot_poly_demo',
]
