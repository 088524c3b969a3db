"""
Camber Utilities Module

Sampling of curves into numpy arrays and logging setup for applications.
"""

from .sampling import (
    SAMPLERS, SamplingConfig, CurveSamples, make_range, sample_curve
)
from .logging import setup_logging

__all__ = [
    # Sampling
    'SAMPLERS',
    'SamplingConfig',
    'CurveSamples',
    'make_range',
    'sample_curve',

    # Logging
    'setup_logging',
]
