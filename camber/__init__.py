"""Camber: easing functions, polynomial evaluation and ranges for shaping curves."""
__version__="0.3.0"

from .core.polynomial import poly_eval
from .core.compose import flip, mix, lerp
from .core.ranges import linspace, Linspace, Stepper
from .core import ease
from .core.ease import (
    EASING_FUNCTIONS, get_easing,
    smooth_start_2, smooth_start_3, smooth_start_4, smooth_start_5,
    smooth_start_6, smooth_start_7, smooth_start_8, smooth_start_9,
    smooth_start_i,
    smooth_stop_2, smooth_stop_3, smooth_stop_4, smooth_stop_5,
    smooth_stop_6, smooth_stop_7, smooth_stop_8, smooth_stop_9,
    smooth_stop_i,
    smooth_step_2, smooth_step_3, smooth_step_4, smooth_step_5,
    smooth_step_6, smooth_step_7, smooth_step_8, smooth_step_9,
    smooth_step_i,
)
from .exceptions import CamberError
