"""
Camber Easing Functions

Functions which take a parameter ``t``, normally between 0 and 1, and
transform it into another value between 0 and 1.

- smooth start: ``t^n``, slow at the beginning
- smooth stop: the smooth start curve mirrored horizontally and vertically,
  ``flip(smooth_start(flip(t)))``, slow at the end
- smooth step: ``mix(smooth_start(t), smooth_stop(t), t)``, slow at both ends

Fixed degrees 2 through 9 have their own functions. The ``_i`` variants take
the degree as an integer argument and use an exact integer power, never a
real exponent ``pow``.
"""

import logging
import math
import re
from functools import partial
from typing import Callable, Dict, List

from .compose import flip, mix
from ..exceptions import EasingNotFoundError

logger = logging.getLogger(__name__)

EasingFunction = Callable[[float], float]


def _powi(t: float, i: int) -> float:
    """Integer power by repeated squaring"""
    if i < 0:
        denominator = _powi(t, -i)
        if denominator == 0.0:
            # x^-k at x == 0 is a signed infinity
            return math.copysign(math.inf, denominator)
        return 1. / denominator

    result = 1.
    base = t
    while i:
        if i & 1:
            result *= base
        i >>= 1
        if i:
            base *= base
    return result

# Smooth start

def smooth_start_2(t: float) -> float:
    """t^2"""
    return t * t


def smooth_start_3(t: float) -> float:
    """t^3"""
    return t * t * t


def smooth_start_4(t: float) -> float:
    """t^4"""
    return t * t * t * t


def smooth_start_5(t: float) -> float:
    """t^5"""
    return t * t * t * t * t


def smooth_start_6(t: float) -> float:
    """t^6"""
    return t * t * t * t * t * t


def smooth_start_7(t: float) -> float:
    """t^7"""
    return _powi(t, 7)


def smooth_start_8(t: float) -> float:
    """t^8"""
    return _powi(t, 8)


def smooth_start_9(t: float) -> float:
    """t^9"""
    return _powi(t, 9)


def smooth_start_i(i: int, t: float) -> float:
    """t^i for any integer degree i"""
    return _powi(t, i)

# Smooth stop

def smooth_stop_2(t: float) -> float:
    """1 - (1-t)^2"""
    return flip(smooth_start_2(flip(t)))


def smooth_stop_3(t: float) -> float:
    """1 - (1-t)^3"""
    return flip(smooth_start_3(flip(t)))


def smooth_stop_4(t: float) -> float:
    """1 - (1-t)^4"""
    return flip(smooth_start_4(flip(t)))


def smooth_stop_5(t: float) -> float:
    """1 - (1-t)^5"""
    return flip(smooth_start_5(flip(t)))


def smooth_stop_6(t: float) -> float:
    """1 - (1-t)^6"""
    return flip(smooth_start_6(flip(t)))


def smooth_stop_7(t: float) -> float:
    """1 - (1-t)^7"""
    return flip(smooth_start_7(flip(t)))


def smooth_stop_8(t: float) -> float:
    """1 - (1-t)^8"""
    return flip(smooth_start_8(flip(t)))


def smooth_stop_9(t: float) -> float:
    """1 - (1-t)^9"""
    return flip(smooth_start_9(flip(t)))


def smooth_stop_i(i: int, t: float) -> float:
    """1 - (1-t)^i for any integer degree i"""
    return flip(smooth_start_i(i, flip(t)))

# Smooth step

def smooth_step_2(t: float) -> float:
    """Blend of smooth_start_2 into smooth_stop_2"""
    return mix(smooth_start_2(t), smooth_stop_2(t), t)


def smooth_step_3(t: float) -> float:
    """Blend of smooth_start_3 into smooth_stop_3"""
    return mix(smooth_start_3(t), smooth_stop_3(t), t)


def smooth_step_4(t: float) -> float:
    """Blend of smooth_start_4 into smooth_stop_4"""
    return mix(smooth_start_4(t), smooth_stop_4(t), t)


def smooth_step_5(t: float) -> float:
    """Blend of smooth_start_5 into smooth_stop_5"""
    return mix(smooth_start_5(t), smooth_stop_5(t), t)


def smooth_step_6(t: float) -> float:
    """Blend of smooth_start_6 into smooth_stop_6"""
    return mix(smooth_start_6(t), smooth_stop_6(t), t)


def smooth_step_7(t: float) -> float:
    """Blend of smooth_start_7 into smooth_stop_7"""
    return mix(smooth_start_7(t), smooth_stop_7(t), t)


def smooth_step_8(t: float) -> float:
    """Blend of smooth_start_8 into smooth_stop_8"""
    return mix(smooth_start_8(t), smooth_stop_8(t), t)


def smooth_step_9(t: float) -> float:
    """Blend of smooth_start_9 into smooth_stop_9"""
    return mix(smooth_start_9(t), smooth_stop_9(t), t)


def smooth_step_i(i: int, t: float) -> float:
    """Blend of smooth_start_i into smooth_stop_i for any integer degree i"""
    return mix(smooth_start_i(i, t), smooth_stop_i(i, t), t)

# Registry

FAMILIES = ("smooth_start", "smooth_stop", "smooth_step")
DEGREES = tuple(range(2, 10))

EASING_FUNCTIONS: Dict[str, EasingFunction] = {
    f"{family}_{degree}": globals()[f"{family}_{degree}"]
    for family in FAMILIES
    for degree in DEGREES
}

_PARAMETERIZED = {
    "smooth_start": smooth_start_i,
    "smooth_stop": smooth_stop_i,
    "smooth_step": smooth_step_i,
}

_PARAMETERIZED_NAME = re.compile(r"^(smooth_start|smooth_stop|smooth_step)_i:(-?\d+)$")


def easing_names() -> List[str]:
    """Names accepted by :func:`get_easing` (fixed degrees only)"""
    return list(EASING_FUNCTIONS)


def family_functions(family: str) -> Dict[str, EasingFunction]:
    """All fixed degree functions of one family, in degree order"""
    if family not in FAMILIES:
        raise EasingNotFoundError(family, list(FAMILIES))
    return {f"{family}_{d}": EASING_FUNCTIONS[f"{family}_{d}"] for d in DEGREES}


def get_easing(name: str) -> EasingFunction:
    """Look up an easing function by name

    Fixed degrees use their own names (``"smooth_step_3"``). Any integer
    degree is available through the parameterized form
    ``"smooth_step_i:12"``, which resolves to ``partial(smooth_step_i, 12)``.

    Args:
        name: Registered or parameterized easing name

    Returns:
        A one argument easing function

    Raises:
        EasingNotFoundError: If the name is not recognised
    """
    if name in EASING_FUNCTIONS:
        return EASING_FUNCTIONS[name]

    match = _PARAMETERIZED_NAME.match(name.strip())
    if match:
        family, degree = match.group(1), int(match.group(2))
        logger.debug(f"Resolved parameterized easing {family}_i with degree {degree}")
        return partial(_PARAMETERIZED[family], degree)

    raise EasingNotFoundError(name, easing_names())
