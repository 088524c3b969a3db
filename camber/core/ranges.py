"""
Camber Range Generators

Ranges of parameter values to drive easing functions and polynomials:

- ``linspace``: eager list of evenly spaced values, both ends included
- ``Linspace``: the same sequence produced lazily, from either end
- ``Stepper``: fixed step over [0, 1], faster but only approximately sized

Element counts of zero or less give empty ranges. A single element range
gives just the end value, for both ``linspace`` and ``Linspace``.
"""

import logging
import math
import operator
from typing import Iterator, List, Optional, Tuple

from .compose import lerp

logger = logging.getLogger(__name__)


def linspace(start: float, end: float, numel: int) -> List[float]:
    """
    Create an inclusive range with the desired number of elements

    Handles ranges in any direction, and constant ranges like
    ``linspace(1., 1., 100)``. Values stay within the start and end bounds and
    the first and last elements are exactly ``start`` and ``end``.

    O(n) time and space. Use :class:`Linspace` to avoid materializing the list.

    Args:
        start: First value of the range
        end: Last value of the range
        numel: Number of elements in the range

    Returns:
        List of ``numel`` floats

    Example:
        >>> linspace(0., 1., 5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
        >>> linspace(0., 1., 1)
        [1.0]
        >>> linspace(0., 1., 0)
        []
    """
    numel = operator.index(numel)
    if numel <= 0:
        return []
    if numel == 1:
        return [float(end)]

    # f(t) = s*(1-t) + e*t gives f(0) = s and f(1) = e exactly
    n = float(numel - 1)
    return [lerp(start, end, i / n) for i in range(numel)]


class Linspace:
    """
    Lazy inclusive range with the desired number of elements

    Produces the same values as :func:`linspace` one at a time. Elements can
    be taken from the front with ``next()`` and from the back with
    :meth:`next_back`; both ends consume the same finite sequence, so no
    element is produced twice and ``numel`` productions in any mix exhaust it.

    Example:
        >>> lin = Linspace(0., 1., 5)
        >>> next(lin), lin.next_back()
        (0.0, 1.0)
        >>> list(lin)
        [0.25, 0.5, 0.75]
        >>> lin.restart()
        Linspace(start=0.0, end=1.0, numel=5, remaining=5)
    """

    def __init__(self, start: float, end: float, numel: int):
        """Create a lazy range over ``numel`` elements from ``start`` to ``end``

        Args:
            start: First value of the range
            end: Last value of the range
            numel: Total number of elements, including both ends
        """
        self.start = float(start)
        self.end = float(end)
        self._floor = 0
        self._configure(operator.index(numel))
        logger.debug(f"Initialized {self!r}")

    @classmethod
    def normal(cls, numel: int) -> "Linspace":
        """Inclusive range over [0, 1] with the desired number of elements

        If speed matters more than the exact element count, see :class:`Stepper`.
        """
        return cls(0., 1., numel)

    def _configure(self, numel: int):
        if numel == 1:
            # Two element range with the start already consumed, so the
            # only element left is the end value
            self._numel = 2
            self._floor = 1
        else:
            self._numel = max(numel, 0)
            self._floor = 0
        self._front = self._floor
        self._back = self._numel

    @property
    def numel(self) -> int:
        """Total number of elements in the configured range"""
        return self._numel - self._floor

    def _value(self, index: int) -> float:
        if self._numel == 1:
            return self.end
        t = index / (self._numel - 1)
        return lerp(self.start, self.end, t)

    def __iter__(self) -> "Linspace":
        return self

    def __next__(self) -> float:
        if self._front >= self._back:
            raise StopIteration
        value = self._value(self._front)
        self._front += 1
        return value

    def __reversed__(self) -> Iterator[float]:
        value = self.next_back()
        while value is not None:
            yield value
            value = self.next_back()

    def next_value(self) -> Optional[float]:
        """Next element from the front, or ``None`` once exhausted"""
        return next(self, None)

    def next_back(self) -> Optional[float]:
        """Next element from the back, or ``None`` once exhausted"""
        if self._front >= self._back:
            return None
        self._back -= 1
        return self._value(self._back)

    def last(self) -> Optional[float]:
        """Peek at the last remaining element without consuming it

        While nothing has been taken from the back this is exactly ``end``.
        """
        if self._front >= self._back:
            return None
        return self._value(self._back - 1)

    def set_remaining(self, numel: int) -> "Linspace":
        """Set a new number of elements from the current element to the end

        This changes the size of every step from here on; the current
        position is kept and the range still finishes on ``end``. Elements
        already taken with :meth:`next_back` are not produced again.
        """
        numel = max(operator.index(numel), 0)
        taken_back = self._numel - self._back
        if self._front == 0 and taken_back == 0 and numel == 1:
            self._configure(1)
        else:
            # Elements already taken from the back stay consumed
            self._numel = self._front + numel + taken_back
            self._floor = 0
            self._back = self._numel - taken_back
        logger.debug(f"Reconfigured {self!r}")
        return self

    def restart(self) -> "Linspace":
        """Start over again from the original ``start`` value

        Both ends are reset; ``start``, ``end`` and the configured number of
        elements are kept.
        """
        self._front = self._floor
        self._back = self._numel
        return self

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Exact bounds on the remaining number of elements"""
        remaining = len(self)
        return remaining, remaining

    def __len__(self) -> int:
        return max(self._back - self._front, 0)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(start={self.start!r}, end={self.end!r}, "
                f"numel={self.numel}, remaining={len(self)})")


class Stepper:
    """
    Iterator over the range [0, 1] with a fixed step size

    Compared to :class:`Linspace` the stepper is cheaper per element but only
    accumulates its step, so it tends to stop just before reaching 1 because
    of floating point rounding.

    Whatever the step, the first element is exactly 0. Values are produced
    until one would be greater than 1, after which nothing more is produced.

    Example:
        >>> list(Stepper(0.75))
        [0.0, 0.75]
        >>> list(Stepper(1.5))
        [0.0]
    """

    def __init__(self, dt: float):
        """Create a stepper from 0 to 1 with step ``dt``"""
        self.dt = float(dt)
        self._origin = 0.
        self.t = self._origin

    @classmethod
    def with_numel(cls, n: int) -> "Stepper":
        """Stepper from 0 to 1 inclusive with approximately ``n`` elements

        The total tends to be one short of ``n`` for large ``n``. One element
        gives just 0 and zero elements give nothing at all. If the exact count
        matters, use :class:`Linspace` instead.
        """
        n = operator.index(n)
        stepper = cls(1. / (n - 1) if n > 1 else 2.)
        if n <= 0:
            # Start past the end so the stepper is exhausted, even after restart
            stepper._origin = 2.
            stepper.t = stepper._origin
        return stepper

    def restart(self) -> "Stepper":
        """Go back to the first element"""
        self.t = self._origin
        return self

    def __iter__(self) -> "Stepper":
        return self

    def __next__(self) -> float:
        if not self.t <= 1.:
            raise StopIteration
        t = self.t
        self.t += self.dt
        return t

    def next_value(self) -> Optional[float]:
        """Next element, or ``None`` once exhausted"""
        return next(self, None)

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Estimated bounds on the remaining number of elements

        This is an estimate from the step size, not a contract; accumulated
        rounding decides the real count. The upper bound is ``None`` when the
        step does not move the stepper forward.
        """
        if not self.t <= 1.:
            return 0, 0
        if not self.dt > 0.:
            return 1, None
        ratio = (1. - self.t) / self.dt
        if math.isinf(ratio):
            return 1, None
        estimate = int(ratio)
        return max(estimate - 1, 1), estimate + 2

    def __repr__(self) -> str:
        return f"{type(self).__name__}(t={self.t!r}, dt={self.dt!r})"
