# barviz/chart/colors.py
import itertools
import math
from typing import Iterable, Optional, Tuple

import numpy as np

RGB = Tuple[int, int, int]

_rng = np.random.default_rng()


def random_int(low: float, high: float, rng=None) -> int:
    """Uniform integer in [ceil(low), floor(high)). `rng` only needs a random() method."""
    low = math.ceil(low)
    high = math.floor(high)
    r = (rng or _rng).random()
    return int(math.floor(r * (high - low))) + low


class RandomColorSource:
    """Each call draws r, g, b independently from 0..256."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def __call__(self) -> RGB:
        return (
            random_int(0, 257, self._rng),
            random_int(0, 257, self._rng),
            random_int(0, 257, self._rng),
        )


def cycle_colors(colors: Iterable[RGB]):
    it = itertools.cycle(list(colors))
    return lambda: next(it)


def rgb_css(color: RGB) -> str:
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def rgba_css(color: RGB, alpha: float) -> str:
    r, g, b = color
    return f"rgba({r}, {g}, {b}, {alpha})"
