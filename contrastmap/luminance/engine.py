"""
WCAG 2.0 relative luminance with per-instance memoization.

Reference: https://www.w3.org/TR/WCAG20/#relativeluminancedef
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from contrastmap.luminance.constants import (
    CHANNEL_MAX,
    GAMMA_EXPONENT,
    GAMMA_OFFSET,
    GAMMA_SCALE,
    LINEAR_SLOPE,
    LINEAR_THRESHOLD,
    LUMINANCE_WEIGHTS,
)

logger = logging.getLogger(__name__)

Color = Sequence[int]


class LuminanceEngine:
    """
    Linearize gamma-encoded channel samples.

    Results are cached by the exact sample value. Samples derived from 8-bit
    channels take at most 256 distinct values, so the cache is left unbounded.
    """

    def __init__(self) -> None:
        self.cache: Dict[float, float] = {}

    def luminance(self, sample: float) -> float:
        """
        Linearized contribution of one normalized channel sample.

        Parameters
        ----------
        sample : float
            Gamma-encoded channel value in [0, 1]. Values outside the range
            are not validated and follow the same formula.
        """

        cached = self.cache.get(sample)
        if cached is not None:
            return cached

        if sample <= LINEAR_THRESHOLD:
            value = sample / LINEAR_SLOPE
        else:
            value = ((sample + GAMMA_OFFSET) / GAMMA_SCALE) ** GAMMA_EXPONENT

        self.cache[sample] = value
        return value

    def cache_info(self) -> int:
        return len(self.cache)


class RelativeLuminanceCalculator:
    """
    Relative luminance of 8-bit sRGB colors.

    Colors are ``(r, g, b)`` or ``(r, g, b, a)`` sequences of integers in
    [0, 255]; alpha is ignored and never part of the cache key.
    """

    def __init__(self, engine: Optional[LuminanceEngine] = None) -> None:
        self.engine = engine or LuminanceEngine()
        self.cache: Dict[Tuple[int, int, int], float] = {}
        self._table: Optional[np.ndarray] = None

    def relative_luminance(self, color: Color) -> float:
        key = (int(color[0]), int(color[1]), int(color[2]))
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        r = self.engine.luminance(key[0] / CHANNEL_MAX)
        g = self.engine.luminance(key[1] / CHANNEL_MAX)
        b = self.engine.luminance(key[2] / CHANNEL_MAX)
        value = LUMINANCE_WEIGHTS["R"] * r + LUMINANCE_WEIGHTS["G"] * g + LUMINANCE_WEIGHTS["B"] * b

        self.cache[key] = value
        return value

    def luminance_table(self) -> np.ndarray:
        """
        Lookup table of linearized contributions for every 8-bit value.

        The table is filled through :attr:`engine`, so indexing it yields the
        same floats as :meth:`relative_luminance` computes channel by channel.
        """

        if self._table is None:
            self._table = np.array(
                [self.engine.luminance(value / CHANNEL_MAX) for value in range(CHANNEL_MAX + 1)],
                dtype=np.float64,
            )
            logger.debug("Built luminance table (%d engine entries)", self.engine.cache_info())
        return self._table

    def relative_luminance_map(self, grid: np.ndarray) -> np.ndarray:
        """
        Relative luminance of every pixel of an ``(H, W, 3)`` uint8 grid.
        """

        table = self.luminance_table()
        return (
            LUMINANCE_WEIGHTS["R"] * table[grid[:, :, 0]]
            + LUMINANCE_WEIGHTS["G"] * table[grid[:, :, 1]]
            + LUMINANCE_WEIGHTS["B"] * table[grid[:, :, 2]]
        )

    def cache_info(self) -> int:
        return len(self.cache)
