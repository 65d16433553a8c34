"""
Mapping of contrast ratios onto 8-bit gray levels.
"""

from __future__ import annotations

import math

import numpy as np

from contrastmap.luminance.constants import MAX_CONTRAST_RATIO, MIN_CONTRAST_RATIO


class OutOfRangeError(ValueError):
    """Raised when a contrast ratio falls outside [1, 21]."""


class GrayMapper:
    """
    Fourth-root power curve from [1, 21] to [0, 255].

    The curve expands low ratios so that weak local contrast remains visible.
    Ratios outside the valid range are rejected, never clamped.
    """

    exponent: float = 1.0 / 4.0
    max_level: int = 255

    def to_gray(self, ratio: float) -> int:
        if not ratio >= MIN_CONTRAST_RATIO:
            raise OutOfRangeError(f"Contrast ratio {ratio} is below {MIN_CONTRAST_RATIO:g}")
        if ratio > MAX_CONTRAST_RATIO:
            raise OutOfRangeError(f"Contrast ratio {ratio} exceeds {MAX_CONTRAST_RATIO:g}")

        span = MAX_CONTRAST_RATIO - MIN_CONTRAST_RATIO
        level = ((ratio - MIN_CONTRAST_RATIO) / span) ** self.exponent * self.max_level
        return int(math.floor(level))

    def map_array(self, ratios: np.ndarray) -> np.ndarray:
        """
        Apply :meth:`to_gray` to every element of ``ratios``.

        Each distinct ratio is mapped once; the result has dtype uint8 and the
        shape of ``ratios``.
        """

        ratios = np.asarray(ratios, dtype=np.float64)
        unique, inverse = np.unique(ratios, return_inverse=True)
        levels = np.array([self.to_gray(float(ratio)) for ratio in unique], dtype=np.uint8)
        return levels[inverse].reshape(ratios.shape)
