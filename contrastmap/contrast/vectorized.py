"""
Whole-image evaluation of the neighborhood contrast ratio.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from scipy.ndimage import correlate

from contrastmap.luminance.constants import CONTRAST_FLARE, MIN_CONTRAST_RATIO
from contrastmap.luminance.engine import RelativeLuminanceCalculator

logger = logging.getLogger(__name__)


def neighborhood_kernel(radius: int) -> np.ndarray:
    """Square ones-kernel of side ``2 * radius + 1`` with a zero center."""

    size = 2 * radius + 1
    kernel = np.ones((size, size), dtype=np.int64)
    kernel[radius, radius] = 0
    return kernel


class VectorizedContrastEngine:
    """
    Array counterpart of :class:`contrastmap.contrast.ratio.ContrastEngine`.

    Neighbor sums are exact integer correlations and luminances come from the
    calculator's lookup table, so every ratio is bit-identical to the
    per-pixel computation.
    """

    def __init__(self, calculator: Optional[RelativeLuminanceCalculator] = None) -> None:
        self.calculator = calculator or RelativeLuminanceCalculator()

    def neighbor_counts(self, shape: tuple, radius: int) -> np.ndarray:
        """Number of in-bounds neighbors of every pixel."""

        ones = np.ones(shape[:2], dtype=np.int64)
        return correlate(ones, neighborhood_kernel(radius), mode="constant", cval=0)

    def average_colors(self, grid: np.ndarray, radius: int) -> np.ndarray:
        """
        Truncated mean neighborhood color of every pixel, shape (H, W, 3).

        Pixels without neighbors get a zero color; callers must mask them
        using :meth:`neighbor_counts`.
        """

        kernel = neighborhood_kernel(radius)
        counts = self.neighbor_counts(grid.shape, radius)
        safe_counts = np.where(counts > 0, counts, 1)

        averaged = np.zeros(grid.shape[:2] + (3,), dtype=np.int64)
        for channel in range(3):
            sums = correlate(
                grid[:, :, channel].astype(np.int64), kernel, mode="constant", cval=0
            )
            averaged[:, :, channel] = sums // safe_counts
        averaged[counts == 0] = 0
        return averaged

    def ratio_map(self, grid: np.ndarray, radius: int) -> np.ndarray:
        """
        Contrast ratio of every pixel against its neighborhood mean.

        Parameters
        ----------
        grid : np.ndarray
            uint8 RGB pixels, shape (H, W, 3)
        radius : int
            Neighborhood radius (>= 1)
        """

        counts = self.neighbor_counts(grid.shape, radius)
        pixel_lum = self.calculator.relative_luminance_map(grid)
        mean_lum = self.calculator.relative_luminance_map(self.average_colors(grid, radius))

        lighter = np.maximum(pixel_lum, mean_lum)
        darker = np.minimum(pixel_lum, mean_lum)
        ratios = (lighter + CONTRAST_FLARE) / (darker + CONTRAST_FLARE)
        ratios[counts == 0] = MIN_CONTRAST_RATIO

        logger.debug("Computed ratio map for %dx%d grid", grid.shape[1], grid.shape[0])
        return ratios
