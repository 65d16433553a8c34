"""
WCAG contrast ratio between a pixel and the mean color of its neighborhood.

Reference: https://www.w3.org/TR/WCAG20/#contrast-ratiodef
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from contrastmap.luminance.constants import CONTRAST_FLARE, MIN_CONTRAST_RATIO
from contrastmap.luminance.engine import Color, RelativeLuminanceCalculator

Point = Tuple[int, int]


def contrast_ratio(l1: float, l2: float) -> float:
    """Contrast ratio of two relative luminances, lighter one on top."""

    if l1 > l2:
        return (l1 + CONTRAST_FLARE) / (l2 + CONTRAST_FLARE)
    return (l2 + CONTRAST_FLARE) / (l1 + CONTRAST_FLARE)


def neighborhood(point: Point, radius: int, width: int, height: int) -> List[Point]:
    """
    In-bounds points of the square ring around ``point``.

    The point itself is excluded. Offsets are enumerated with ``dx`` in the
    outer loop.
    """

    x, y = point
    points: List[Point] = []
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                points.append((nx, ny))
    return points


class ContrastEngine:
    """
    Per-pixel contrast computation on an ``(H, W, 3)`` uint8 grid.

    Points are ``(x, y)`` pairs addressing ``grid[y, x]``.
    """

    def __init__(self, calculator: Optional[RelativeLuminanceCalculator] = None) -> None:
        self.calculator = calculator or RelativeLuminanceCalculator()

    def contrast_ratio(self, color1: Color, color2: Color) -> float:
        return contrast_ratio(
            self.calculator.relative_luminance(color1),
            self.calculator.relative_luminance(color2),
        )

    def average_color(self, grid: np.ndarray, points: List[Point]) -> Tuple[int, int, int]:
        """
        Channel-wise mean of the colors at ``points``.

        Each channel is summed as an integer and divided with truncation, so
        the result is again an 8-bit color.
        """

        r_sum = g_sum = b_sum = 0
        for px, py in points:
            pixel = grid[py, px]
            r_sum += int(pixel[0])
            g_sum += int(pixel[1])
            b_sum += int(pixel[2])

        count = len(points)
        return r_sum // count, g_sum // count, b_sum // count

    def average_contrast_ratio(self, radius: int, grid: np.ndarray, point: Point) -> float:
        """
        Contrast ratio between ``point`` and the mean color of its neighborhood.

        A pixel without neighbors (a 1x1 grid) is compared with itself and
        yields exactly 1.
        """

        height, width = grid.shape[:2]
        points = neighborhood(point, radius, width, height)
        if not points:
            return MIN_CONTRAST_RATIO

        x, y = point
        return self.contrast_ratio(grid[y, x], self.average_color(grid, points))
