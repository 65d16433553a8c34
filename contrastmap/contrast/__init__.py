"""Neighborhood contrast ratio engines."""

from contrastmap.contrast.ratio import ContrastEngine, contrast_ratio, neighborhood
from contrastmap.contrast.vectorized import VectorizedContrastEngine

__all__ = [
    "ContrastEngine",
    "VectorizedContrastEngine",
    "contrast_ratio",
    "neighborhood",
]
