"""Local contrast visualization (contrastmap).

Per-pixel WCAG contrast ratio between each pixel and the mean color of its
neighborhood, rendered as a grayscale image.
"""

from contrastmap.contrast import ContrastEngine, VectorizedContrastEngine, contrast_ratio
from contrastmap.core.config import Backend, ContrastMapConfig
from contrastmap.core.pipeline import ContrastMapper, contrast_map
from contrastmap.display import GrayMapper, OutOfRangeError
from contrastmap.luminance import LuminanceEngine, RelativeLuminanceCalculator
from contrastmap.utils.image_io import ImageIOError

__all__ = [
    "Backend",
    "ContrastEngine",
    "ContrastMapConfig",
    "ContrastMapper",
    "GrayMapper",
    "ImageIOError",
    "LuminanceEngine",
    "OutOfRangeError",
    "RelativeLuminanceCalculator",
    "VectorizedContrastEngine",
    "contrast_map",
    "contrast_ratio",
]

__version__ = "1.0.0"
