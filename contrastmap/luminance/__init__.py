"""Channel and relative luminance calculators."""

from contrastmap.luminance.engine import LuminanceEngine, RelativeLuminanceCalculator

__all__ = [
    "LuminanceEngine",
    "RelativeLuminanceCalculator",
]
