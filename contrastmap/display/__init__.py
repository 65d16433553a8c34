"""Output encoding of contrast ratios."""

from contrastmap.display.gray_mapping import GrayMapper, OutOfRangeError

__all__ = [
    "GrayMapper",
    "OutOfRangeError",
]
