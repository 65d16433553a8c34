"""Shared WCAG 2.0 luminance constants."""

from __future__ import annotations

from typing import Dict

# Largest value of an 8-bit channel; samples are normalized by this.
CHANNEL_MAX: int = 255

# sRGB linearization breakpoint as published in WCAG 2.0 (not the 0.04045
# of IEC 61966-2-1).
LINEAR_THRESHOLD: float = 0.03928
LINEAR_SLOPE: float = 12.92
GAMMA_OFFSET: float = 0.055
GAMMA_SCALE: float = 1.055
GAMMA_EXPONENT: float = 2.4

# Rec. 709 luminance weights used by the WCAG relative luminance definition.
LUMINANCE_WEIGHTS: Dict[str, float] = {
    "R": 0.2126,
    "G": 0.7152,
    "B": 0.0722,
}

# Flare term added to both luminances of a contrast ratio.
CONTRAST_FLARE: float = 0.05

MIN_CONTRAST_RATIO: float = 1.0
MAX_CONTRAST_RATIO: float = 21.0
