"""
Configuration primitives for contrastmap.

Defines the backend selection enum and a dataclass collecting the
configurable parameters of a run.
"""

import os
from dataclasses import dataclass
from enum import Enum


class Backend(Enum):
    """Evaluation strategy for the ratio map."""

    REFERENCE = "reference"    # Pixel-by-pixel loop with memoized luminance
    VECTORIZED = "vectorized"  # Whole-image numpy/scipy evaluation


@dataclass
class ContrastMapConfig:
    """
    Complete configuration for a contrast map run.

    The defaults reproduce the classic visualization: 8-neighborhood and
    ``contrast-ratio-`` prefixed output next to the input file.
    """

    radius: int = 1  # pixels
    backend: Backend = Backend.REFERENCE
    output_prefix: str = "contrast-ratio-"
    show_progress: bool = True

    def validate(self) -> None:
        """Validate configuration parameters."""

        if isinstance(self.radius, bool) or not isinstance(self.radius, int):
            raise ValueError(f"Radius must be an integer, got {self.radius!r}")

        if self.radius < 1:
            raise ValueError(f"Radius {self.radius} out of range [1, inf)")

        if not isinstance(self.backend, Backend):
            raise ValueError(f"Unknown backend: {self.backend!r}")

        if not self.output_prefix:
            raise ValueError("Output prefix must not be empty")

        separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
        if any(sep in self.output_prefix for sep in separators):
            raise ValueError(f"Output prefix {self.output_prefix!r} contains a path separator")
