"""
Main contrast map pipeline.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from tqdm import tqdm

from contrastmap.contrast.ratio import ContrastEngine
from contrastmap.contrast.vectorized import VectorizedContrastEngine
from contrastmap.core.config import Backend, ContrastMapConfig
from contrastmap.display.gray_mapping import GrayMapper
from contrastmap.luminance.engine import LuminanceEngine, RelativeLuminanceCalculator
from contrastmap.utils.image_io import load_rgb, output_path_for, save_gray

logger = logging.getLogger(__name__)


class ContrastMapper:
    """
    Local contrast visualization of an RGB image.

    Pipeline stages:
        1. Channel linearization (memoized per sample)
        2. Relative luminance (memoized per color)
        3. Contrast ratio against the neighborhood mean color
        4. Fourth-root mapping of the ratio onto a gray level

    Each instance owns its luminance caches, so independent mappers never
    share state.
    """

    def __init__(self, config: Optional[ContrastMapConfig] = None) -> None:
        self.config = config or ContrastMapConfig()
        self.config.validate()

        logger.info("Initializing contrast mapper")
        logger.info("  Radius: %d", self.config.radius)
        logger.info("  Backend: %s", self.config.backend.value)

        self._init_components()

    def _init_components(self) -> None:
        self.luminance_engine = LuminanceEngine()
        self.calculator = RelativeLuminanceCalculator(self.luminance_engine)
        self.contrast = ContrastEngine(self.calculator)
        self.vectorized = VectorizedContrastEngine(self.calculator)
        self.gray_mapper = GrayMapper()

    def process(self, img: np.ndarray) -> np.ndarray:
        """
        Compute the gray contrast map of an 8-bit image.

        Parameters
        ----------
        img : np.ndarray
            uint8 pixels, shape (H, W, 3) or (H, W, 4); alpha is ignored.

        Returns
        -------
        np.ndarray
            uint8 gray levels, shape (H, W)
        """

        # Input validation
        if img.ndim != 3 or img.shape[2] not in (3, 4):
            raise ValueError(f"Expected H×W×3 or H×W×4 image, got shape {img.shape}")
        if img.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {img.dtype}")
        if img.shape[0] == 0 or img.shape[1] == 0:
            raise ValueError(f"Image has no pixels: shape {img.shape}")

        grid = np.ascontiguousarray(img[:, :, :3])
        logger.info("Processing image: %dx%d", grid.shape[1], grid.shape[0])

        if self.config.backend == Backend.VECTORIZED:
            gray = self._process_vectorized(grid)
        else:
            gray = self._process_reference(grid)

        logger.info(
            "Processing complete. Output range: [%d, %d]",
            int(gray.min()),
            int(gray.max()),
        )
        logger.debug(
            "Cache sizes: %d samples, %d colors",
            self.luminance_engine.cache_info(),
            self.calculator.cache_info(),
        )
        return gray

    def process_file(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """
        Decode ``input_path``, compute its contrast map and encode the result.

        Returns the path written, by default a sibling of the input named with
        the configured prefix.
        """

        src = load_rgb(input_path)
        gray = self.process(src)
        destination = output_path_for(input_path, self.config.output_prefix, output_path)
        save_gray(gray, destination)
        logger.info("Wrote contrast map to %s", destination)
        return destination

    # ------------------------------------------------------------------
    # Backends
    # ------------------------------------------------------------------

    def _process_reference(self, grid: np.ndarray) -> np.ndarray:
        logger.debug("Reference backend: per-pixel loop")

        height, width = grid.shape[:2]
        gray = np.zeros((height, width), dtype=np.uint8)
        radius = self.config.radius

        with tqdm(
            total=width * height,
            desc="Contrast map",
            unit="px",
            disable=not self.config.show_progress,
        ) as bar:
            for x in range(width):
                for y in range(height):
                    ratio = self.contrast.average_contrast_ratio(radius, grid, (x, y))
                    gray[y, x] = self.gray_mapper.to_gray(ratio)
                bar.update(height)

        return gray

    def _process_vectorized(self, grid: np.ndarray) -> np.ndarray:
        logger.debug("Vectorized backend: whole-image evaluation")

        ratios = self.vectorized.ratio_map(grid, self.config.radius)
        return self.gray_mapper.map_array(ratios)


def contrast_map(
    img: np.ndarray,
    radius: int = 1,
    backend: Backend = Backend.REFERENCE,
    show_progress: bool = False,
) -> np.ndarray:
    """
    Convenience wrapper for a one-off contrast map.
    """

    config = ContrastMapConfig(
        radius=radius,
        backend=backend,
        show_progress=show_progress,
    )

    mapper = ContrastMapper(config)
    return mapper.process(img)
