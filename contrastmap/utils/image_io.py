"""
Image decode/encode helpers backed by Pillow.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

OUTPUT_FORMAT = "PNG"
OUTPUT_SUFFIX = ".png"


class ImageIOError(OSError):
    """Raised when an image cannot be decoded or encoded."""

    def __init__(self, path: PathLike, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def load_rgb(path: PathLike) -> np.ndarray:
    """
    Decode an image file into an (H, W, 3) uint8 RGB array.

    Alpha is discarded; palette and grayscale images are expanded to RGB.
    """

    try:
        with Image.open(path) as img:
            rgb = img.convert("RGB")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as exc:
        raise ImageIOError(path, f"cannot decode image ({exc})") from exc

    grid = np.asarray(rgb, dtype=np.uint8)
    logger.debug("Decoded %s: %dx%d", path, grid.shape[1], grid.shape[0])
    return grid


def save_gray(gray: np.ndarray, path: PathLike) -> Path:
    """
    Encode an (H, W) uint8 array as a single-channel PNG.

    The format is fixed regardless of the file extension so the stored levels
    are exactly the computed ones.
    """

    if gray.ndim != 2 or gray.dtype != np.uint8:
        raise ValueError(f"Expected H×W uint8 array, got shape {gray.shape} dtype {gray.dtype}")

    path = Path(path)
    try:
        Image.fromarray(gray).save(path, format=OUTPUT_FORMAT)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageIOError(path, f"cannot encode image ({exc})") from exc

    logger.debug("Encoded %s", path)
    return path


def output_path_for(input_path: PathLike, prefix: str, output_path: Optional[PathLike] = None) -> Path:
    """
    Destination of the contrast map for ``input_path``.

    Defaults to a sibling file whose name is ``prefix`` followed by the input
    file name. A suffix other than ``.png`` is replaced by ``.png``; names
    without a suffix are kept as they are.
    """

    if output_path is not None:
        return Path(output_path)
    source = Path(input_path)
    name = f"{prefix}{source.name}"
    if source.suffix and source.suffix.lower() != OUTPUT_SUFFIX:
        name = f"{prefix}{source.stem}{OUTPUT_SUFFIX}"
    return source.parent / name
