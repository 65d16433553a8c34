"""
Basic usage examples for contrastmap.
"""

from __future__ import annotations

import numpy as np

from contrastmap import Backend, ContrastMapConfig, ContrastMapper, contrast_map


def example_simple() -> np.ndarray:
    """Map a synthetic image with the default configuration."""

    img = np.full((64, 64, 3), 255, dtype=np.uint8)
    img[24:40, 8:56] = (118, 118, 118)  # gray text bar on white
    mapper = ContrastMapper()
    gray = mapper.process(img)
    print(f"Simple example output range: [{gray.min()}, {gray.max()}]")
    return gray


def example_vectorized() -> np.ndarray:
    """Use the whole-image backend with a wider neighborhood."""

    img = np.random.randint(0, 256, size=(256, 256, 3), dtype=np.uint8)
    config = ContrastMapConfig(radius=2, backend=Backend.VECTORIZED)
    gray = ContrastMapper(config).process(img)
    print(f"Vectorized example mean level: {gray.mean():0.1f}")
    return gray


def example_convenience_function() -> np.ndarray:
    """Map with the high-level convenience wrapper."""

    img = np.zeros((32, 32, 3), dtype=np.uint8)
    img[:, 16:] = 255
    gray = contrast_map(img, backend=Backend.VECTORIZED)
    print(f"Edge column levels: {gray[0, 15]}, {gray[0, 16]}")
    return gray


if __name__ == "__main__":
    print("Running contrastmap basic examples...")
    example_simple()
    example_vectorized()
    example_convenience_function()
