"""
Tests for the contrast map pipeline.
"""

from __future__ import annotations

import numpy as np
import pytest

from contrastmap import (
    Backend,
    ContrastMapConfig,
    ContrastMapper,
    GrayMapper,
    contrast_map,
)

BACKENDS = [Backend.REFERENCE, Backend.VECTORIZED]


def _mapper(backend: Backend = Backend.REFERENCE, radius: int = 1) -> ContrastMapper:
    return ContrastMapper(ContrastMapConfig(radius=radius, backend=backend, show_progress=False))


@pytest.mark.parametrize("backend", BACKENDS)
def test_black_center_scenario(backend: Backend) -> None:
    img = np.full((3, 3, 3), 255, dtype=np.uint8)
    img[1, 1] = 0
    gray = _mapper(backend).process(img)

    assert gray.shape == (3, 3)
    assert gray.dtype == np.uint8
    assert gray[1, 1] == GrayMapper().to_gray(21) == 255
    border = np.ones((3, 3), dtype=bool)
    border[1, 1] = False
    assert (gray[border] > 0).all()
    assert (gray[border] < 255).all()


@pytest.mark.parametrize("backend", BACKENDS)
@pytest.mark.parametrize("shape", [(3, 3), (4, 7), (10, 5)])
def test_uniform_image_is_black(backend: Backend, shape) -> None:
    img = np.empty(shape + (3,), dtype=np.uint8)
    img[...] = (200, 30, 90)
    gray = _mapper(backend).process(img)
    assert gray.shape == shape
    assert not gray.any()


@pytest.mark.parametrize("backend", BACKENDS)
def test_single_pixel_image(backend: Backend) -> None:
    img = np.array([[[255, 0, 0]]], dtype=np.uint8)
    gray = _mapper(backend).process(img)
    np.testing.assert_array_equal(gray, np.array([[0]], dtype=np.uint8))


@pytest.mark.parametrize("radius", [1, 3])
def test_backends_agree(radius: int) -> None:
    rng = np.random.default_rng(42)
    img = rng.integers(0, 256, size=(12, 9, 3), dtype=np.uint8)
    reference = _mapper(Backend.REFERENCE, radius).process(img)
    vectorized = _mapper(Backend.VECTORIZED, radius).process(img)
    np.testing.assert_array_equal(reference, vectorized)


def test_alpha_channel_is_ignored() -> None:
    rng = np.random.default_rng(3)
    rgb = rng.integers(0, 256, size=(5, 6, 3), dtype=np.uint8)
    alpha = rng.integers(0, 256, size=(5, 6, 1), dtype=np.uint8)
    rgba = np.concatenate([rgb, alpha], axis=2)
    mapper = _mapper()
    np.testing.assert_array_equal(mapper.process(rgba), mapper.process(rgb))


def test_reference_backend_fills_caches() -> None:
    mapper = _mapper()
    img = np.zeros((3, 3, 3), dtype=np.uint8)
    img[0, 0] = (255, 255, 255)
    mapper.process(img)
    assert mapper.calculator.cache_info() > 0
    assert mapper.luminance_engine.cache_info() > 0
    assert mapper.contrast.calculator is mapper.calculator
    assert mapper.vectorized.calculator is mapper.calculator


def test_mappers_own_separate_caches() -> None:
    first = _mapper()
    second = _mapper()
    first.process(np.zeros((3, 3, 3), dtype=np.uint8))
    assert second.calculator.cache_info() == 0


@pytest.mark.parametrize(
    "img",
    [
        np.zeros((4, 4), dtype=np.uint8),
        np.zeros((4, 4, 2), dtype=np.uint8),
        np.zeros((4, 4, 3), dtype=np.float64),
        np.zeros((0, 4, 3), dtype=np.uint8),
    ],
)
def test_invalid_input_raises(img: np.ndarray) -> None:
    with pytest.raises(ValueError):
        _mapper().process(img)


def test_contrast_map_helper() -> None:
    img = np.full((4, 4, 3), 255, dtype=np.uint8)
    img[2, 2] = 0
    gray = contrast_map(img, radius=1, backend=Backend.VECTORIZED)
    assert gray.shape == (4, 4)
    assert gray[2, 2] == 255


def test_valid_config() -> None:
    config = ContrastMapConfig(radius=2, backend=Backend.VECTORIZED)
    config.validate()


@pytest.mark.parametrize("radius", [0, -1, 1.5, True])
def test_invalid_radius(radius) -> None:
    with pytest.raises(ValueError):
        ContrastMapConfig(radius=radius).validate()


@pytest.mark.parametrize("prefix", ["", "out/", "a/b-"])
def test_invalid_prefix(prefix: str) -> None:
    with pytest.raises(ValueError):
        ContrastMapConfig(output_prefix=prefix).validate()


def test_invalid_backend() -> None:
    with pytest.raises(ValueError):
        ContrastMapConfig(backend="fast").validate()


def test_mapper_validates_config() -> None:
    with pytest.raises(ValueError):
        ContrastMapper(ContrastMapConfig(radius=0))
