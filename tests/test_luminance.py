"""
Tests for channel and relative luminance calculators.
"""

from __future__ import annotations

import numpy as np

from contrastmap.luminance import LuminanceEngine, RelativeLuminanceCalculator


def test_linear_segment_below_threshold() -> None:
    engine = LuminanceEngine()
    assert engine.luminance(0.0) == 0.0
    assert engine.luminance(0.03) == 0.03 / 12.92
    assert engine.luminance(0.03928) == 0.03928 / 12.92


def test_gamma_segment_above_threshold() -> None:
    engine = LuminanceEngine()
    assert engine.luminance(1.0) == 1.0
    assert engine.luminance(0.5) == ((0.5 + 0.055) / 1.055) ** 2.4


def test_luminance_is_memoized() -> None:
    engine = LuminanceEngine()
    first = engine.luminance(0.5)
    second = engine.luminance(0.5)
    assert first is second
    assert engine.cache_info() == 1


def test_luminance_monotonic_over_8bit_samples() -> None:
    engine = LuminanceEngine()
    values = [engine.luminance(v / 255) for v in range(256)]
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert values[0] == 0.0
    assert values[-1] == 1.0


def test_relative_luminance_extremes() -> None:
    calc = RelativeLuminanceCalculator()
    assert calc.relative_luminance((0, 0, 0)) == 0.0
    assert calc.relative_luminance((255, 255, 255)) == 1.0
    assert np.isclose(calc.relative_luminance((255, 0, 0)), 0.2126)
    assert np.isclose(calc.relative_luminance((0, 255, 0)), 0.7152)
    assert np.isclose(calc.relative_luminance((0, 0, 255)), 0.0722)


def test_relative_luminance_ignores_alpha() -> None:
    calc = RelativeLuminanceCalculator()
    opaque = calc.relative_luminance((255, 0, 0, 255))
    translucent = calc.relative_luminance((255, 0, 0, 1))
    assert opaque == translucent
    assert calc.cache_info() == 1


def test_relative_luminance_cached_value_is_identical() -> None:
    calc = RelativeLuminanceCalculator()
    color = (12, 200, 77)
    first = calc.relative_luminance(color)
    assert calc.relative_luminance(color) is first
    assert calc.relative_luminance(np.array(color, dtype=np.uint8)) is first


def test_relative_luminance_monotonic_per_channel() -> None:
    calc = RelativeLuminanceCalculator()
    for fixed in [(0, 0), (128, 64), (255, 255)]:
        for channel in range(3):
            values = []
            for v in range(256):
                color = list(fixed)
                color.insert(channel, v)
                values.append(calc.relative_luminance(color))
            assert all(a <= b for a, b in zip(values, values[1:]))


def test_fresh_calculators_do_not_share_caches() -> None:
    calc_a = RelativeLuminanceCalculator()
    calc_b = RelativeLuminanceCalculator()
    calc_a.relative_luminance((1, 2, 3))
    assert calc_a.cache_info() == 1
    assert calc_b.cache_info() == 0
    assert calc_b.engine.cache_info() == 0


def test_luminance_table_matches_engine() -> None:
    calc = RelativeLuminanceCalculator()
    table = calc.luminance_table()
    assert table.shape == (256,)
    for v in (0, 10, 11, 128, 255):
        assert table[v] == calc.engine.luminance(v / 255)


def test_relative_luminance_map_matches_scalar() -> None:
    rng = np.random.default_rng(0)
    grid = rng.integers(0, 256, size=(6, 9, 3), dtype=np.uint8)
    calc = RelativeLuminanceCalculator()
    lum = calc.relative_luminance_map(grid)
    assert lum.shape == (6, 9)
    for y in range(6):
        for x in range(9):
            assert lum[y, x] == calc.relative_luminance(grid[y, x])
