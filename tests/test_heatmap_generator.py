"""
Tests for heatmap rendering and the HeatmapGenerator wrapper.
"""
import numpy as np
import pytest

from signal_locate.density_field import compute_field
from signal_locate.errors import InvalidColor, InvalidDimensions
from signal_locate.gradient import Gradient
from signal_locate.heatmap_generator import (HeatmapGenerator, generate_random_samples,
                                             render, suggest_radius)

RED_PIXEL = [255, 0, 0]


def _pixel_at(value, gradient=None):
    if gradient is None:
        gradient = Gradient()
    return np.floor(gradient.at(value) * 255.0).astype(np.uint8)


def test_render_zero_grid_is_gradient_start():
    raster = render(compute_field([], 7, 5, 3))

    assert raster.shape == (5, 7, 3)
    assert raster.dtype == np.uint8
    assert np.all(raster == RED_PIXEL)


def test_render_truncates_channels():
    gradient = Gradient(["black", "white"], interpolation="linear")
    raster = render(np.array([[0.5, 1.0]]), gradient)

    # 0.5 * 255 = 127.5 is truncated, not rounded
    np.testing.assert_array_equal(raster[0, 0], [127, 127, 127])
    np.testing.assert_array_equal(raster[0, 1], [255, 255, 255])


def test_render_clamps_out_of_range_values():
    grid = np.array([[-1.0, 0.0], [1.0, 2.5]])
    raster = render(grid)

    np.testing.assert_array_equal(raster[0, 0], raster[0, 1])
    np.testing.assert_array_equal(raster[1, 0], raster[1, 1])
    np.testing.assert_array_equal(raster[1, 1], _pixel_at(1.0))


def test_render_matches_gradient_lookup(rng):
    grid = rng.uniform(0.0, 1.0, size=(6, 9))
    gradient = Gradient(["navy", "orange", "white"])

    raster = render(grid, gradient)

    expected = np.floor(gradient.at(grid) * 255.0).astype(np.uint8)
    np.testing.assert_array_equal(raster, expected)


def test_render_rejects_non_2d_grid():
    with pytest.raises(InvalidDimensions):
        render(np.zeros((3, 3, 3)))


def test_generate_heatmap_peak_color():
    generator = HeatmapGenerator(40, 30)
    raster = generator.generate_heatmap([(10, 12, 0.8)], radius=4)

    assert raster.shape == (30, 40, 3)
    np.testing.assert_array_equal(raster[12, 10], _pixel_at(1.0))
    np.testing.assert_array_equal(raster[29, 39], RED_PIXEL)


def test_generate_heatmap_without_samples():
    generator = HeatmapGenerator(16, 8)
    raster = generator.generate_heatmap([], radius=5)
    assert np.all(raster == RED_PIXEL)


def test_generate_heatmap_reports_progress():
    reported = []
    generator = HeatmapGenerator(20, 20)
    generator.generate_heatmap([(5, 5, 1), (15, 15, 1)], radius=2, status_callback=reported.append)

    assert reported[0] == 0
    assert reported[-1] == 100
    assert reported == sorted(reported)


def test_generate_heatmap_debug_output(capsys):
    generator = HeatmapGenerator(10, 10, debug_mode=True)
    generator.generate_heatmap([(5, 5, 1)], radius=2)
    assert "DEBUG:" in capsys.readouterr().out


def test_generator_uses_configured_gradient():
    generator = HeatmapGenerator(10, 10, gradient_colors=["blue", "white"], interpolation="linear")
    raster = generator.generate_heatmap([(5, 5, 1)], radius=1)

    np.testing.assert_array_equal(raster[5, 5], [255, 255, 255])
    np.testing.assert_array_equal(raster[0, 0], [0, 0, 255])


def test_generator_rejects_bad_configuration():
    with pytest.raises(InvalidDimensions):
        HeatmapGenerator(0, 10)
    with pytest.raises(InvalidColor):
        HeatmapGenerator(10, 10, gradient_colors=["red", "nope"])


def test_create_legend():
    generator = HeatmapGenerator(10, 10)
    legend = generator.create_legend(width=12, height=50)

    assert legend.shape == (50, 12, 3)
    np.testing.assert_array_equal(legend[0, 0], _pixel_at(1.0))
    np.testing.assert_array_equal(legend[-1, -1], RED_PIXEL)
    # Every column is the same
    assert np.all(legend == legend[:, :1, :])


def test_suggest_radius():
    assert suggest_radius(1920, 20) == 192
    assert suggest_radius(1000, 1) == 1050
    assert suggest_radius(1000, 4) == 300


def test_suggest_radius_needs_points():
    with pytest.raises(ValueError):
        suggest_radius(1920, 0)


def test_generate_random_samples():
    samples = generate_random_samples(50, 64, 32, np.random.default_rng(7))

    assert len(samples) == 50
    for x, y, strength in samples:
        assert 0 <= x < 64 and x == int(x)
        assert 0 <= y < 32 and y == int(y)
        assert 0.0 <= strength < 100.0

    again = generate_random_samples(50, 64, 32, np.random.default_rng(7))
    assert samples == again
