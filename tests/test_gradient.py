"""
Tests for color gradients.
"""
import numpy as np
import pytest

from signal_locate.errors import EmptyGradient, InvalidColor
from signal_locate.gradient import Gradient, parse_color

RED = (1.0, 0.0, 0.0)
YELLOW = (1.0, 1.0, 0.0)
GREEN = (0.0, 128 / 255, 0.0)


def test_parse_color_names_hex_and_tuples():
    assert parse_color("red") == pytest.approx(RED)
    assert parse_color("#00ff00") == pytest.approx((0.0, 1.0, 0.0))
    assert parse_color((0, 0, 255)) == pytest.approx((0.0, 0.0, 1.0))


@pytest.mark.parametrize("color", ["not-a-color", (300, 0, 0), (1, 2), "#zzzzzz", 42])
def test_parse_color_rejects_bad_input(color):
    with pytest.raises(InvalidColor):
        parse_color(color)


def test_empty_gradient_rejected_at_construction():
    with pytest.raises(EmptyGradient):
        Gradient([])


def test_bad_color_rejected_at_construction():
    with pytest.raises(InvalidColor):
        Gradient(["red", "blurple"])


def test_unknown_interpolation_rejected():
    with pytest.raises(ValueError):
        Gradient(["red", "green"], interpolation="cubic-ish")


@pytest.mark.parametrize("interpolation", ["catmull-rom", "linear"])
def test_default_gradient_hits_its_stops(interpolation):
    gradient = Gradient(interpolation=interpolation)

    np.testing.assert_allclose(gradient.at(0.0), RED, atol=1e-12)
    np.testing.assert_allclose(gradient.at(0.5), YELLOW, atol=1e-12)
    np.testing.assert_allclose(gradient.at(1.0), GREEN, atol=1e-12)


def test_input_is_clamped():
    gradient = Gradient()
    np.testing.assert_array_equal(gradient.at(-3.0), gradient.at(0.0))
    np.testing.assert_array_equal(gradient.at(7.5), gradient.at(1.0))


def test_output_shape_follows_input():
    gradient = Gradient()
    assert gradient.at(0.3).shape == (3,)
    assert gradient.at(np.zeros((4, 5))).shape == (4, 5, 3)


def test_output_within_unit_range():
    # Sharp turns make the spline overshoot before clipping
    gradient = Gradient(["black", "white", "black", "white"])
    rgb = gradient.at(np.linspace(0.0, 1.0, 501))
    assert rgb.min() >= 0.0
    assert rgb.max() <= 1.0


def test_catmull_rom_is_continuous():
    gradient = Gradient(["blue", "cyan", "yellow", "red"])
    rgb = gradient.at(np.linspace(0.0, 1.0, 2001))
    assert np.abs(np.diff(rgb, axis=0)).max() < 0.01


def test_evaluation_is_deterministic():
    values = np.linspace(0.0, 1.0, 97)
    first = Gradient().at(values)
    second = Gradient().at(values)
    np.testing.assert_array_equal(first, second)
    np.testing.assert_array_equal(first, Gradient().at(values))


def test_linear_midpoint():
    gradient = Gradient(["red", "yellow", "green"], interpolation="linear")
    np.testing.assert_allclose(gradient.at(0.25), (1.0, 0.5, 0.0))


def test_single_stop_is_constant():
    gradient = Gradient([(10, 20, 30)])
    rgb = gradient.at(np.linspace(0.0, 1.0, 5))
    np.testing.assert_allclose(rgb, np.tile((10 / 255, 20 / 255, 30 / 255), (5, 1)))
    assert len(gradient) == 1


def test_two_stops_blend_linearly():
    gradient = Gradient(["black", "white"])
    np.testing.assert_allclose(gradient.at(0.25), (0.25, 0.25, 0.25), atol=1e-12)
