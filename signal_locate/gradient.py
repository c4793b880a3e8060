#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/gradient.py
#
# Description:
# Color gradients used to colorize normalized signal intensity. Color stops
# are spaced evenly over [0, 1] and blended with a Catmull-Rom spline or
# linearly.
# -----------------------------------------------------------------------------

from typing import Sequence, Tuple, Union

import numpy as np
from PyQt5.QtGui import QColor
from scipy.interpolate import CubicHermiteSpline

from .errors import EmptyGradient, InvalidColor

ColorStop = Union[str, Tuple[int, int, int]]

# Weak signal is red, strong signal is green
DEFAULT_COLORS = ("red", "yellow", "green")

CATMULL_ROM = "catmull-rom"
LINEAR = "linear"
INTERPOLATION_MODES = (CATMULL_ROM, LINEAR)


def parse_color(color: ColorStop) -> Tuple[float, float, float]:
    """
    Convert a color stop to floating point RGB in [0, 1].

    Args:
        color: SVG/HTML color name ("red"), hex string ("#ff8800"),
            or an (r, g, b) tuple with 0-255 channels

    Returns:
        (r, g, b) tuple of floats

    Raises:
        InvalidColor: If the color cannot be interpreted
    """
    if isinstance(color, str):
        qcolor = QColor(color.strip())
        if not qcolor.isValid():
            raise InvalidColor(f"Unknown color name: {color!r}")
        return qcolor.redF(), qcolor.greenF(), qcolor.blueF()

    try:
        channels = [int(c) for c in color]
    except (TypeError, ValueError):
        raise InvalidColor(f"Color must be a name or an (r, g, b) tuple, got {color!r}")

    if len(channels) != 3 or any(c < 0 or c > 255 for c in channels):
        raise InvalidColor(f"RGB color channels must be three values in 0-255, got {color!r}")
    return tuple(c / 255.0 for c in channels)


class Gradient:
    """
    Continuous mapping from [0, 1] to an RGB color.

    A Gradient is an immutable value: build one per render and discard it.
    """

    def __init__(self, colors: Sequence[ColorStop] = DEFAULT_COLORS,
                 interpolation: str = CATMULL_ROM):
        """
        Build a gradient from ordered color stops.

        Args:
            colors: Color stops, first stop at 0.0 and last at 1.0
            interpolation: "catmull-rom" (smooth) or "linear"

        Raises:
            EmptyGradient: If no color stops are given
            InvalidColor: If a color stop cannot be parsed
            ValueError: If the interpolation mode is unknown
        """
        colors = list(colors)
        if not colors:
            raise EmptyGradient("A gradient needs at least one color stop")
        if interpolation not in INTERPOLATION_MODES:
            raise ValueError(
                f"Unknown interpolation {interpolation!r}, expected one of {INTERPOLATION_MODES}"
            )

        self.colors = tuple(colors)
        self.interpolation = interpolation
        self._stops = np.array([parse_color(c) for c in colors], dtype=np.float64)
        self._positions = np.linspace(0.0, 1.0, len(colors))
        self._spline = None

        if interpolation == CATMULL_ROM and len(colors) > 1:
            self._spline = CubicHermiteSpline(
                self._positions, self._stops, self._catmull_rom_tangents(), axis=0
            )

    def _catmull_rom_tangents(self) -> np.ndarray:
        """Tangent at each stop: central differences inside, one-sided at the ends."""
        t = self._positions
        p = self._stops
        tangents = np.empty_like(p)
        tangents[0] = (p[1] - p[0]) / (t[1] - t[0])
        tangents[-1] = (p[-1] - p[-2]) / (t[-1] - t[-2])
        if len(t) > 2:
            tangents[1:-1] = (p[2:] - p[:-2]) / (t[2:] - t[:-2])[:, np.newaxis]
        return tangents

    def at(self, values) -> np.ndarray:
        """
        Evaluate the gradient.

        Args:
            values: Scalar or array of positions; clamped to [0, 1]

        Returns:
            Array with an extra trailing axis of 3 RGB floats in [0, 1]
        """
        values = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)

        if len(self._stops) == 1:
            return np.broadcast_to(self._stops[0], values.shape + (3,)).copy()

        if self._spline is not None:
            rgb = self._spline(values)
        else:
            rgb = np.stack(
                [np.interp(values, self._positions, self._stops[:, c]) for c in range(3)],
                axis=-1,
            )
        # Catmull-Rom overshoots between stops with sharp turns
        return np.clip(rgb, 0.0, 1.0)

    def __len__(self):
        return len(self._stops)

    def __repr__(self):
        return f"Gradient(colors={list(self.colors)!r}, interpolation={self.interpolation!r})"
