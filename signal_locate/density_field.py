#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/density_field.py
#
# Description:
# Gaussian density estimation over a pixel grid. Turns a sparse list of
# (x, y, strength) samples into a continuous intensity field and normalizes
# it to the [0, 1] range used for color lookup.
# -----------------------------------------------------------------------------

import math
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from .errors import InvalidDimensions, InvalidRadius

# Window half-size in units of radius. With sigma = radius / 2 this cuts the
# kernel off at six standard deviations.
WINDOW_FACTOR = 3


def _check_arguments(width, height, radius):
    if width <= 0 or height <= 0:
        raise InvalidDimensions(
            f"Grid dimensions must be positive, got {width}x{height}"
        )
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidRadius(f"Radius must be a positive number, got {radius}")


def _sample_window(px: float, py: float, reach: int,
                   width: int, height: int) -> Optional[Tuple[int, int, int, int]]:
    """
    Compute the inclusive cell bounds covered by a sample's truncation window.

    Returns:
        (x_min, x_max, y_min, y_max), or None when the window misses the grid
    """
    px_int = int(px)
    py_int = int(py)

    x_min = max(px_int - reach, 0)
    x_max = min(px_int + reach, width - 1)
    y_min = max(py_int - reach, 0)
    y_max = min(py_int + reach, height - 1)

    if x_min > x_max or y_min > y_max:
        return None
    return x_min, x_max, y_min, y_max


def _add_kernel(grid: np.ndarray, px: float, py: float, strength: float,
                sigma: float, x_min: int, x_max: int, y_min: int, y_max: int):
    """Add one sample's Gaussian contribution to a rectangular block of cells."""
    dx = np.arange(x_min, x_max + 1, dtype=np.float64) - px
    dy = np.arange(y_min, y_max + 1, dtype=np.float64) - py
    dist2 = dx[np.newaxis, :] * dx[np.newaxis, :] + dy[:, np.newaxis] * dy[:, np.newaxis]
    weight = np.exp(-dist2 / (2.0 * sigma * sigma))
    grid[y_min:y_max + 1, x_min:x_max + 1] += strength * weight


def accumulate_field(samples: Iterable[Tuple[float, float, float]],
                     width: int, height: int, radius: float,
                     windowed: bool = True,
                     progress_callback: Optional[Callable[[int], None]] = None) -> np.ndarray:
    """
    Accumulate the un-normalized intensity of all samples on a fresh grid.

    Args:
        samples: Iterable of (x, y, strength) in pixel coordinates
        width: Grid width in cells
        height: Grid height in cells
        radius: Kernel radius; sigma is radius / 2
        windowed: Only evaluate cells within 3 * radius of each sample.
            When False every cell is evaluated for every sample.
        progress_callback: Called with a percentage after each sample

    Returns:
        float64 array of shape (height, width)

    Raises:
        InvalidDimensions: If width or height is not positive
        InvalidRadius: If radius is not a positive finite number
        ValueError: If a sample coordinate or strength is not finite
    """
    _check_arguments(width, height, radius)
    width = int(width)
    height = int(height)

    sigma = radius / 2.0
    # A window wider than the grid clips to the same bounds
    reach = int(min(radius * WINDOW_FACTOR, max(width, height)))
    grid = np.zeros((height, width), dtype=np.float64)

    samples = list(samples)
    total = len(samples)

    for index, (px, py, strength) in enumerate(samples):
        px, py, strength = float(px), float(py), float(strength)
        if not (math.isfinite(px) and math.isfinite(py)):
            raise ValueError(f"Sample coordinates must be finite, got ({px}, {py})")
        if not math.isfinite(strength):
            raise ValueError(f"Sample strength must be finite, got {strength}")

        if windowed:
            bounds = _sample_window(px, py, reach, width, height)
        else:
            bounds = (0, width - 1, 0, height - 1)

        if bounds is not None:
            _add_kernel(grid, px, py, strength, sigma, *bounds)

        if progress_callback:
            progress_callback(int((index + 1) * 100 / total))

    return grid


def normalize_field(grid: np.ndarray) -> np.ndarray:
    """
    Rescale a grid to [0, 1] relative to its maximum.

    A maximum <= 0 (empty or all-negative field) is replaced by 1.0 so the
    result is all zeros instead of NaN. Values are clipped afterwards, which
    also removes any negative accumulation.
    """
    max_value = float(grid.max()) if grid.size else 0.0
    if not max_value > 0.0:
        max_value = 1.0
    return np.clip(grid / max_value, 0.0, 1.0)


def compute_field(samples: Iterable[Tuple[float, float, float]],
                  width: int, height: int, radius: float,
                  windowed: bool = True,
                  progress_callback: Optional[Callable[[int], None]] = None) -> np.ndarray:
    """
    Compute the normalized intensity field for a set of samples.

    Same arguments as accumulate_field(). The returned grid always has values
    in [0, 1]; an empty sample list yields all zeros.
    """
    grid = accumulate_field(samples, width, height, radius,
                            windowed=windowed, progress_callback=progress_callback)
    return normalize_field(grid)
