#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/heatmap_generator.py
#
# Description:
# Signal strength heatmap generation for Signal Locate. Colorizes the
# normalized density field of the measurement samples into an RGB raster.
# -----------------------------------------------------------------------------

import time
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .data_models import Sample
from .density_field import compute_field
from .errors import InvalidDimensions
from .gradient import CATMULL_ROM, DEFAULT_COLORS, ColorStop, Gradient


def render(grid: np.ndarray, gradient: Optional[Gradient] = None) -> np.ndarray:
    """
    Map a normalized intensity grid to an RGB raster.

    Args:
        grid: 2D array of values in [0, 1]; values outside are clamped
        gradient: Gradient to use, a red-yellow-green gradient if None

    Returns:
        uint8 array of shape (height, width, 3)
    """
    if gradient is None:
        gradient = Gradient(DEFAULT_COLORS)

    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2:
        raise InvalidDimensions(f"Expected a 2D grid, got shape {grid.shape}")

    values = np.clip(np.nan_to_num(grid, nan=0.0), 0.0, 1.0)
    rgb = gradient.at(values)

    # Truncate, do not round, so output is reproducible bit for bit
    return np.floor(rgb * 255.0).astype(np.uint8)


def suggest_radius(image_width: int, point_count: int) -> int:
    """
    Pick a kernel radius from the image width and number of measurements.

    Fewer measurements get a wider kernel so the heatmap still covers the
    plan: radius = image_width * (1 / point_count + 0.05), truncated.
    """
    if point_count <= 0:
        raise ValueError("Cannot suggest a radius without any measurement points")
    return int(image_width * (1.0 / point_count + 0.05))


def generate_random_samples(count: int = 20, width: int = 1920, height: int = 1080,
                            rng: Optional[np.random.Generator] = None) -> List[Sample]:
    """
    Create random samples for a test heatmap.

    Coordinates are whole pixels inside the canvas, strengths are in [0, 100).
    """
    if rng is None:
        rng = np.random.default_rng()

    xs = rng.integers(0, width, size=count)
    ys = rng.integers(0, height, size=count)
    strengths = rng.uniform(0.0, 100.0, size=count)

    return [Sample(float(x), float(y), float(s)) for x, y, s in zip(xs, ys, strengths)]


class HeatmapGenerator:
    """
    Generates signal strength heatmaps for a room plan of a fixed size.

    Color scheme (default gradient, normalized strength):
    - Red: 0.0 (no signal relative to the strongest reading)
    - Yellow: 0.5
    - Green: 1.0 (strongest reading)
    """

    def __init__(self, width: int = 1920, height: int = 1080,
                 gradient_colors: Sequence[ColorStop] = DEFAULT_COLORS,
                 interpolation: str = CATMULL_ROM,
                 debug_mode: bool = False):
        """
        Initialize the heatmap generator.

        Args:
            width: Width of the heatmap in pixels (should match room plan)
            height: Height of the heatmap in pixels (should match room plan)
            gradient_colors: Color stops from weakest to strongest signal
            interpolation: Gradient interpolation, "catmull-rom" or "linear"
            debug_mode: Print timing information
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Heatmap dimensions must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        self.gradient_colors = tuple(gradient_colors)
        self.interpolation = interpolation
        self.debug_mode = debug_mode

        # Build once to fail early on bad colors; render() builds its own
        Gradient(self.gradient_colors, self.interpolation)

    def _make_gradient(self) -> Gradient:
        return Gradient(self.gradient_colors, self.interpolation)

    def generate_heatmap(self, samples: Sequence[Tuple[float, float, float]],
                         radius: float,
                         status_callback: Optional[Callable[[int], None]] = None) -> np.ndarray:
        """
        Generate a signal strength heatmap from pixel-space samples.

        Args:
            samples: (x, y, strength) samples in pixel coordinates
            radius: Kernel radius in pixels
            status_callback: Called with progress percentages (0-100)

        Returns:
            uint8 RGB raster of shape (height, width, 3)
        """
        start = time.perf_counter()
        samples = list(samples)

        if status_callback:
            status_callback(0)

        # Density takes the first 90% of the progress bar
        def field_callback(pct):
            if status_callback:
                status_callback(int(pct * 0.9))

        field = compute_field(samples, self.width, self.height, radius,
                              progress_callback=field_callback)
        if self.debug_mode:
            print(f"DEBUG: Density field for {len(samples)} samples "
                  f"(radius {radius}) took {time.perf_counter() - start:.3f}s")

        raster = render(field, self._make_gradient())

        if status_callback:
            status_callback(100)
        if self.debug_mode:
            print(f"DEBUG: Heatmap {self.width}x{self.height} "
                  f"generated in {time.perf_counter() - start:.3f}s")
        return raster

    def create_legend(self, width: int = 40, height: int = 300) -> np.ndarray:
        """
        Create a legend strip showing the signal strength color mapping.

        Strongest signal is at the top.

        Args:
            width: Legend width in pixels
            height: Legend height in pixels

        Returns:
            uint8 RGB raster of shape (height, width, 3)
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Legend dimensions must be positive, got {width}x{height}")

        column = np.linspace(1.0, 0.0, height)
        grid = np.repeat(column[:, np.newaxis], width, axis=1)
        return render(grid, self._make_gradient())
