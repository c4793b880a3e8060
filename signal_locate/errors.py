#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/errors.py
#
# Description:
# Exception types raised by heatmap generation, compositing and image I/O.
# -----------------------------------------------------------------------------


class HeatmapError(Exception):
    """Base class for all heatmap errors."""
    pass


class InvalidDimensions(HeatmapError, ValueError):
    """Raised when a grid width or height is not positive."""
    pass


class InvalidRadius(HeatmapError, ValueError):
    """Raised when the kernel radius is not a positive finite number."""
    pass


class DimensionMismatch(HeatmapError, ValueError):
    """
    Raised when two rasters that must share a size do not.

    Attributes:
        base_shape: Shape of the base raster
        heatmap_shape: Shape of the heatmap raster
    """

    def __init__(self, base_shape, heatmap_shape):
        self.base_shape = tuple(base_shape)
        self.heatmap_shape = tuple(heatmap_shape)
        super().__init__(
            f"Base image shape {self.base_shape} does not match "
            f"heatmap shape {self.heatmap_shape}"
        )


class EmptyGradient(HeatmapError, ValueError):
    """Raised when a gradient is built without any color stops."""
    pass


class InvalidColor(HeatmapError, ValueError):
    """Raised when a gradient color stop cannot be parsed."""
    pass


class ImageIOError(HeatmapError):
    """Exception raised when an image cannot be loaded or saved."""
    pass
