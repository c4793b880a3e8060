#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/compositor.py
#
# Description:
# Blends a generated heatmap over a room plan image of the same size.
# -----------------------------------------------------------------------------

import math

import numpy as np

from .errors import DimensionMismatch

DEFAULT_BASE_WEIGHT = 0.40
DEFAULT_HEATMAP_WEIGHT = 0.60


def overlay(base: np.ndarray, heatmap: np.ndarray,
            base_weight: float = DEFAULT_BASE_WEIGHT,
            heatmap_weight: float = DEFAULT_HEATMAP_WEIGHT) -> np.ndarray:
    """
    Blend two RGB rasters pixel by pixel.

    Each output channel is floor(base * base_weight + heatmap * heatmap_weight),
    saturated to 0-255. The weights do not have to add up to 1.0. Neither
    input is modified.

    Args:
        base: Room plan raster, uint8 array of shape (height, width, 3)
        heatmap: Heatmap raster with exactly the same shape
        base_weight: Weight of the room plan
        heatmap_weight: Weight of the heatmap

    Returns:
        New uint8 raster with the blended image

    Raises:
        DimensionMismatch: If the two rasters differ in size or channel count.
            Callers must crop or resize beforehand.
        ValueError: If a weight is not a finite number
    """
    base = np.asarray(base)
    heatmap = np.asarray(heatmap)

    if base.shape != heatmap.shape:
        raise DimensionMismatch(base.shape, heatmap.shape)
    if not (math.isfinite(base_weight) and math.isfinite(heatmap_weight)):
        raise ValueError(f"Blend weights must be finite, got {base_weight} and {heatmap_weight}")

    blended = base.astype(np.float64) * base_weight + heatmap.astype(np.float64) * heatmap_weight
    return np.clip(np.floor(blended), 0, 255).astype(np.uint8)
