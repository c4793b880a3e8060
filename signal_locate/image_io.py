#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# -----------------------------------------------------------------------------
# Signal Locate
#
# signal_locate/image_io.py
#
# Description:
# Conversion between RGB rasters (numpy arrays) and QImage, and loading and
# saving of room plans and heatmaps through Qt's image plugins.
# -----------------------------------------------------------------------------

import os

import numpy as np
from PyQt5.QtGui import QImage

from .errors import ImageIOError


def raster_to_qimage(raster: np.ndarray) -> QImage:
    """
    Convert an RGB raster to a QImage that owns its pixel data.

    Args:
        raster: uint8 array of shape (height, width, 3)

    Returns:
        QImage in Format_RGB888
    """
    raster = np.ascontiguousarray(raster, dtype=np.uint8)
    if raster.ndim != 3 or raster.shape[2] != 3:
        raise ValueError(f"Expected an RGB raster of shape (height, width, 3), got {raster.shape}")

    height, width = raster.shape[:2]
    image = QImage(raster.tobytes(), width, height, width * 3, QImage.Format_RGB888)
    # QImage only borrows the buffer; copy so it outlives the array
    return image.copy()


def qimage_to_raster(image: QImage) -> np.ndarray:
    """
    Convert a QImage of any format to an RGB raster.

    Alpha is dropped, as for a room plan only the visible color matters.
    """
    if image.isNull():
        raise ImageIOError("Cannot convert a null image")

    image = image.convertToFormat(QImage.Format_RGB888)
    width = image.width()
    height = image.height()
    bytes_per_line = image.bytesPerLine()

    ptr = image.constBits()
    ptr.setsize(height * bytes_per_line)
    # Rows are padded to 32-bit boundaries
    buffer = np.frombuffer(ptr, dtype=np.uint8).reshape(height, bytes_per_line)
    return buffer[:, :width * 3].reshape(height, width, 3).copy()


def load_raster(file_path: str) -> np.ndarray:
    """
    Load an image file as an RGB raster.

    Raises:
        ImageIOError: If the file does not exist or cannot be decoded
    """
    if not os.path.exists(file_path):
        raise ImageIOError(f"Image file '{file_path}' not found")

    image = QImage(file_path)
    if image.isNull():
        raise ImageIOError(f"Failed to load image '{file_path}'")
    return qimage_to_raster(image)


def save_raster(raster: np.ndarray, file_path: str) -> None:
    """
    Save an RGB raster. The format follows the file extension.

    Raises:
        ImageIOError: If the image could not be written
    """
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    if not raster_to_qimage(raster).save(file_path):
        raise ImageIOError(f"Failed to save image '{file_path}'")
