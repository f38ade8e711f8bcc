"""
NumPy IO module.

Conversions between RGBA8 buffers and NumPy arrays.
"""

import logging
from typing import Any

import numpy as np

from blendah.constants import CHANNELS, MAX_VALUE

logger = logging.getLogger(__name__)


def to_buffer(data: Any) -> np.ndarray:
    """
    Copy `data` into a flat, read-only ``uint8`` array.

    Float values are stored with the same rounding as blend results.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        array = np.frombuffer(data, dtype=np.uint8).copy()
    else:
        array = np.asarray(data)
        if array.dtype != np.uint8:
            if not np.all(np.isfinite(array)):
                raise ValueError("Buffer values must be finite")
            if np.any(array < 0) or np.any(array > MAX_VALUE):
                raise ValueError("Buffer values must be in range [0, 255]")
            if np.issubdtype(array.dtype, np.integer):
                array = array.astype(np.uint8)
            else:
                array = quantize(array)
        array = array.reshape(-1).copy()
    array.flags.writeable = False
    return array


def quantize(values: np.ndarray) -> np.ndarray:
    """
    Store float channel values as bytes.

    Values are rounded to the nearest integer, ties to even, and clamped to
    [0, 255]. NaN is stored as 0.
    """
    values = np.nan_to_num(values, nan=0.0, posinf=MAX_VALUE, neginf=0.0)
    return np.clip(np.rint(values), 0, MAX_VALUE).astype(np.uint8)


def get_pixels(buffer: np.ndarray, count: int) -> np.ndarray:
    """First `count` pixels of a buffer as a ``(count, 4)`` float array."""
    return buffer[: count * CHANNELS].reshape((count, CHANNELS)).astype(np.float64)


def to_array(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """View a flat buffer as a ``(height, width, 4)`` array."""
    return buffer.reshape((height, width, CHANNELS))


def from_array(array: np.ndarray) -> tuple:
    """
    Split a ``(height, width, 4)`` array into ``(width, height, buffer)``.

    Float arrays are taken to be in the 0-1 range, as in composite results.
    """
    array = np.asarray(array)
    if array.ndim != 3 or array.shape[2] != CHANNELS:
        raise ValueError(
            f"Expected array of shape (height, width, 4), got {array.shape}"
        )
    if np.issubdtype(array.dtype, np.floating):
        array = quantize(array * MAX_VALUE)
    height, width = array.shape[:2]
    return width, height, to_buffer(array)
