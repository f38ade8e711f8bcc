"""Pytest configuration for blendah tests."""

from typing import Callable, Sequence

import pytest

from blendah import RasterImage


def create_image(*pixels: Sequence[int], width: int = 0, height: int = 1) -> RasterImage:
    """Build a raster image from RGBA pixel tuples, one row by default."""
    if not width:
        width = len(pixels) // height if height else 0
    data = bytes(value for pixel in pixels for value in pixel)
    return RasterImage.frombytes(width, height, data)


@pytest.fixture
def make_image() -> Callable[..., RasterImage]:
    return create_image
