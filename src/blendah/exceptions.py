"""
Exceptions raised by blendah.
"""


class Error(Exception):
    """Base class of blendah errors."""


class DimensionMismatch(Error, ValueError):
    """Elementwise vector operation on vectors of different lengths."""


class InsufficientLayers(Error):
    """Fewer than two layers were given to the layer compositor."""


class InvalidImageBuffer(Error, ValueError):
    """Raster buffer length does not match ``width * height * 4``."""
