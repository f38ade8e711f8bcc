"""
blendah: Python package for blending stacks of RGBA raster layers.

Basic usage::

    from blendah import BlendMode, RasterImage, composite

    layers = [RasterImage.open(name) for name in ('top.png', 'middle.png', 'bottom.png')]
    image = composite(layers, mode=BlendMode.MULTIPLY)
    image.save('output.png')

Architecture:

- :py:mod:`blendah.vector`: Numeric vector type for per-pixel math
- :py:mod:`blendah.api`: Raster image type, colors, and Pillow/NumPy IO
- :py:mod:`blendah.composite`: Blend operators and layer stack compositing
"""

from blendah.api.raster_image import RasterImage
from blendah.composite import composite
from blendah.constants import BlendMode
from blendah.version import __version__

__all__ = ["BlendMode", "RasterImage", "composite", "__version__"]
