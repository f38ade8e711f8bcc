"""
Composite module for layer blending.

This subpackage folds a stack of RGBA8 layers into one image with one of the
supported blend modes.

Key modules:

- :py:mod:`blendah.composite.composite`: Layer stack compositing
- :py:mod:`blendah.composite.blend`: Blend mode implementations

Example usage::

    from blendah import RasterImage
    from blendah.composite import composite

    layers = [RasterImage.open(name) for name in ('top.png', 'bottom.png')]
    image = composite(layers, mode='screen')
    image.save('output.png')

Blend operators can also be called pairwise::

    from blendah.composite.blend import multiply

    image = multiply(foreground, background)
"""

from blendah.composite.composite import Compositor, composite, composite_pil

__all__ = [
    "Compositor",
    "composite",
    "composite_pil",
]
