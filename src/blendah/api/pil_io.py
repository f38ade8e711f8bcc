"""
PIL IO module.

Pillow decodes and encodes image files. Every mode Pillow reads is converted
to 8-bit RGBA on the way in.
"""

import logging

from PIL import Image

logger = logging.getLogger(__name__)

RGBA_MODE = "RGBA"


def convert_to_rgba(image: Image.Image) -> Image.Image:
    """Convert a PIL image of any mode to 8-bit RGBA."""
    if not isinstance(image, Image.Image):
        raise TypeError(f"Expected PIL Image, got {type(image).__name__}")
    if image.mode == RGBA_MODE:
        return image
    logger.debug("Converting %s image to %s" % (image.mode, RGBA_MODE))
    return image.convert(RGBA_MODE)


def open_image(fp, **kwargs) -> Image.Image:
    """Open an image file as 8-bit RGBA."""
    with Image.open(fp, **kwargs) as image:
        if image.mode == RGBA_MODE:
            return image.copy()
        return convert_to_rgba(image)


def create_image(width: int, height: int, data: bytes) -> Image.Image:
    """Create a PIL RGBA image from a raw RGBA8 buffer."""
    return Image.frombytes(RGBA_MODE, (width, height), data)
