"""
Blend mode implementations.

Each operator takes a foreground and a background
:py:class:`~blendah.api.raster_image.RasterImage` and returns a new image the
size of the background. The pixel formulas are written as kernels over
:py:class:`~blendah.vector.NumericVector` batches, one RGBA vector per
pixel, with ``Cs`` the foreground (source) and ``Cb`` the background
(backdrop) pixels as raw 0-255 floats.

Pixels are paired by flat index. When the foreground holds fewer pixels than
the background, blending stops at the end of the foreground and the remaining
output pixels stay transparent black.
"""

import functools
import logging
from typing import Callable, Union

import numpy as np

from blendah.api import numpy_io
from blendah.api.raster_image import RasterImage
from blendah.composite import utils
from blendah.constants import CHANNELS, MAX_VALUE, BlendMode
from blendah.registry import new_registry
from blendah.vector import NumericVector, add, subtract

logger = logging.getLogger(__name__)

BlendFunc = Callable[[RasterImage, RasterImage], RasterImage]
Kernel = Callable[[NumericVector, NumericVector], NumericVector]

BLEND_FUNC, register = new_registry(attribute="blend_mode")
"""Blend function table."""


def pixelwise(kernel: Kernel) -> BlendFunc:
    """Wrap a pixel kernel into an operator over raster images."""

    @functools.wraps(kernel)
    def _blend_fn(foreground: RasterImage, background: RasterImage) -> RasterImage:
        for image in (foreground, background):
            if not isinstance(image, RasterImage):
                raise TypeError(f"Expected RasterImage, got {type(image).__name__}")

        count = utils.overlap(foreground, background)
        if count < background.pixel_count:
            logger.debug(
                "Foreground exhausted after %d of %d pixels"
                % (count, background.pixel_count)
            )

        output = np.zeros((background.pixel_count, CHANNELS), dtype=np.uint8)
        if count > 0:
            Cs = NumericVector(numpy_io.get_pixels(foreground.buffer, count))
            Cb = NumericVector(numpy_io.get_pixels(background.buffer, count))
            output[:count] = numpy_io.quantize(kernel(Cs, Cb).elements)
        return RasterImage(background.width, background.height, output)

    return _blend_fn


def _split(C: NumericVector) -> tuple[NumericVector, np.ndarray]:
    """Split RGBA pixels into an RGB vector batch and an alpha column."""
    return NumericVector(C.elements[..., :3]), C.elements[..., 3:]


def _merge(color: NumericVector, alpha: np.ndarray) -> NumericVector:
    return NumericVector(np.concatenate((color.elements, alpha), axis=-1))


def _mix(
    blended: NumericVector, color_b: NumericVector, alpha_s: np.ndarray
) -> NumericVector:
    """Weigh the blend result by the foreground alpha over the background."""
    return blended.scalar_multiply(alpha_s).add(color_b.scalar_multiply(1.0 - alpha_s))


@register(BlendMode.ADDITIVE)
@pixelwise
def additive(Cs: NumericVector, Cb: NumericVector) -> NumericVector:
    """Sum of all four channels, alpha included."""
    return add(Cs, Cb)


@register(BlendMode.MULTIPLY)
@pixelwise
def multiply(Cs: NumericVector, Cb: NumericVector) -> NumericVector:
    color_s, alpha_s = _split(Cs)
    color_b, alpha_b = _split(Cb)
    alpha_s, alpha_b = alpha_s / MAX_VALUE, alpha_b / MAX_VALUE

    product = color_s.multiply(color_b).scalar_multiply(1.0 / MAX_VALUE)
    blended = _mix(product, color_b, alpha_s)
    return _merge(blended, utils.union(alpha_b, alpha_s) * MAX_VALUE)


@register(BlendMode.SCREEN)
@pixelwise
def screen(Cs: NumericVector, Cb: NumericVector) -> NumericVector:
    color_s, alpha_s = _split(Cs)
    color_b, alpha_b = _split(Cb)
    color_s = color_s.scalar_multiply(1.0 / MAX_VALUE)
    color_b = color_b.scalar_multiply(1.0 / MAX_VALUE)
    alpha_s, alpha_b = alpha_s / MAX_VALUE, alpha_b / MAX_VALUE

    one = NumericVector([1.0, 1.0, 1.0])
    inverse = subtract(one, color_s).multiply(subtract(one, color_b))
    blended = _mix(subtract(one, inverse), color_b, alpha_s)
    return _merge(
        blended.scalar_multiply(MAX_VALUE), utils.union(alpha_b, alpha_s) * MAX_VALUE
    )


@register(BlendMode.DIFFERENCE)
@pixelwise
def difference(Cs: NumericVector, Cb: NumericVector) -> NumericVector:
    color_s, alpha_s = _split(Cs)
    color_b, alpha_b = _split(Cb)
    alpha_s, alpha_b = alpha_s / MAX_VALUE, alpha_b / MAX_VALUE

    blended = _mix(color_s.subtract(color_b).abs(), color_b, alpha_s)
    return _merge(blended, utils.union(alpha_b, alpha_s) * MAX_VALUE)


@register(BlendMode.ALPHA)
@pixelwise
def alpha(Cs: NumericVector, Cb: NumericVector) -> NumericVector:
    """
    Alpha compositing of the foreground over the background.

    .. note:: The alpha values enter the formula on the raw 0-255 scale,
        unlike the other modes which normalize them to 0-1 first. Opaque or
        partially transparent layers therefore produce out-of-range values
        that are clamped when stored.
    """
    color_s, alpha_s = _split(Cs)
    color_b, alpha_b = _split(Cb)

    alpha_out = utils.union(alpha_b, alpha_s)
    weighted = color_s.scalar_multiply(alpha_s).add(
        color_b.scalar_multiply((1.0 - alpha_s) * alpha_b)
    )
    color = NumericVector(utils.divide(weighted.elements, alpha_out))
    result = _merge(color, alpha_out)
    # Zero alpha passes the background pixel through.
    return NumericVector(np.where(alpha_out == 0, Cb.elements, result.elements))


def get_blend_func(mode: Union[BlendMode, str]) -> BlendFunc:
    """
    Look up the operator for a blend mode.

    :param mode: :py:class:`~blendah.constants.BlendMode` or its string value,
        e.g. ``"multiply"``.
    :raise ValueError: for unknown modes.
    """
    try:
        key = BlendMode(mode)
    except ValueError:
        raise ValueError(
            "Invalid blend mode: %r, expected one of %s"
            % (mode, ", ".join(m.value for m in BlendMode))
        ) from None
    return BLEND_FUNC[key]
