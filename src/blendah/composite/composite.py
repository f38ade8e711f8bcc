"""Layer stack compositing."""

import logging
from collections import deque
from collections.abc import Sized
from typing import Iterable, Iterator, Optional, Union

from PIL import Image

from blendah.api.raster_image import RasterImage
from blendah.composite.blend import BlendFunc, get_blend_func
from blendah.constants import BlendMode
from blendah.exceptions import InsufficientLayers

logger = logging.getLogger(__name__)


def composite(
    layers: Iterable[RasterImage],
    mode: Union[BlendMode, str] = BlendMode.ALPHA,
) -> RasterImage:
    """
    Blend a layer stack into a single image.

    The first layer is the topmost. The first two layers are blended as
    foreground and background, then every following layer is blended as the
    foreground against the running result::

        result = blend(layers[0], layers[1])
        result = blend(layers[2], result)
        ...

    `layers` is consumed: a :py:class:`collections.deque` is drained from the
    left, any other iterable is exhausted. Do not reuse it afterwards.
    A sized `layers` with fewer than two items is left untouched.

    Args:
        layers: Iterable of :py:class:`~blendah.api.raster_image.RasterImage`
        mode: Blend mode, a :py:class:`~blendah.constants.BlendMode` or its
            string value (default: ``"alpha"``)

    Returns:
        The composite as a new :py:class:`~blendah.api.raster_image.RasterImage`
        sized to the second layer.

    Raises:
        InsufficientLayers: fewer than two layers were given. No blending
            happens in that case.
        ValueError: `mode` is not a known blend mode.

    Examples:
        >>> from blendah import RasterImage, composite
        >>> top = RasterImage.open('top.png')
        >>> bottom = RasterImage.open('bottom.png')
        >>> image = composite([top, bottom], mode='multiply')
    """
    if isinstance(layers, Sized) and len(layers) < 2:
        raise InsufficientLayers(
            "At least 2 layers are required to composite, got %d" % len(layers)
        )
    compositor = Compositor(mode)
    for layer in _consume(layers):
        compositor.apply(layer)
    return compositor.finish()


def composite_pil(
    layers: Iterable[RasterImage],
    mode: Union[BlendMode, str] = BlendMode.ALPHA,
) -> Image.Image:
    """Blend a layer stack and return a PIL Image in RGBA mode."""
    return composite(layers, mode).topil()


def _consume(layers: Iterable[RasterImage]) -> Iterator[RasterImage]:
    if isinstance(layers, deque):
        while layers:
            yield layers.popleft()
    else:
        yield from layers


class Compositor(object):
    """Layer stack fold.

    Layers are applied from the top of the stack down.

    Example::

        compositor = Compositor(BlendMode.SCREEN)
        for layer in layers:
            compositor.apply(layer)
        image = compositor.finish()
    """

    def __init__(self, mode: Union[BlendMode, str] = BlendMode.ALPHA):
        self._blend_fn: BlendFunc = get_blend_func(mode)
        self._mode = BlendMode(mode)
        self._top: Optional[RasterImage] = None
        self._result: Optional[RasterImage] = None
        self._count = 0

    @property
    def mode(self) -> BlendMode:
        return self._mode

    @property
    def count(self) -> int:
        """Number of layers applied so far."""
        return self._count

    def apply(self, layer: RasterImage) -> None:
        if not isinstance(layer, RasterImage):
            raise TypeError(f"Expected RasterImage, got {type(layer).__name__}")
        self._count += 1
        logger.debug("Compositing layer %d %s (%s)" % (self._count, layer, self._mode))

        if self._count == 1:
            # The top layer waits for a background.
            self._top = layer
        elif self._count == 2:
            assert self._top is not None
            self._result = self._blend_fn(self._top, layer)
            self._top = None
        else:
            assert self._result is not None
            self._result = self._blend_fn(layer, self._result)

    def finish(self) -> RasterImage:
        if self._result is None:
            raise InsufficientLayers(
                "At least 2 layers are required to composite, got %d" % self._count
            )
        return self._result
