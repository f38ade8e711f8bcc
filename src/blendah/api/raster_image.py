"""
Raster image module.

:py:class:`RasterImage` is the unit exchanged between the blend operators: a
width, a height, and a flat RGBA8 buffer. Pixel ``i`` occupies bytes
``[4 * i, 4 * i + 4)`` in R, G, B, A order.

Example usage::

    from blendah import RasterImage

    # Load any format Pillow can decode, converted to RGBA8
    image = RasterImage.open('layer.png')
    print(f"Size: {image.width}x{image.height}")

    # Build images in memory
    red = RasterImage.new(2, 2, color=(255, 0, 0, 255))
    raw = RasterImage.frombytes(1, 1, b'\\x10\\x20\\x30\\x40')

    # Hand the pixels to a display surface
    image.topil().show()
"""

import logging
import os
from typing import Any, BinaryIO, Optional, Sequence, Union

try:
    from typing import Self  # type: ignore[attr-defined]
except ImportError:
    from typing_extensions import Self

import numpy as np
from attrs import define, field
from PIL import Image

from blendah.api import numpy_io, pil_io
from blendah.api.color import RGB, RGBA
from blendah.constants import CHANNELS
from blendah.exceptions import InvalidImageBuffer
from blendah.validators import range_
from blendah.vector import NumericVector

logger = logging.getLogger(__name__)

#: Largest accepted width or height.
MAX_SIZE = 300000


@define(eq=False, frozen=True, repr=False)
class RasterImage:
    """
    RGBA8 raster image.

    The buffer is copied on construction and stored read-only, so images can
    be shared between blend calls without being modified.

    .. py:attribute:: width

        Width in pixels.

    .. py:attribute:: height

        Height in pixels.

    .. py:attribute:: buffer

        Flat ``uint8`` array of length ``width * height * 4``.
    """

    width: int = field(converter=int, validator=range_(0, MAX_SIZE))
    height: int = field(converter=int, validator=range_(0, MAX_SIZE))
    buffer: np.ndarray = field(converter=numpy_io.to_buffer)

    @buffer.validator
    def _validate_buffer(self, attribute: Any, value: np.ndarray) -> None:
        expected = self.width * self.height * CHANNELS
        if value.size != expected:
            raise InvalidImageBuffer(
                "Buffer length %d does not match %dx%d RGBA image (%d bytes)"
                % (value.size, self.width, self.height, expected)
            )

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        color: Union[RGB, RGBA, Sequence[int], None] = None,
    ) -> Self:
        """
        Create a new image.

        :param width: Width in pixels.
        :param height: Height in pixels.
        :param color: Fill color, either an :py:class:`~blendah.api.color.RGB`
            / :py:class:`~blendah.api.color.RGBA` or four byte values. Default
            is transparent black.
        :return: A :py:class:`RasterImage` object.
        """
        if color is None:
            value: Sequence[int] = (0, 0, 0, 0)
        elif isinstance(color, (RGB, RGBA)):
            value = color.to_rgba8()
        else:
            value = tuple(color)
            if len(value) != CHANNELS:
                raise ValueError(f"Expected 4 color components, got {value!r}")
        array = np.empty((int(height), int(width), CHANNELS), dtype=np.uint8)
        array[:, :] = value
        return cls(width, height, array)

    @classmethod
    def frombytes(cls, width: int, height: int, data: bytes) -> Self:
        """Create an image from a raw RGBA8 buffer."""
        return cls(width, height, data)

    @classmethod
    def fromarray(cls, array: np.ndarray) -> Self:
        """
        Create an image from a ``(height, width, 4)`` array.

        ``uint8`` arrays are taken as is, float arrays are scaled from 0-1.
        """
        width, height, buffer = numpy_io.from_array(array)
        return cls(width, height, buffer)

    @classmethod
    def frompil(cls, image: Image.Image) -> Self:
        """Create an image from a PIL Image of any mode."""
        image = pil_io.convert_to_rgba(image)
        return cls(image.width, image.height, image.tobytes())

    @classmethod
    def open(cls, fp: Union[BinaryIO, str, bytes, os.PathLike], **kwargs: Any) -> Self:
        """
        Open an image file.

        :param fp: filename or file-like object.
        :return: A :py:class:`RasterImage` object.
        """
        logger.debug("Opening %s" % (fp,))
        return cls.frompil(pil_io.open_image(fp, **kwargs))

    def save(
        self,
        fp: Union[BinaryIO, str, bytes, os.PathLike],
        format: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """
        Save the image through Pillow.

        :param fp: filename or file-like object.
        :param format: Pillow format name. Inferred from the file name if
            omitted.
        """
        self.topil().save(fp, format=format, **kwargs)

    def topil(self) -> Image.Image:
        """Get a PIL Image in RGBA mode."""
        return pil_io.create_image(self.width, self.height, self.tobytes())

    def tobytes(self) -> bytes:
        return self.buffer.tobytes()

    def numpy(self) -> np.ndarray:
        """
        Get NumPy array of the image.

        :return: read-only ``uint8`` array of shape ``(height, width, 4)``.
        """
        return numpy_io.to_array(self.buffer, self.width, self.height)

    def pixels(self) -> np.ndarray:
        """Read-only ``uint8`` array of shape ``(width * height, 4)``."""
        return self.buffer.reshape((self.pixel_count, CHANNELS))

    def pixel(self, index: int) -> NumericVector:
        """Pixel `index` as an RGBA vector of byte values."""
        if not 0 <= index < self.pixel_count:
            raise IndexError(f"Pixel index out of range: {index}")
        start = index * CHANNELS
        return NumericVector(self.buffer[start : start + CHANNELS])

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterImage):
            return NotImplemented
        return self.size == other.size and bool(
            np.array_equal(self.buffer, other.buffer)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(size=%dx%d)" % (self.__class__.__name__, self.width, self.height)

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text(self.__repr__())
            return
        with p.group(2, "{name}(".format(name=self.__class__.__name__), ")"):
            p.breakable("")
            p.text("size=%dx%d," % self.size)
            p.breakable()
            p.text("pixels=")
            p.pretty(self.pixels()[:4].tolist())
            if self.pixel_count > 4:
                p.text("...")
            p.breakable("")
