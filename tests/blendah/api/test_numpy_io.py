import logging

import numpy as np
import pytest

from blendah import RasterImage
from blendah.api import numpy_io

logger = logging.getLogger(__name__)


def test_quantize():
    values = np.array([0.5, 1.5, 2.5, 2.6, -3.0, 300.0, np.nan, np.inf])
    assert numpy_io.quantize(values).tolist() == [0, 2, 2, 3, 0, 255, 0, 255]
    assert numpy_io.quantize(values).dtype == np.uint8


@pytest.mark.parametrize(
    "data",
    [b"\x01\x02\x03\x04", bytearray(b"\x01\x02\x03\x04"), [1, 2, 3, 4], np.array([[1, 2], [3, 4]])],
)
def test_to_buffer(data):
    buffer = numpy_io.to_buffer(data)
    assert buffer.dtype == np.uint8
    assert buffer.tolist() == [1, 2, 3, 4]
    assert not buffer.flags.writeable


def test_to_buffer_rounds_floats():
    data = np.array([1.9, 2.5, 254.99, 0.7])
    assert numpy_io.to_buffer(data).tolist() == [2, 2, 255, 1]
    assert RasterImage(1, 1, data).tobytes() == b"\x02\x02\xff\x01"


@pytest.mark.parametrize("data", [[1, 2, 3, 256], [-1.0, 0, 0, 0], [np.nan, 0, 0, 0]])
def test_to_buffer_invalid(data):
    with pytest.raises(ValueError):
        numpy_io.to_buffer(data)


def test_get_pixels():
    buffer = numpy_io.to_buffer(bytes(range(12)))
    pixels = numpy_io.get_pixels(buffer, 2)
    assert pixels.dtype == np.float64
    assert pixels.tolist() == [[0, 1, 2, 3], [4, 5, 6, 7]]
