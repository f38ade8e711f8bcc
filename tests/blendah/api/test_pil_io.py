import logging

import pytest
from PIL import Image

from blendah.api import pil_io

logger = logging.getLogger(__name__)


@pytest.mark.parametrize("mode", ["1", "L", "LA", "P", "RGB", "RGBA", "CMYK"])
def test_convert_to_rgba(mode):
    image = pil_io.convert_to_rgba(Image.new(mode, (3, 2)))
    assert image.mode == "RGBA"
    assert image.size == (3, 2)


def test_convert_to_rgba_type_error():
    with pytest.raises(TypeError):
        pil_io.convert_to_rgba(b"\x00\x00\x00\x00")


def test_open_image(tmp_path):
    filepath = str(tmp_path / "gray.png")
    Image.new("L", (2, 2), 42).save(filepath)
    image = pil_io.open_image(filepath)
    assert image.mode == "RGBA"
    assert image.getpixel((0, 0)) == (42, 42, 42, 255)


def test_create_image():
    image = pil_io.create_image(1, 1, b"\x01\x02\x03\x04")
    assert image.getpixel((0, 0)) == (1, 2, 3, 4)
