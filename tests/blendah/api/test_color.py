import logging

import pytest

from blendah.api.color import RGB, RGBA, parse_color

logger = logging.getLogger(__name__)


def test_rgb_byte_scale():
    color = RGB(255, 51, 0)
    assert color.r == pytest.approx(1.0)
    assert color.g == pytest.approx(0.2)
    assert color.b == pytest.approx(0.0)
    assert color.to_bytes() == (255, 51, 0)
    assert color.to_rgba8() == (255, 51, 0, 255)


def test_rgb_unit_scale():
    color = RGB(1.0, 0.5, 0.0)
    assert color.g == 0.5
    assert color.to_bytes() == (255, 128, 0)


def test_normalization_threshold():
    # An L1 norm equal to the channel count still reads as the 0-1 scale.
    assert RGB(1, 1, 1).to_bytes() == (255, 255, 255)
    assert RGB(2, 1, 1).to_bytes() == (2, 1, 1)
    assert RGBA(1, 1, 1, 1).a == 1.0


def test_rgba():
    color = RGBA(0, 0, 255, 255)
    assert color.a == pytest.approx(1.0)
    assert color.to_rgba8() == (0, 0, 255, 255)


@pytest.mark.parametrize("cls, values", [(RGB, (1, 2)), (RGBA, (1, 2, 3))])
def test_component_count(cls, values):
    with pytest.raises(TypeError):
        cls(*values)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("255,255,255", RGB(1.0, 1.0, 1.0)),
        ("0.5, 0.5, 0.5, 1", RGBA(0.5, 0.5, 0.5, 1.0)),
        ("0,0,0,0", RGBA(0, 0, 0, 0)),
    ],
)
def test_parse_color(text, expected):
    assert parse_color(text) == expected


@pytest.mark.parametrize("text", ["", "red", "1,2", "1,2,3,4,5"])
def test_parse_color_invalid(text):
    with pytest.raises(ValueError):
        parse_color(text)
