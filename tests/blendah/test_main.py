import logging

import pytest
from PIL import Image

from blendah import RasterImage
from blendah.__main__ import main
from blendah.version import __version__

logger = logging.getLogger(__name__)


@pytest.fixture
def layer_files(tmp_path):
    top = tmp_path / "top.png"
    bottom = tmp_path / "bottom.png"
    Image.new("RGBA", (2, 2), (10, 20, 30, 40)).save(str(top))
    Image.new("RGB", (2, 2), (5, 5, 5)).save(str(bottom))
    return [str(top), str(bottom)]


def test_composite(layer_files, tmp_path):
    output = str(tmp_path / "output.png")
    assert main(["composite", "additive"] + layer_files + ["-o", output]) is None
    image = RasterImage.open(output)
    assert image.size == (2, 2)
    assert image.pixels().tolist() == [[15, 25, 35, 255]] * 4


def test_composite_background(layer_files, tmp_path):
    output = str(tmp_path / "output.png")
    argv = ["--verbose", "composite", "additive", layer_files[0], "-o", output]
    assert main(argv + ["--background", "1,2,3,4"]) is None
    image = RasterImage.open(output)
    assert image.pixels().tolist() == [[11, 22, 33, 44]] * 4


def test_composite_insufficient_layers(layer_files, tmp_path):
    output = tmp_path / "output.png"
    assert main(["composite", "screen", layer_files[0], "-o", str(output)]) == 1
    assert not output.exists()


def test_composite_unknown_format(layer_files, tmp_path):
    output = tmp_path / "output.xyz"
    assert main(["composite", "additive"] + layer_files + ["-o", str(output)]) == 1


def test_composite_missing_file(tmp_path):
    argv = ["composite", "alpha", str(tmp_path / "a.png"), str(tmp_path / "b.png")]
    assert main(argv + ["-o", str(tmp_path / "output.png")]) == 1


def test_show(layer_files, capsys):
    assert main(["show", layer_files[0]]) is None
    assert "RasterImage" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["-h"],
        ["composite", "overlay", "a.png", "b.png", "-o", "out.png"],
        ["composite", "alpha", "a.png"],
        ["composite", "alpha", "a.png", "-o", "out.png", "--background", "red"],
        [],
    ],
)
def test_main_exits(argv):
    with pytest.raises(SystemExit):
        main(argv)


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out
