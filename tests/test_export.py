import io

import numpy as np
import pytest
from PIL import Image

from rampforge import FileType, GradientParams, encode_texture, rasterize, save_texture, to_image


@pytest.fixture
def texture(black_white):
    return rasterize(GradientParams(resolution=(4, 4), repeat=False), black_white)


def test_to_image_puts_bottom_row_last(texture):
    image = to_image(texture)
    assert image.mode == "RGBA"
    assert image.size == (4, 4)
    # buffer row 3 (y = 3, position 0.75) is the top row of the image
    assert image.getpixel((0, 0)) == (191, 191, 191, 255)
    assert image.getpixel((2, 3)) == (0, 0, 0, 255)


def test_png_round_trip_keeps_alpha(texture):
    data = encode_texture(texture, FileType.PNG)
    image = Image.open(io.BytesIO(data))
    assert image.format == "PNG"
    assert image.mode == "RGBA"
    assert np.array_equal(np.asarray(image), texture.to_uint8()[::-1])


def test_jpg_drops_alpha(texture):
    image = Image.open(io.BytesIO(encode_texture(texture, "jpg")))
    assert image.format == "JPEG"
    assert image.mode == "RGB"
    assert image.size == (4, 4)


def test_save_texture_appends_suffix(tmp_path, texture):
    written = save_texture(texture, tmp_path / "Gradient")
    assert written == tmp_path / "Gradient.png"
    assert written.read_bytes().startswith(b"\x89PNG")


def test_save_texture_infers_type_from_suffix(tmp_path, texture):
    written = save_texture(texture, tmp_path / "Gradient.jpeg")
    assert written.suffix == ".jpeg"
    assert Image.open(written).format == "JPEG"


def test_save_texture_explicit_type(tmp_path, texture):
    written = save_texture(texture, str(tmp_path / "out"), FileType.JPG)
    assert written.name == "out.jpg"


def test_unsupported_suffix(tmp_path, texture):
    with pytest.raises(ValueError):
        save_texture(texture, tmp_path / "Gradient.bmp")


def test_file_type_from_suffix():
    assert FileType.from_suffix(".PNG") is FileType.PNG
    assert FileType.from_suffix("jpeg") is FileType.JPG
    assert FileType.JPG.suffix == ".jpg"
