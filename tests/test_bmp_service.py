import io
import struct

import pytest
from PIL import Image

from hex2bmp.models.image_model import ImageData
from hex2bmp.services.bmp_service import BmpEncoder, row_padding


def _decode(bmp: bytes) -> Image.Image:
    return Image.open(io.BytesIO(bmp)).convert("RGB")


@pytest.mark.parametrize("width, padding", [(1, 1), (2, 2), (3, 3), (4, 0), (5, 1)])
def test_row_padding(width, padding):
    assert row_padding(width) == padding


def test_header_layout():
    image = ImageData(width=2, height=1, data=(0xF800, 0x0000), name="t")
    bmp = BmpEncoder().encode(image)

    assert len(bmp) == 54 + 8
    assert bmp[0:2] == b"BM"
    signature, file_size, reserved, offset = struct.unpack_from("<2sIII", bmp, 0)
    assert (file_size, reserved, offset) == (62, 0, 54)

    fields = struct.unpack_from("<IiiHHIIiiII", bmp, 14)
    assert fields == (40, 2, 1, 1, 24, 0, 8, 2835, 2835, 0, 0)


def test_round_trip_with_pillow():
    image = ImageData(width=2, height=1, data=(0xF800, 0x0000), name="t")
    decoded = _decode(BmpEncoder().encode(image))
    assert decoded.size == (2, 1)
    assert decoded.getpixel((0, 0)) == (255, 0, 0)
    assert decoded.getpixel((1, 0)) == (0, 0, 0)


def test_rows_are_bottom_up_bgr_with_padding():
    # top row: red, bottom row: blue
    image = ImageData(width=1, height=2, data=(0xF800, 0x001F), name="t")
    bmp = BmpEncoder().encode(image)
    pixels = bmp[54:]
    assert pixels == bytes([255, 0, 0, 0]) + bytes([0, 0, 255, 0])

    decoded = _decode(bmp)
    assert decoded.getpixel((0, 0)) == (255, 0, 0)
    assert decoded.getpixel((0, 1)) == (0, 0, 255)


def test_missing_pixels_are_black():
    image = ImageData(width=3, height=2, data=(0xFFFF, 0x07E0), name="t")
    bmp = BmpEncoder().encode(image)
    assert len(bmp) == 54 + (9 + 3) * 2

    decoded = _decode(bmp)
    assert decoded.getpixel((0, 0)) == (255, 255, 255)
    assert decoded.getpixel((1, 0)) == (0, 255, 0)
    for xy in [(2, 0), (0, 1), (1, 1), (2, 1)]:
        assert decoded.getpixel(xy) == (0, 0, 0)


def test_surplus_values_ignored():
    image = ImageData(width=1, height=1, data=(0x001F, 0xFFFF), name="t")
    bmp = BmpEncoder().encode(image)
    assert bmp[54:] == bytes([255, 0, 0, 0])


def test_larger_image_matches_pillow_decode():
    width, height = 5, 3
    data = tuple((i * 4099) & 0xFFFF for i in range(width * height))
    decoded = _decode(BmpEncoder().encode(ImageData(width, height, data, "t")))
    assert decoded.getpixel((4, 2)) == _expand(data[2 * width + 4])
    assert decoded.getpixel((1, 0)) == _expand(data[1])


def _expand(value):
    r, g, b = (value >> 11) & 0x1F, (value >> 5) & 0x3F, value & 0x1F
    return (r << 3) | (r >> 2), (g << 2) | (g >> 4), (b << 3) | (b >> 2)


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        BmpEncoder().encode(ImageData(width=0, height=1, data=(1,), name="t"))
