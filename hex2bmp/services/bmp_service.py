"""Кодирование `ImageData` в 24-битный несжатый BMP.

Формат: 14 байт заголовка файла + 40 байт BITMAPINFOHEADER, затем строки
снизу вверх, каждый пиксель как B, G, R, строка дополнена нулями до кратности 4.
"""
from __future__ import annotations

import struct

import numpy as np

from hex2bmp.models.image_model import ImageData
from hex2bmp.services.color_service import ColorConverter

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
BITS_PER_PIXEL = 24
PIXELS_PER_METER = 2835  # ~72 DPI


def row_padding(width: int) -> int:
    return (4 - (width * 3) % 4) % 4


class BmpEncoder:
    def __init__(self, color_converter: ColorConverter | None = None) -> None:
        self._colors = color_converter or ColorConverter()

    def encode(self, image: ImageData) -> bytes:
        """Возвращает содержимое BMP-файла.

        Недостающие пиксели (индекс >= len(data)) кодируются чёрным,
        лишние значения за пределами width*height отбрасываются.

        Raises:
            ValueError: если ширина или высота меньше 1.
        """
        width, height = image.width, image.height
        if width < 1 or height < 1:
            raise ValueError(f"Некорректные размеры изображения: {width}x{height}")

        padding = row_padding(width)
        row_size = width * 3 + padding
        image_size = row_size * height
        file_size = PIXEL_DATA_OFFSET + image_size

        header = struct.pack("<2sIII", b"BM", file_size, 0, PIXEL_DATA_OFFSET)
        info = struct.pack(
            "<IiiHHIIiiII",
            INFO_HEADER_SIZE,
            width,
            height,
            1,  # planes
            BITS_PER_PIXEL,
            0,  # BI_RGB
            image_size,
            PIXELS_PER_METER,
            PIXELS_PER_METER,
            0,  # palette colors
            0,  # important colors
        )
        return header + info + self._pixel_rows(image, padding)

    def _pixel_rows(self, image: ImageData, padding: int) -> bytes:
        width, height = image.width, image.height
        total = width * height
        values = np.zeros(total, dtype=np.uint16)
        count = min(total, len(image.data))
        values[:count] = image.data[:count]

        # 0x0000 expands to black, so zero fill covers missing pixels
        rgb = self._colors.to_rgb888_array(values).reshape(height, width, 3)
        bgr = rgb[::-1, :, ::-1]  # bottom-up rows, BGR
        rows = np.zeros((height, width * 3 + padding), dtype=np.uint8)
        rows[:, : width * 3] = bgr.reshape(height, width * 3)
        return rows.tobytes()
