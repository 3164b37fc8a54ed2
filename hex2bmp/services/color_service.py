from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


class ColorConverter:
    def to_rgb888(self, color: int) -> Tuple[int, int, int]:
        """
        RGB565 -> (R, G, B) 8 бит на канал.
        Старшие биты канала повторяются в младших: 0x1F -> 0xFF, а не 0xF8.
        """
        r = (color >> 11) & 0x1F
        g = (color >> 5) & 0x3F
        b = color & 0x1F
        return (r << 3) | (r >> 2), (g << 2) | (g >> 4), (b << 3) | (b >> 2)

    def to_rgb888_array(self, values: Iterable[int] | np.ndarray) -> np.ndarray:
        """
        Векторизованный вариант `to_rgb888`.
        Возвращает массив (N, 3) uint8 в порядке R, G, B.
        """
        arr = np.asarray(values, dtype=np.uint16).reshape(-1)
        r = (arr >> 11) & 0x1F
        g = (arr >> 5) & 0x3F
        b = arr & 0x1F
        r8 = (r << 3) | (r >> 2)
        g8 = (g << 2) | (g >> 4)
        b8 = (b << 3) | (b >> 2)
        return np.stack([r8, g8, b8], axis=-1).astype(np.uint8)
