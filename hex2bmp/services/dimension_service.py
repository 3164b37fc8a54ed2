"""Подбор размеров изображения по количеству пикселей.

Эвристика: сначала типовые разрешения встраиваемых дисплеев, затем квадрат,
строка и столбец. Для чисел, не совпадающих ни с одним разрешением и не
являющихся полным квадратом, результатом будет одна строка `N × 1`.
"""
from __future__ import annotations

import logging
import math
from typing import List, Tuple

logger = logging.getLogger(__name__)

COMMON_RESOLUTIONS: Tuple[Tuple[int, int], ...] = (
    (128, 128), (64, 64), (32, 32), (16, 16),
    (320, 240), (240, 320), (128, 160), (160, 128),
    (128, 64), (64, 128), (96, 64), (64, 96),
)


class DimensionResolver:
    def __init__(self, resolutions: Tuple[Tuple[int, int], ...] = COMMON_RESOLUTIONS) -> None:
        self._resolutions = resolutions

    def candidates(self, count: int) -> List[Tuple[float, float]]:
        """Кандидаты (ширина, высота) в порядке приоритета."""
        table = [(w, h) for w, h in self._resolutions if w * h == count]
        root = math.sqrt(count)
        return table + [(root, root), (count, 1), (1, count)]

    def resolve(self, count: int) -> Tuple[int, int]:
        """Возвращает (ширина, высота) с `ширина * высота == count`.

        Raises:
            ValueError: если `count < 1`.
        """
        if count < 1:
            raise ValueError(f"Количество пикселей должно быть положительным: {count}")

        for w, h in self.candidates(count):
            if math.floor(w) * math.floor(h) == count:
                width, height = math.floor(w), math.floor(h)
                break
        else:
            width = math.ceil(math.sqrt(count))
            height = math.ceil(count / width)

        if width * height != count:
            width, height = count, 1

        logger.debug("Размеры для %d пикселей: %dx%d", count, width, height)
        return width, height
