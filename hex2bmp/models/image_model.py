"""Модели данных конвертера: извлечённый блок, изображение, результат.

Принципы:
- SRP: только структура данных, без логики разбора и кодирования.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ExtractedBlock:
    """Фрагмент исходного текста, предположительно содержащий массив пикселей.

    Fields:
        name: Имя объявленного массива или синтетическое имя.
        block: Текст с hex-токенами (содержимое фигурных скобок).
    """
    name: str
    block: str


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель изображения в RGB565.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        data: Значения пикселей RGB565 построчно, каждое в [0, 0xFFFF].
        name: Имя исходного массива.
    """
    width: int
    height: int
    data: Tuple[int, ...]
    name: str

    @property
    def pixel_count(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ConversionResult:
    image: ImageData
    bmp: bytes
