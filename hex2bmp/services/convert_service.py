"""Конвейер: исходный текст -> `ImageData` -> байты BMP.

Принципы:
- SRP: только оркестрация, вся логика в отдельных сервисах.
- DIP: сервисы передаются через конструктор, по умолчанию — стандартные.
- Без состояния между вызовами: безопасно вызывать повторно и параллельно.
"""
from __future__ import annotations

import logging
from typing import Optional

from hex2bmp.models.image_model import ConversionResult, ImageData
from hex2bmp.services.bmp_service import BmpEncoder
from hex2bmp.services.dimension_service import DimensionResolver
from hex2bmp.services.extract_service import HexTokenExtractor
from hex2bmp.services.parse_service import HexValueParser

logger = logging.getLogger(__name__)


def decode_source(raw: bytes) -> str:
    """Содержимое файла как текст: UTF-8, недекодируемые байты отбрасываются."""
    return raw.decode("utf-8", errors="ignore")


class ImageDecodePipeline:
    def __init__(
        self,
        extractor: Optional[HexTokenExtractor] = None,
        parser: Optional[HexValueParser] = None,
        resolver: Optional[DimensionResolver] = None,
        encoder: Optional[BmpEncoder] = None,
    ) -> None:
        self._extractor = extractor or HexTokenExtractor()
        self._parser = parser or HexValueParser()
        self._resolver = resolver or DimensionResolver()
        self._encoder = encoder or BmpEncoder()

    def decode(self, text: str) -> ImageData:
        """Извлекает массив пикселей и подбирает размеры.

        Raises:
            NoHexValuesFound: в тексте нет ни одного токена 0x....
            NoValidHexValues: токены есть, но ни один не дал 16-битного значения.
        """
        block = self._extractor.extract(text)
        data = self._parser.parse(block.block)
        width, height = self._resolver.resolve(len(data))
        return ImageData(width=width, height=height, data=data, name=block.name)

    def convert(self, text: str) -> ConversionResult:
        image = self.decode(text)
        bmp = self._encoder.encode(image)
        logger.info(
            "Преобразован массив %s: %dx%d, %d пикселей, %d байт BMP",
            image.name, image.width, image.height, image.pixel_count, len(bmp),
        )
        return ConversionResult(image=image, bmp=bmp)

    def convert_bytes(self, raw: bytes) -> ConversionResult:
        """То же, что `convert`, для сырого содержимого файла."""
        return self.convert(decode_source(raw))
