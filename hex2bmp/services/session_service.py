"""Сессия конвертации: состояние между UI и конвейером.

Принципы:
- SRP: хранит выбранный источник и последний результат, не знает о виджетах.
- Каждая попытка конвертации начинается с чистого состояния: после ошибки
  не остаётся устаревших предпросмотра и BMP.
- Подмена размеров для встроенного примера — только для отображения,
  BMP строится по реально разобранным данным.
"""
from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Optional

from PIL import Image

from hex2bmp.config import AppConfig
from hex2bmp.models.errors import ConversionError
from hex2bmp.models.image_model import ImageData
from hex2bmp.services.convert_service import ImageDecodePipeline, decode_source
from hex2bmp.services.preview_service import PreviewService

logger = logging.getLogger(__name__)


@dataclass
class ConversionSession:
    config: AppConfig = field(default_factory=AppConfig)
    pipeline: ImageDecodePipeline = field(default_factory=ImageDecodePipeline)
    preview_service: PreviewService = field(default_factory=PreviewService)

    source_name: Optional[str] = None
    source_text: Optional[str] = None
    image: Optional[ImageData] = None
    preview: Optional[Image.Image] = None
    bmp: Optional[bytes] = None
    error: str = ""

    @property
    def has_result(self) -> bool:
        return self.bmp is not None

    def select_file(self, file_path: str | Path) -> None:
        """Читает файл-источник и сбрасывает предыдущий результат.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")
        self.select_text(path.name, decode_source(path.read_bytes()))

    def select_text(self, name: str, text: str) -> None:
        self.source_name = name
        self.source_text = text
        self._reset_result()

    def process(self) -> bool:
        """Конвертирует выбранный источник. Возвращает True при успехе."""
        if self.source_text is None:
            return False
        self._reset_result()
        try:
            result = self.pipeline.convert(self.source_text)
        except ConversionError as exc:
            logger.warning("Не удалось преобразовать %s: %s", self.source_name, exc)
            self.error = str(exc)
            return False
        self.image = result.image
        self.preview = self.preview_service.render(result.image)
        self.bmp = result.bmp
        return True

    def load_example(self) -> bool:
        """Загружает встроенный пример и показывает его в фиксированном размере.

        Raises:
            FileNotFoundError: если файл примера отсутствует.
        """
        self.source_name = None
        self.source_text = None
        self._reset_result()
        self.select_file(self.config.example_path)
        try:
            result = self.pipeline.convert(self.source_text or "")
        except ConversionError as exc:
            logger.warning("Не удалось загрузить пример: %s", exc)
            self.error = f"Ошибка загрузки примера: {exc}"
            return False

        self.image = self._example_display_image(result.image)
        self.preview = self.preview_service.render(self.image)
        self.bmp = result.bmp
        return True

    def save_bmp(self, target: str | Path) -> Path:
        """Записывает BMP последней успешной конвертации.

        Raises:
            RuntimeError: если результата нет.
        """
        if self.bmp is None:
            raise RuntimeError("Нет данных BMP: сначала выполните преобразование")
        path = Path(target)
        if path.is_dir():
            path = path / self.config.download_name
        path.write_bytes(self.bmp)
        logger.info("BMP сохранён: %s (%d байт)", path, len(self.bmp))
        return path

    def save_example(self, target: str | Path) -> Path:
        path = Path(target)
        if path.is_dir():
            path = path / self.config.example_name
        shutil.copyfile(self.config.example_path, path)
        logger.info("Пример сохранён: %s", path)
        return path

    def info(self) -> Dict[str, str]:
        """Сводка для панели «Информация»."""
        if self.image is None:
            return {}
        return {
            "name": self.image.name,
            "dimensions": f"{self.image.width} × {self.image.height}",
            "pixels": str(self.image.pixel_count),
        }

    # ---- Helpers ----
    def _example_display_image(self, image: ImageData) -> ImageData:
        width, height = self.config.example_display_size
        total = width * height
        data = image.data[:total] + (0,) * max(0, total - len(image.data))
        return replace(image, width=width, height=height, data=data)

    def _reset_result(self) -> None:
        self.image = None
        self.preview = None
        self.bmp = None
        self.error = ""
