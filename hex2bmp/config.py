"""Настройки приложения.

Значения по умолчанию — константы модуля; часть из них переопределяется
переменными окружения `HEX2BMP_*`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

ASSETS_DIR = Path(__file__).resolve().parent / "assets"

DOWNLOAD_NAME = "converted_image.bmp"
ACCEPTED_EXTENSIONS: Tuple[str, ...] = (".h", ".hpp", ".c", ".cpp", ".txt", ".inc", ".dat", ".hex")
EXAMPLE_NAME = "galaxy-spiral.h"
EXAMPLE_DISPLAY_SIZE: Tuple[int, int] = (240, 240)


@dataclass(frozen=True)
class AppConfig:
    """Неизменяемый набор настроек.

    Fields:
        download_name: Имя BMP-файла, предлагаемое при сохранении.
        accepted_extensions: Расширения для диалога выбора файла.
        example_name: Имя встроенного файла-примера.
        example_display_size: Размер отображения примера (ширина, высота).
        assets_dir: Каталог со встроенными файлами.
        appearance_mode: Режим customtkinter: "system" | "light" | "dark".
        color_theme: Тема customtkinter.
        log_level: Уровень логирования.
    """
    download_name: str = DOWNLOAD_NAME
    accepted_extensions: Tuple[str, ...] = ACCEPTED_EXTENSIONS
    example_name: str = EXAMPLE_NAME
    example_display_size: Tuple[int, int] = EXAMPLE_DISPLAY_SIZE
    assets_dir: Path = ASSETS_DIR
    appearance_mode: str = "system"
    color_theme: str = "blue"
    log_level: str = "INFO"

    @property
    def example_path(self) -> Path:
        return self.assets_dir / self.example_name


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Собирает `AppConfig` с учётом переменных окружения."""
    env = os.environ if environ is None else environ
    defaults = AppConfig()
    return AppConfig(
        appearance_mode=env.get("HEX2BMP_APPEARANCE", defaults.appearance_mode),
        color_theme=env.get("HEX2BMP_THEME", defaults.color_theme),
        log_level=env.get("HEX2BMP_LOG_LEVEL", defaults.log_level).upper(),
        assets_dir=Path(env["HEX2BMP_ASSETS_DIR"]) if env.get("HEX2BMP_ASSETS_DIR") else defaults.assets_dir,
    )
