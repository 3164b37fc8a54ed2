"""Типизированные ошибки конвертации.

Все ошибки наследуют `ValueError`: это ошибки входных данных, а не сбои процесса.
"""
from __future__ import annotations


class ConversionError(ValueError):
    """Базовая ошибка разбора исходного текста."""


class NoHexValuesFound(ConversionError):
    def __init__(self) -> None:
        super().__init__(
            "В файле не найдено hex-значений. Ожидаются значения в формате 0xXXXX"
        )


class NoValidHexValues(ConversionError):
    def __init__(self) -> None:
        super().__init__(
            "Не найдено корректных hex-значений. Ожидаемый формат: 0xXXXX, "
            "где XXXX — от 1 до 4 шестнадцатеричных цифр"
        )
