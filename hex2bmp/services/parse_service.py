"""Разбор текста блока в последовательность 16-битных значений RGB565."""
from __future__ import annotations

import re
from typing import Callable, List, Sequence, Tuple

from hex2bmp.models.errors import NoValidHexValues

MAX_VALUE = 0xFFFF

_PREFIXED_RE = re.compile(r"0x[0-9a-f]{1,4}", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[,\s]+")
_NON_HEX_RE = re.compile(r"[^0-9a-fA-F]")


def parse_prefixed(block: str) -> List[int]:
    """Токены с префиксом 0x и 1–4 цифрами."""
    values = []
    for token in _PREFIXED_RE.findall(block):
        value = int(token, 16)
        if 0 <= value <= MAX_VALUE:
            values.append(value)
    return values


def parse_bare(block: str) -> List[int]:
    """Токены без префикса: лишние символы отбрасываются, остаются 3–4 цифры."""
    values = []
    for token in _SEPARATOR_RE.split(block):
        cleaned = _NON_HEX_RE.sub("", token)
        # expecting 3-4 hex digits
        if 3 <= len(cleaned) <= 4:
            value = int(cleaned, 16)
            if 0 <= value <= MAX_VALUE:
                values.append(value)
    return values


class HexValueParser:
    def __init__(
        self,
        strategies: Sequence[Callable[[str], List[int]]] = (parse_prefixed, parse_bare),
    ) -> None:
        self._strategies = tuple(strategies)

    def parse(self, block: str) -> Tuple[int, ...]:
        """Возвращает значения в порядке появления (дубликаты сохраняются).

        Следующая стратегия применяется, только если предыдущая ничего не дала.

        Raises:
            NoValidHexValues: если ни одна стратегия не дала значений.
        """
        for strategy in self._strategies:
            values = strategy(block)
            if values:
                return tuple(values)
        raise NoValidHexValues()
