"""Поиск массива hex-значений в произвольном исходном тексте.

Принципы:
- OCP: каждая стратегия — отдельная функция `text -> Optional[ExtractedBlock]`;
  новые уровни поиска добавляются в кортеж без правки остальных.
- SRP: модуль только находит блок, разбор чисел делает `HexValueParser`.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

from hex2bmp.models.errors import NoHexValuesFound
from hex2bmp.models.image_model import ExtractedBlock

logger = logging.getLogger(__name__)

Strategy = Callable[[str], Optional[ExtractedBlock]]

BRACE_BLOCK_NAME = "parsed_array"
LOOSE_TOKENS_NAME = "extracted_hex_values"

_DECLARATION_RE = re.compile(
    r"(?:const\s+)?uint16_t\s+(\w+)\s*\[\s*(?:\d+)?\s*\]\s*=\s*\{([^}]+)\}"
)
_BRACE_BLOCK_RE = re.compile(r"\{([^}]*)\}")
_HEX_TOKEN_RE = re.compile(r"0x[0-9a-fA-F]{1,4}")
_LOOSE_TOKEN_RE = re.compile(r"0x[0-9a-fA-F]+")


def match_declaration(text: str) -> Optional[ExtractedBlock]:
    """Уровень 1: объявление вида `const uint16_t name[N] = { ... }`."""
    match = _DECLARATION_RE.search(text)
    if match is None:
        return None
    return ExtractedBlock(name=match.group(1), block=match.group(2))


def match_brace_block(text: str) -> Optional[ExtractedBlock]:
    """Уровень 2: первый блок `{ ... }`, содержащий хотя бы один токен 0xXXXX."""
    single_line = text.replace("\n", " ").replace("\r", " ")
    for match in _BRACE_BLOCK_RE.finditer(single_line):
        if _HEX_TOKEN_RE.search(match.group(1)):
            return ExtractedBlock(name=BRACE_BLOCK_NAME, block=match.group(1))
    return None


def match_loose_tokens(text: str) -> Optional[ExtractedBlock]:
    """Уровень 3: все токены 0x... из документа, без учёта скобок и комментариев."""
    tokens = _LOOSE_TOKEN_RE.findall(text)
    if not tokens:
        return None
    return ExtractedBlock(name=LOOSE_TOKENS_NAME, block=", ".join(tokens))


DEFAULT_STRATEGIES: Sequence[Strategy] = (
    match_declaration,
    match_brace_block,
    match_loose_tokens,
)


class HexTokenExtractor:
    def __init__(self, strategies: Sequence[Strategy] = DEFAULT_STRATEGIES) -> None:
        self._strategies = tuple(strategies)

    def extract(self, text: str) -> ExtractedBlock:
        """Возвращает первый блок, найденный стратегиями в порядке приоритета.

        Raises:
            NoHexValuesFound: если ни одна стратегия ничего не нашла.
        """
        for strategy in self._strategies:
            found = strategy(text)
            if found is not None:
                logger.debug("Блок найден стратегией %s (имя: %s)", getattr(strategy, "__name__", strategy), found.name)
                return found
        raise NoHexValuesFound()
