import pytest

from hex2bmp.models.errors import ConversionError, NoValidHexValues
from hex2bmp.services.parse_service import HexValueParser, parse_bare, parse_prefixed


def test_prefixed_values_in_order():
    assert HexValueParser().parse("0xF800, 0x07E0, 0x001F, 0xFFFF") == (0xF800, 0x07E0, 0x001F, 0xFFFF)


def test_duplicates_are_kept():
    assert HexValueParser().parse("0x0001,0x0001, 0x0002") == (1, 1, 2)


def test_prefix_is_case_insensitive():
    assert parse_prefixed("0XABCD 0xabcd 0x1") == [0xABCD, 0xABCD, 0x1]


def test_long_token_keeps_first_four_digits():
    assert parse_prefixed("0x12345678") == [0x1234]


def test_bare_tokens_used_when_no_prefix():
    assert HexValueParser().parse("F800, 07E0;\n001F\tabc") == (0xF800, 0x07E0, 0x001F, 0xABC)


def test_bare_tokens_ignore_short_and_long_tokens():
    assert parse_bare("12, ab, 12345, 0FFF") == [0x0FFF]


def test_bare_fallback_skipped_when_prefixed_found():
    assert HexValueParser().parse("0x0010, BEEF") == (0x0010,)


def test_empty_result_raises():
    with pytest.raises(NoValidHexValues) as excinfo:
        HexValueParser().parse(" 1, 2, 3 ")
    assert isinstance(excinfo.value, ConversionError)
    assert "0xXXXX" in str(excinfo.value)
