import time

import pytest

from hex2bmp.models.errors import NoHexValuesFound
from hex2bmp.services.extract_service import (
    BRACE_BLOCK_NAME,
    LOOSE_TOKENS_NAME,
    HexTokenExtractor,
    match_brace_block,
    match_declaration,
    match_loose_tokens,
)

HEADER = """
// generated by some tool 0xDEAD
#define LOGO_W 2
static const int unrelated = 0x7F;

const uint16_t foo[4] = {
    0xF800, 0x07E0,
    0x001F, 0xFFFF
};

uint8_t tail[] = { 0x01, 0x02 };
"""


def test_declaration_wins_over_loose_tokens():
    block = HexTokenExtractor().extract(HEADER)
    assert block.name == "foo"
    assert "0xF800" in block.block
    assert "0xDEAD" not in block.block
    assert "0x01" not in block.block


@pytest.mark.parametrize(
    "text, name",
    [
        ("uint16_t img[] = {0x0001};", "img"),
        ("const   uint16_t  icon_16 [ 256 ] =\n{0x0001};", "icon_16"),
        ("static const uint16_t bg[]={0x0001}", "bg"),
    ],
)
def test_declaration_variants(text, name):
    found = match_declaration(text)
    assert found is not None
    assert found.name == name


def test_declaration_requires_uint16_type():
    assert match_declaration("const uint8_t img[] = {0x01};") is None


def test_brace_block_fallback():
    text = "void f() { return; }\nuint8_t data[] = {\r\n 0x12, 0x34\r\n};"
    block = HexTokenExtractor().extract(text)
    assert block.name == BRACE_BLOCK_NAME
    assert "0x12" in block.block and "0x34" in block.block
    assert "\n" not in block.block


def test_brace_block_needs_hex_inside():
    assert match_brace_block("{ a, b } 0x1234") is None


def test_loose_tokens_last_resort():
    text = "colors: 0xF800 0x07E0; // 0x001F\n{ no hex }"
    block = HexTokenExtractor().extract(text)
    assert block.name == LOOSE_TOKENS_NAME
    assert block.block == "0xF800, 0x07E0, 0x001F"


def test_loose_tokens_none():
    assert match_loose_tokens("nothing here") is None


def test_nothing_found_raises():
    with pytest.raises(NoHexValuesFound):
        HexTokenExtractor().extract("no hex here {1, 2, 3}")


def test_custom_strategies():
    extractor = HexTokenExtractor(strategies=(match_loose_tokens,))
    assert extractor.extract(HEADER).name == LOOSE_TOKENS_NAME


def test_declaration_wins_over_earlier_brace_block():
    text = "static const uint8_t lut[] = { 0x01, 0x02 };\nconst uint16_t bar[] = { 0xF800, 0x07E0 };"
    block = HexTokenExtractor().extract(text)
    assert block.name == "bar"
    assert "0x01" not in block.block


def test_brace_block_skips_blocks_without_hex():
    text = "{ a { b } c } { 0x0001 }"
    assert match_brace_block(text).block == " 0x0001 "


def test_brace_block_keeps_inner_open_brace():
    assert match_brace_block("{ a { 0x0001 }").block == " a { 0x0001 "


@pytest.mark.parametrize("prefix", ["uint8_t img[] = {\n", "const uint16_t img[] = {\n"])
def test_unclosed_brace_falls_through_quickly(prefix):
    text = prefix + ", ".join(["0x1234"] * 5000)
    start = time.perf_counter()
    block = HexTokenExtractor().extract(text)
    assert time.perf_counter() - start < 1.0
    assert block.name == LOOSE_TOKENS_NAME
    assert block.block.count("0x1234") == 5000
