#!/usr/bin/env python3
"""
Tests for the symbol table and glyph decoding
"""

import pytest

from glyph_recognition import (
    ELLIPSIS,
    SYMBOL_TABLE,
    Digit,
    Glyph,
    Pixel,
    Unknown,
    build_symbol_table,
    decode_glyph,
)
from glyph_recognition.symbols import parse_pattern


@pytest.mark.parametrize("width, pattern, expected", [
    (1, "1,1", Digit(1)),
    (2, "0,1,1,0", Digit(0)),
    (2, "0,1,1,1", Digit(1)),
    (3, "0,1,1,1,0,1,1,0,0", Digit(2)),
    (3, "0,1,1,1,1,1,1,0,0", Digit(3)),
    (3, "0,1,1,1,0,0,1,1,0", Digit(4)),
    (3, "0,1,1,1,1,0,1,1,0", Digit(5)),
    (3, "0,1,1,1,0,1,1,1,0", Digit(6)),
    (3, "0,1,1,1,1,1,1,1,0", Digit(7)),
    (3, "0,1,1,1,0,0,1,0,1", Digit(8)),
    (4, "1,1,1,1", ELLIPSIS),
])
def test_table_patterns_decode(width, pattern, expected):
    glyph = Glyph(pixels=parse_pattern(pattern), width=width)

    assert decode_glyph(glyph) == expected


def test_table_has_every_entry():
    assert len(SYMBOL_TABLE) == 11


def test_unlisted_width_three_glyph_is_unknown_with_its_pixels():
    pixels = parse_pattern("1,1,1,1,1,1,1,1,1")
    glyph = Glyph(pixels=pixels, width=3)

    symbol = decode_glyph(glyph)

    assert symbol == Unknown(glyph)
    assert symbol.glyph.pixels == pixels


@pytest.mark.parametrize("width", [5, 6, 9])
def test_unsupported_widths_are_unknown(width):
    glyph = Glyph(pixels=(Pixel.ON,) * width, width=width)

    assert isinstance(decode_glyph(glyph), Unknown)


def test_same_pixels_with_other_width_do_not_match():
    # 0,1,1,0 is a zero at width 2 but not at width 1 or 4
    pixels = parse_pattern("0,1,1,0")

    assert isinstance(decode_glyph(Glyph(pixels=pixels, width=1)), Unknown)
    assert isinstance(decode_glyph(Glyph(pixels=pixels, width=4)), Unknown)


def test_custom_table_replaces_default():
    table = build_symbol_table([(2, "1,1", Digit(9))])

    assert decode_glyph(Glyph(pixels=parse_pattern("1,1"), width=2), table) == Digit(9)
    assert isinstance(decode_glyph(Glyph(pixels=parse_pattern("1,1"), width=1), table), Unknown)


def test_table_rejects_bad_rows():
    with pytest.raises(ValueError):
        build_symbol_table([(2, "1,1,1", Digit(1))])
    with pytest.raises(ValueError):
        build_symbol_table([(1, "1", Digit(1)), (1, "1", Digit(2))])


def test_digit_range_is_checked():
    with pytest.raises(ValueError):
        Digit(10)


def test_symbol_reprs():
    assert repr([Digit(3), ELLIPSIS]) == "[Digit(3), Ellipsis]"


def test_glyph_built_from_lists_decodes():
    zero = Glyph(pixels=[Pixel.OFF, Pixel.ON, Pixel.ON, Pixel.OFF], width=2)
    block = Glyph(pixels=[Pixel.ON] * 9, width=3)

    assert decode_glyph(zero) == Digit(0)
    assert isinstance(decode_glyph(block), Unknown)
    assert hash(decode_glyph(block)) == hash(Unknown(Glyph(pixels=(Pixel.ON,) * 9, width=3)))


def test_glyph_accepts_plain_ints():
    glyph = Glyph(pixels=[0, 1, 1, 1], width=2)

    assert glyph.pixels == (Pixel.OFF, Pixel.ON, Pixel.ON, Pixel.ON)
    assert decode_glyph(glyph) == Digit(1)
