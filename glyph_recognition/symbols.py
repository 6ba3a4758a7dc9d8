#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Symbol types and the fixed glyph table they are decoded from.

Decoding is an exact lookup of a glyph's (width, pixels) pair. Shapes that are
not in the table decode to ``Unknown`` so callers can report every unrecognized
glyph in a document without aborting.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from utils.logging import get_logger
from .glyph import Glyph
from .pixels import Pixel

log = get_logger()


class Symbol:
    """Base class of decoded symbols."""

    __slots__ = ()


@dataclass(frozen=True)
class Digit(Symbol):
    value: int

    def __post_init__(self):
        if not 0 <= self.value <= 9:
            raise ValueError(f"Digit value must be within 0..9, got {self.value}")

    def __repr__(self) -> str:
        return f"Digit({self.value})"


@dataclass(frozen=True)
class EllipsisMark(Symbol):
    def __repr__(self) -> str:
        return "Ellipsis"


ELLIPSIS = EllipsisMark()


@dataclass(frozen=True)
class Unknown(Symbol):
    """A glyph with no table entry, kept for inspection."""

    glyph: Glyph

    def __repr__(self) -> str:
        return f"Unknown({self.glyph})"


TableKey = Tuple[int, Tuple[Pixel, ...]]
SymbolTable = Mapping[TableKey, Symbol]


def parse_pattern(pattern: str) -> Tuple[Pixel, ...]:
    """Turn a '0,1,1,0' pattern string into pixels."""
    return tuple(Pixel(int(bit)) for bit in pattern.replace(" ", "").split(","))


def build_symbol_table(rows: Iterable[Tuple[int, str, Symbol]]) -> Dict[TableKey, Symbol]:
    """
    Build a lookup table from (width, pattern, symbol) rows.

    Args:
        rows: Width, comma-separated row-major bit pattern, and the symbol it decodes to

    Returns:
        Mapping from (width, pixels) to symbol

    Raises:
        ValueError: If a pattern does not fill whole rows or a key is duplicated
    """
    table: Dict[TableKey, Symbol] = {}
    for width, pattern, symbol in rows:
        pixels = parse_pattern(pattern)
        if width <= 0 or len(pixels) % width != 0:
            raise ValueError(f"Pattern {pattern!r} does not fill rows of width {width}")
        key = (width, pixels)
        if key in table:
            raise ValueError(f"Duplicate pattern {pattern!r} for width {width}")
        table[key] = symbol
    return table


SYMBOL_ROWS = (
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
)

SYMBOL_TABLE: Dict[TableKey, Symbol] = build_symbol_table(SYMBOL_ROWS)


def decode_glyph(glyph: Glyph, table: SymbolTable = SYMBOL_TABLE) -> Symbol:
    """
    Classify a normalized glyph.

    Args:
        glyph: Normalized glyph
        table: Lookup table, defaults to the built-in symbol table

    Returns:
        The matching symbol, or Unknown(glyph) when there is no entry
    """
    symbol = table.get((glyph.width, glyph.pixels))
    if symbol is None:
        log.debug(f"No table entry for {glyph}")
        return Unknown(glyph)
    return symbol
