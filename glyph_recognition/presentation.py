#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text and JSON views of decoded symbols.
"""

from typing import Any, Dict, List, Sequence

from config import TRANSCRIPT_ELLIPSIS, TRANSCRIPT_UNKNOWN
from .symbols import Digit, EllipsisMark, Symbol, Unknown


def symbol_to_text(symbol: Symbol) -> str:
    if isinstance(symbol, Digit):
        return str(symbol.value)
    if isinstance(symbol, EllipsisMark):
        return TRANSCRIPT_ELLIPSIS
    return TRANSCRIPT_UNKNOWN


def format_transcript(lines: Sequence[Sequence[Symbol]]) -> str:
    """
    Render decoded lines as text.

    Digits print as themselves, the ellipsis as '...', unknown glyphs as '?'.

    Args:
        lines: Decoded lines of symbols

    Returns:
        One text line per decoded line
    """
    return "\n".join("".join(symbol_to_text(symbol) for symbol in line) for line in lines)


def symbol_to_dict(symbol: Symbol) -> Dict[str, Any]:
    if isinstance(symbol, Digit):
        return {"type": "digit", "value": symbol.value}
    if isinstance(symbol, EllipsisMark):
        return {"type": "ellipsis"}
    if isinstance(symbol, Unknown):
        glyph = symbol.glyph
        return {
            "type": "unknown",
            "width": glyph.width,
            "height": glyph.height,
            "rows": glyph.render().split("\n"),
        }
    raise TypeError(f"Not a symbol: {symbol!r}")


def symbols_to_dict(lines: Sequence[Sequence[Symbol]]) -> Dict[str, List[List[Dict[str, Any]]]]:
    """JSON-serializable view of decoded lines."""
    return {"lines": [[symbol_to_dict(symbol) for symbol in line] for line in lines]}
