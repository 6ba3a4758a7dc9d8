#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Formatting decoded images for printing
"""

import json
from typing import List, Optional, Sequence

from glyph_recognition import (
    Grid,
    Symbol,
    Unknown,
    format_transcript,
    render_grid,
    symbols_to_dict,
)


def format_output(fmt: str, lines: Sequence[Sequence[Symbol]], grid: Optional[Grid] = None) -> str:
    """
    Render a decode result in the requested output format.

    Args:
        fmt: 'transcript', 'debug', 'json' or 'grid'
        lines: Decoded lines of symbols
        grid: Binarized grid with its border removed (needed for 'grid')

    Returns:
        Text to print
    """
    if fmt == 'transcript':
        return format_transcript(lines)
    if fmt == 'debug':
        return repr([list(line) for line in lines])
    if fmt == 'json':
        return json.dumps(symbols_to_dict(lines), indent=2)
    if fmt == 'grid':
        if grid is None:
            raise ValueError("The 'grid' format needs the binarized grid")
        return render_grid(grid)
    raise ValueError(f"Unknown output format: {fmt!r}")


def describe_unknowns(lines: Sequence[Sequence[Symbol]]) -> List[str]:
    """One multi-line description per unknown glyph, with its position"""
    descriptions = []
    for line_no, line in enumerate(lines, 1):
        for index, symbol in enumerate(line, 1):
            if isinstance(symbol, Unknown):
                glyph = symbol.glyph
                descriptions.append(
                    f"line {line_no}, glyph {index} ({glyph.width}x{glyph.height}):\n{glyph.render()}"
                )
    return descriptions
