#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line and glyph segmentation of a binarized grid.

Lines are bands of rows separated by blank rows. Within a line, glyphs are
separated by runs of at least two blank columns; a single blank column inside
a glyph (between the strokes of a multi-stroke digit) is kept as part of it.
"""

from enum import Enum
from typing import List

from utils.logging import get_logger
from .pixels import Grid, Pixel, blank_column, blank_mask, column_at

log = get_logger()

# Raw glyph: left-to-right columns, each a full-height list of pixels
Columns = List[List[Pixel]]


class ScanState(Enum):
    """Column scanner state."""

    IDLE_AFTER_BLANK = "idle_after_blank"  # last column was blank (or line start)
    ACTIVE = "active"                      # last column had ink


def split_lines(grid: Grid) -> List[Grid]:
    """
    Split a grid into lines on fully blank rows.

    Blank rows are dropped and consecutive blank rows never produce an empty line.

    Args:
        grid: Row-major grid (border already removed)

    Returns:
        Lines in top-to-bottom order, each a list of rows
    """
    lines: List[Grid] = []
    current: Grid = []

    for row, blank in zip(grid, blank_mask(grid, axis=1)):
        if blank:
            if current:
                lines.append(current)
                current = []
        else:
            current.append(row)

    if current:
        lines.append(current)

    log.debug(f"Split {len(grid)} rows into {len(lines)} lines")
    return lines


def segment_line(line: Grid) -> List[Columns]:
    """
    Split one line into raw glyphs by scanning its columns left to right.

    A blank column is tentatively absorbed. If the next column has ink, an
    all-OFF column is re-inserted and the glyph continues; if the next column
    is also blank (or the line ends), the glyph is complete.

    Args:
        line: Row-major rows of a single line

    Returns:
        Raw glyphs in left-to-right order, each a list of columns
    """
    if not line:
        return []

    height = len(line)
    width = len(line[0])
    glyphs: List[Columns] = []
    current_group: Columns = []
    state = ScanState.IDLE_AFTER_BLANK

    for index, blank in enumerate(blank_mask(line, axis=0)):
        if blank:
            if state is ScanState.IDLE_AFTER_BLANK and current_group:
                log.trace(f"Column {index}: second blank, glyph of width {len(current_group)} done")
                glyphs.append(current_group)
                current_group = []
            state = ScanState.IDLE_AFTER_BLANK
        else:
            if state is ScanState.IDLE_AFTER_BLANK and current_group:
                log.trace(f"Column {index}: ink after single blank, gap re-absorbed")
                current_group.append(blank_column(height))
            current_group.append(column_at(line, index))
            state = ScanState.ACTIVE

    if current_group:
        glyphs.append(current_group)

    log.debug(f"Segmented line of width {width} into {len(glyphs)} glyphs")
    return glyphs
