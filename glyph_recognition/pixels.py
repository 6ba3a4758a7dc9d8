#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pixel and grid primitives shared by every decoding stage.
"""

from enum import IntEnum
from typing import List, Sequence

import numpy as np

from config import RENDER_ON_CHAR, RENDER_OFF_CHAR


class Pixel(IntEnum):
    """Two-valued pixel state after binarization."""

    OFF = 0
    ON = 1

    def __str__(self) -> str:
        return RENDER_ON_CHAR if self is Pixel.ON else RENDER_OFF_CHAR


# Row-major, rectangular
Grid = List[List[Pixel]]


def blank_mask(block: Sequence[Sequence[Pixel]], axis: int) -> np.ndarray:
    """
    Flag the blank rows or columns of a rectangular block of pixels.

    Args:
        block: Row-major pixels
        axis: 1 to test rows, 0 to test columns

    Returns:
        Boolean array, True where every pixel along the other axis is OFF
    """
    cells = np.asarray(block, dtype=bool)
    if cells.ndim != 2:
        # an empty block has nothing to flag
        return np.zeros(0, dtype=bool)
    return ~cells.any(axis=axis)


def blank_column(height: int) -> List[Pixel]:
    return [Pixel.OFF] * height


def column_at(rows: Sequence[Sequence[Pixel]], index: int) -> List[Pixel]:
    """Extract column ``index`` from a row-major block of pixels."""
    return [row[index] for row in rows]


def render_grid(grid: Sequence[Sequence[Pixel]]) -> str:
    """
    Draw a grid as text, one line per row.

    Args:
        grid: Row-major pixels

    Returns:
        Multi-line string with '#' for ON and ' ' for OFF
    """
    return "\n".join("".join(str(pixel) for pixel in row) for row in grid)
