#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Removal of the fixed-width frame that the source renderer draws around content.
"""

from config import BORDER_THICKNESS
from utils.logging import get_logger
from utils.validation import validate_non_negative_int
from .errors import GridShapeError
from .pixels import Grid

log = get_logger()


def strip_border(grid: Grid, thickness: int = BORDER_THICKNESS) -> None:
    """
    Remove ``thickness`` rows and columns from every edge of a grid, in place.

    The frame is a format constant, not whitespace detection: rows and columns
    are dropped whether or not they are blank.

    Args:
        grid: Row-major grid, mutated in place
        thickness: Rows/columns removed on each edge

    Raises:
        GridShapeError: If the grid is too small to lose the frame
    """
    validate_non_negative_int(thickness, "thickness")
    span = 2 * thickness

    if len(grid) < span:
        raise GridShapeError(
            f"Grid has {len(grid)} rows, border removal needs at least {span}"
        )

    remaining = grid[thickness:len(grid) - thickness]
    for index, row in enumerate(remaining):
        if len(row) < span:
            raise GridShapeError(
                f"Row {index + thickness} has {len(row)} columns, "
                f"border removal needs at least {span}"
            )

    if thickness == 0:
        return

    del grid[:thickness]
    del grid[-thickness:]
    for row in grid:
        del row[:thickness]
        del row[-thickness:]

    width = len(grid[0]) if grid else 0
    log.debug(f"Stripped {thickness}px border, grid is now {width}x{len(grid)}")
