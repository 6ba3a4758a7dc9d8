#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared helpers for building synthetic grids and rasters in tests.

Art rows use '#' for ON and '.' for OFF.
"""

import numpy as np
import pytest

from glyph_recognition import Pixel

# Row-major art of every glyph in the symbol table
GLYPH_ART = {
    "0": [".#", "#."],
    "1": [".#", "##"],
    "1-thin": ["#", "#"],
    "2": [".##", "#.#", "#.."],
    "3": [".##", "###", "#.."],
    "4": [".##", "#..", "##."],
    "5": [".##", "##.", "##."],
    "6": [".##", "#.#", "##."],
    "7": [".##", "###", "##."],
    "8": [".##", "#..", "#.#"],
    "...": ["####"],
}


def grid_from_art(art):
    return [[Pixel.ON if ch == "#" else Pixel.OFF for ch in row] for row in art]


def compose_art(lines, gap=2):
    """
    Lay out glyphs into page art.

    Args:
        lines: One list of GLYPH_ART keys per line
        gap: Blank columns between glyphs on a line

    Returns:
        Art rows with one blank row between lines, right-padded to equal width
    """
    rows = []
    for index, keys in enumerate(lines):
        if index:
            rows.append("")
        glyphs = [GLYPH_ART[key] for key in keys]
        height = len(glyphs[0])
        spacer = "." * gap
        for y in range(height):
            rows.append(spacer.join(glyph[y] for glyph in glyphs))
    width = max(len(row) for row in rows)
    return [row.ljust(width, ".") for row in rows]


def raster_from_art(art, scale=4, border=2, border_on=True):
    """
    Upscale art into an 8-bit raster framed by a border.

    The border ring is drawn ON so tests prove it is removed by position,
    not by blankness.
    """
    cells = np.array([[ch == "#" for ch in row] for row in art], dtype=bool)
    if border:
        cells = np.pad(cells, border, mode="constant", constant_values=border_on)
    upscaled = np.repeat(np.repeat(cells, scale, axis=0), scale, axis=1)
    return upscaled.astype(np.uint8) * 255


@pytest.fixture
def make_grid():
    return grid_from_art


@pytest.fixture
def make_raster():
    return raster_from_art


@pytest.fixture
def compose():
    return compose_art


@pytest.fixture
def message_raster():
    """The reference message: 0, then two of each digit 1-8, then an ellipsis."""
    lines = [["0"]] + [[d, d] for d in "12345678"] + [["..."]]
    return raster_from_art(compose_art(lines))
