#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Glyph decoder: raster in, lines of symbols out.

Wires binarization, border removal, line and glyph segmentation, glyph
normalization and table lookup together. Lines carry no state between each
other, so they can optionally be decoded on a thread pool.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Sequence, Tuple, Union

import numpy as np

from config import (
    BORDER_THICKNESS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_MEASURE_TIME,
    DOWNSAMPLE_SCALE,
)
from utils.logging import get_logger
from utils.validation import validate_non_negative_int, validate_positive_int
from .binarizer import binarize
from .border import strip_border
from .glyph import Glyph
from .pixels import Grid
from .raster import load_raster
from .segmentation import segment_line, split_lines
from .symbols import SYMBOL_TABLE, Symbol, SymbolTable, Unknown, decode_glyph

log = get_logger()

DecodedLines = List[List[Symbol]]


class GlyphDecoder:
    """Decodes rasterized glyph images into lines of symbols."""

    def __init__(self, scale: int = DOWNSAMPLE_SCALE,
                 border: int = BORDER_THICKNESS,
                 table: SymbolTable = SYMBOL_TABLE,
                 max_workers: int = DEFAULT_MAX_WORKERS,
                 measure_time: bool = DEFAULT_MEASURE_TIME):
        """
        Initialize glyph decoder.

        Args:
            scale: Source pixels per grid cell
            border: Frame thickness in grid cells on each edge
            table: Mapping from (width, pixels) to symbol
            max_workers: Lines decoded concurrently (1 = synchronous)
            measure_time: Enable timing measurements for decode operations
        """
        validate_positive_int(scale, "scale")
        validate_non_negative_int(border, "border")
        validate_positive_int(max_workers, "max_workers")

        self.scale = scale
        self.border = border
        self.table = table
        self.max_workers = max_workers
        self.measure_time = measure_time

        # Timing statistics
        self.last_decode_time = 0.0
        self.avg_decode_time = 0.0
        self.decode_call_count = 0

    def decode(self, raster: np.ndarray) -> DecodedLines:
        """
        Decode a grayscale raster.

        Args:
            raster: 2-D array of 8-bit samples

        Returns:
            Lines of symbols, top to bottom and left to right

        Raises:
            RasterFormatError: If the raster is not pure black/white
            GridShapeError: If the grid is too small for the border
        """
        return self.decode_with_grid(raster)[1]

    def decode_with_grid(self, raster: np.ndarray) -> Tuple[Grid, DecodedLines]:
        """
        Decode a raster and also return the border-stripped grid it was read from.

        The raster is binarized once; the grid is not modified by decoding.

        Args:
            raster: 2-D array of 8-bit samples

        Returns:
            Tuple of (grid, lines of symbols)
        """
        start_time = time.perf_counter()

        grid = self.prepare_grid(raster)
        if self.measure_time:
            binarize_time = (time.perf_counter() - start_time) * 1000
            log.debug(f"[GLYPH:timing] Binarization and border removal: {binarize_time:.2f}ms")

        lines = self.decode_grid(grid)

        if self.measure_time:
            self._record_time((time.perf_counter() - start_time) * 1000)
        return grid, lines

    def prepare_grid(self, raster: np.ndarray) -> Grid:
        """Binarize a raster and remove its border."""
        grid = binarize(raster, self.scale)
        strip_border(grid, self.border)
        return grid

    def decode_file(self, path: Union[str, Path]) -> DecodedLines:
        """Load an image file and decode it."""
        return self.decode(load_raster(path))

    def decode_grid(self, grid: Grid) -> DecodedLines:
        """
        Decode a binarized grid whose border has already been removed.

        Args:
            grid: Row-major grid of pixels

        Returns:
            Lines of symbols
        """
        segment_start = time.perf_counter()
        lines = split_lines(grid)

        if self.max_workers > 1 and len(lines) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                decoded = list(executor.map(self.decode_line, lines))
        else:
            decoded = [self.decode_line(line) for line in lines]

        if self.measure_time:
            segment_time = (time.perf_counter() - segment_start) * 1000
            log.debug(f"[GLYPH:timing] Segmentation and lookup: {segment_time:.2f}ms")

        unknown = len(unknown_glyphs(decoded))
        if unknown:
            log.debug(f"{unknown} glyph(s) did not match any known symbol")
        return decoded

    def decode_line(self, line: Grid) -> List[Symbol]:
        """Decode the rows of a single line into symbols."""
        return [
            decode_glyph(Glyph.from_columns(columns), self.table)
            for columns in segment_line(line)
        ]

    def _record_time(self, total_time: float) -> None:
        self.last_decode_time = total_time
        self.decode_call_count += 1
        self.avg_decode_time = ((self.avg_decode_time * (self.decode_call_count - 1)) + total_time) / self.decode_call_count
        log.info(f"[GLYPH:timing] Total decode time: {total_time:.2f}ms | "
                 f"Avg: {self.avg_decode_time:.2f}ms | Count: {self.decode_call_count}")

    def get_timing_stats(self) -> dict:
        """
        Get decode timing statistics.

        Returns:
            Dictionary with timing statistics:
            - last_decode_time: Time of last decode (ms)
            - avg_decode_time: Average decode time (ms)
            - decode_call_count: Number of timed decodes
        """
        return {
            'last_decode_time': self.last_decode_time,
            'avg_decode_time': self.avg_decode_time,
            'decode_call_count': self.decode_call_count,
            'measure_time': self.measure_time
        }

    def reset_timing_stats(self):
        """Reset decode timing statistics."""
        self.last_decode_time = 0.0
        self.avg_decode_time = 0.0
        self.decode_call_count = 0
        log.info("[GLYPH:timing] Timing statistics reset")


def unknown_glyphs(lines: Sequence[Sequence[Symbol]]) -> List[Unknown]:
    """All unrecognized glyphs in reading order."""
    return [symbol for line in lines for symbol in line if isinstance(symbol, Unknown)]


def decode_raster(raster: np.ndarray, **kwargs) -> DecodedLines:
    """Decode a raster with a one-off GlyphDecoder built from ``kwargs``."""
    return GlyphDecoder(**kwargs).decode(raster)
