#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Glyph Recognition Module

Decodes images of block-pixel digit glyphs into lines of symbols.
Uses exact (width, pixels) lookup against a fixed glyph table.
"""

from .binarizer import binarize, binarize_buffer
from .border import strip_border
from .decoder import GlyphDecoder, decode_raster, unknown_glyphs
from .errors import GlyphDecodingError, GridShapeError, ImageLoadError, RasterFormatError
from .glyph import Glyph
from .pixels import Grid, Pixel, blank_mask, render_grid
from .presentation import format_transcript, symbols_to_dict
from .raster import load_raster
from .segmentation import segment_line, split_lines
from .symbols import (
    ELLIPSIS,
    SYMBOL_TABLE,
    Digit,
    EllipsisMark,
    Symbol,
    Unknown,
    build_symbol_table,
    decode_glyph,
)

__all__ = [
    'GlyphDecoder',
    'decode_raster',
    'unknown_glyphs',
    'binarize',
    'binarize_buffer',
    'strip_border',
    'split_lines',
    'segment_line',
    'Glyph',
    'Grid',
    'Pixel',
    'blank_mask',
    'render_grid',
    'Symbol',
    'Digit',
    'EllipsisMark',
    'ELLIPSIS',
    'Unknown',
    'SYMBOL_TABLE',
    'build_symbol_table',
    'decode_glyph',
    'format_transcript',
    'symbols_to_dict',
    'load_raster',
    'GlyphDecodingError',
    'RasterFormatError',
    'GridShapeError',
    'ImageLoadError',
]
