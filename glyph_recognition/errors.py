#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by the glyph decoding pipeline.

Unrecognized glyphs are not errors; they come back as ``Unknown`` symbols.
"""


class GlyphDecodingError(Exception):
    """Base class for fatal decoding failures."""


class RasterFormatError(GlyphDecodingError):
    """The source raster is not a pure black/white 2-D image."""


class GridShapeError(GlyphDecodingError):
    """A grid or glyph is too small or not rectangular."""


class ImageLoadError(GlyphDecodingError):
    """An image file could not be read."""
