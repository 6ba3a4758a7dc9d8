#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Global constants for the glyph decoder
All format constants and defaults are centralized here for easy tracking and modification
"""

# =============================================================================
# APPLICATION METADATA
# =============================================================================

APP_NAME = "glyph-decoder"
APP_VERSION = "0.1.0"


# =============================================================================
# SOURCE FORMAT CONSTANTS
# =============================================================================

# These describe the one rendering tool whose output we decode.
# THESE ARE THE CORRECT VALUES FOR THAT FORMAT - DO NOT CHANGE WITHOUT TESTING
DOWNSAMPLE_SCALE = 4         # Source pixels per grid cell along each axis
BORDER_THICKNESS = 2         # Grid rows/columns of frame on each edge

# Grayscale samples that are accepted by the binarizer
PIXEL_OFF_VALUE = 0          # Pure black
PIXEL_ON_VALUE = 255         # Pure white


# =============================================================================
# DECODER CONSTANTS
# =============================================================================

DEFAULT_MAX_WORKERS = 1      # Lines decoded in parallel (1 = synchronous)
DEFAULT_MEASURE_TIME = False # Log per-stage timings during decode

# Text used when printing decoded lines
TRANSCRIPT_ELLIPSIS = "..."
TRANSCRIPT_UNKNOWN = "?"

# Characters used when drawing grids and glyphs
RENDER_ON_CHAR = "#"
RENDER_OFF_CHAR = " "


# =============================================================================
# CLI DEFAULTS
# =============================================================================

DEFAULT_IMAGE_PATH = "tests/files/message1.png"
DEFAULT_OUTPUT_FORMAT = "transcript"
OUTPUT_FORMATS = ("transcript", "debug", "json", "grid")
DEFAULT_VERBOSE = False

# Process exit codes
EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_IMAGE_ERROR = 2


# =============================================================================
# LOGGING CONSTANTS
# =============================================================================

LOG_SEPARATOR_WIDTH = 80                 # Width of separator lines in logs (e.g., "=" * 80)
LOG_TIME_FORMAT = "%H:%M:%S"             # Timestamp prefix of console log lines
