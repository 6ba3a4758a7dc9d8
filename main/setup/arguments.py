#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line argument parsing
"""

import argparse
from typing import Optional, Sequence

from config import (
    BORDER_THICKNESS,
    DEFAULT_IMAGE_PATH,
    DEFAULT_MAX_WORKERS,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_VERBOSE,
    DOWNSAMPLE_SCALE,
    OUTPUT_FORMATS,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser"""
    ap = argparse.ArgumentParser(
        description="Glyph decoder - read block-pixel digit images into text"
    )

    ap.add_argument("image", nargs="?", default=DEFAULT_IMAGE_PATH,
                   help=f"Image to decode (default: {DEFAULT_IMAGE_PATH})")
    ap.add_argument("--format", choices=OUTPUT_FORMATS, default=DEFAULT_OUTPUT_FORMAT,
                   help="Output format: digit transcript, symbol list, JSON, or the binarized grid")

    # Format arguments
    ap.add_argument("--scale", type=int, default=DOWNSAMPLE_SCALE,
                   help="Source pixels per grid cell")
    ap.add_argument("--border", type=int, default=BORDER_THICKNESS,
                   help="Frame thickness in grid cells removed from each edge")

    # Processing arguments
    ap.add_argument("--workers", type=int, default=DEFAULT_MAX_WORKERS,
                   help="Decode lines on this many threads")
    ap.add_argument("--measure-time", action="store_true", default=False,
                   help="Log per-stage decode timings")

    # General arguments
    ap.add_argument("--verbose", action="store_true", default=DEFAULT_VERBOSE,
                   help="Enable verbose logging (developer mode - shows all technical details)")
    ap.add_argument("--debug", action="store_true", default=False,
                   help="Enable ultra-detailed debug logging (includes per-column scan traces)")

    return ap


def setup_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse and return command line arguments"""
    return build_parser().parse_args(argv)
