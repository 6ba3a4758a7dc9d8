#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Main entry point for the glyph decoder
"""

import sys
from typing import Optional, Sequence

from .setup.arguments import setup_arguments
from .setup.initialization import setup_logging_from_args
from .output import describe_unknowns, format_output

from config import EXIT_DECODE_ERROR, EXIT_IMAGE_ERROR, EXIT_OK
from glyph_recognition import (
    GlyphDecoder,
    GlyphDecodingError,
    ImageLoadError,
    load_raster,
)
from utils.logging import get_logger, log_action, log_event, log_status, log_success

log = get_logger()


def run(argv: Optional[Sequence[str]] = None) -> int:
    """
    Decode one image and print the result.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = setup_arguments(argv)
    setup_logging_from_args(args)

    try:
        decoder = GlyphDecoder(
            scale=args.scale,
            border=args.border,
            max_workers=args.workers,
            measure_time=args.measure_time,
        )
    except (TypeError, ValueError) as e:
        log.error(f"Invalid decoder settings: {e}")
        return EXIT_DECODE_ERROR

    try:
        raster = load_raster(args.image)
    except ImageLoadError as e:
        log.error(str(e))
        return EXIT_IMAGE_ERROR

    log_event(log, "Raster loaded", "🖼️", {
        "Width": raster.shape[1],
        "Height": raster.shape[0],
    })

    log_action(log, f"Decoding {args.image}...", "🔎")
    try:
        grid, lines = decoder.decode_with_grid(raster)
    except GlyphDecodingError as e:
        log.error(f"Failed to decode {args.image}: {e}")
        return EXIT_DECODE_ERROR

    unknowns = describe_unknowns(lines)
    log_status(log, "Unknown glyphs", len(unknowns), "❓")
    for description in unknowns:
        log.warning(f"Unknown glyph at {description}")

    print(format_output(args.format, lines, grid))
    log_success(log, f"Decoded {len(lines)} line(s) from {args.image}")
    return EXIT_OK


def main() -> None:
    """Program entry point"""
    sys.exit(run())


if __name__ == "__main__":
    main()
