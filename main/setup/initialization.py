#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Initialization setup (logging)
"""

import argparse

from config import APP_VERSION
from utils.logging import setup_logging, get_logger, log_section

log = get_logger()


def resolve_log_mode(args: argparse.Namespace) -> str:
    """Determine log mode based on flags"""
    if args.debug:
        return 'debug'
    if args.verbose:
        return 'verbose'
    return 'customer'


def setup_logging_from_args(args: argparse.Namespace) -> str:
    """Setup logging from parsed arguments and return the log mode"""
    log_mode = resolve_log_mode(args)
    setup_logging(log_mode)

    if log_mode != 'customer':
        log_section(log, "Glyph Decoder Starting", "🚀", {
            "Version": APP_VERSION,
            "Image": args.image,
            "Scale": args.scale,
            "Border": args.border,
            "Workers": args.workers,
        })
    return log_mode
