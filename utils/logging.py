#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Logging configuration and utilities
"""

# Standard library imports
import io
import sys
import time
from typing import Any

# Third-party imports
import logging

# Local imports
from config import LOG_SEPARATOR_WIDTH, LOG_TIME_FORMAT

# Add custom TRACE logging level (below DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

def trace(self, message, *args, **kwargs):
    """Log a trace message (ultra-detailed, below DEBUG)"""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)

# Add trace() method to Logger class
logging.Logger.trace = trace

LOG_MODES = ('customer', 'verbose', 'debug')

# Global log mode (set by setup_logging)
_CURRENT_LOG_MODE = 'customer'

def get_log_mode() -> str:
    """Get the current logging mode"""
    return _CURRENT_LOG_MODE


class SafeStreamHandler(logging.StreamHandler):
    """A stream handler that safely handles None streams and broken pipes"""
    def __init__(self, stream=None):
        # If stream is None, create a dummy stream that does nothing
        if stream is None:
            stream = io.StringIO()
        super().__init__(stream)

    def emit(self, record):
        try:
            msg = self.format(record)
            try:
                self.stream.write(msg + self.terminator)
                self.stream.flush()
            except (BlockingIOError, BrokenPipeError, OSError):
                # Stream is blocking or broken - skip this message
                pass
        except (AttributeError, OSError, ValueError):
            pass


class _Fmt(logging.Formatter):
    def format(self, record):
        record._when = time.strftime(LOG_TIME_FORMAT, time.localtime())
        return super().format(record)


def setup_logging(log_mode: str = 'customer', stream=None) -> logging.Logger:
    """
    Setup logging configuration with three modes

    Args:
        log_mode: 'customer' (clean logs), 'verbose' (developer), or 'debug' (ultra-detailed)
        stream: Output stream (defaults to stderr so decoded output on stdout stays clean)

    Returns:
        The configured root logger
    """
    global _CURRENT_LOG_MODE

    if log_mode not in LOG_MODES:
        raise ValueError(f"log_mode must be one of {LOG_MODES}, got {log_mode!r}")
    _CURRENT_LOG_MODE = log_mode

    if stream is None:
        stream = sys.stderr if sys.stderr is not None else sys.stdout

    handler = SafeStreamHandler(stream)

    # Set up formatter and level based on log mode
    if log_mode == 'customer':
        # Clean, minimal format for customer logs
        fmt = "%(_when)s | %(message)s"
        level = logging.INFO
    elif log_mode == 'verbose':
        # Detailed format for developer logs
        fmt = "%(_when)s | %(levelname)-7s | %(message)s"
        level = logging.DEBUG
    else:  # debug mode
        # Ultra-detailed format for debug logs
        fmt = "%(_when)s | %(levelname)-7s | %(name)-15s | %(funcName)-20s | %(message)s"
        level = TRACE

    handler.setFormatter(_Fmt(fmt))
    handler.setLevel(level)

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)
    return root


def get_logger(name: str = "glyphs") -> logging.Logger:
    """Get a logger instance"""
    return logging.getLogger(name)


# ==================== Pretty Logging Helpers ====================

def log_section(logger: logging.Logger, title: str, icon: str = "📌", details: dict = None, mode: str = None):
    """
    Log a section with title and optional details

    Args:
        logger: Logger instance
        title: Main title text (will be uppercased in verbose/debug mode)
        icon: Emoji icon to use
        details: Optional dict of key-value pairs to display
        mode: 'customer' (simple), 'verbose' (detailed), or 'debug' (ultra-detailed).
              If None, uses current global log mode.

    Example:
        log_section(log, "Image decoded", "🔎", {"Lines": 10, "Unknown": 0})
    """
    if mode is None:
        mode = get_log_mode()

    # In customer mode, use simpler format without separators
    if mode == 'customer':
        if details:
            detail_str = ", ".join(f"{k}: {v}" for k, v in details.items())
            logger.info(f"{icon} {title} ({detail_str})")
        else:
            logger.info(f"{icon} {title}")
    else:
        logger.info("=" * LOG_SEPARATOR_WIDTH)
        logger.info(f"{icon} {title.upper()}")
        if details:
            for key, value in details.items():
                logger.info(f"   📋 {key}: {value}")
        logger.info("=" * LOG_SEPARATOR_WIDTH)


def log_event(logger: logging.Logger, event: str, icon: str = "✓", details: dict = None):
    """
    Log a single event with optional details

    Example:
        log_event(log, "Raster loaded", "🖼️", {"Width": 400, "Height": 240})
    """
    logger.info(f"{icon} {event}")
    if details:
        for key, value in details.items():
            logger.info(f"   • {key}: {value}")


def log_action(logger: logging.Logger, action: str, icon: str = "⚡"):
    """Log an action being performed"""
    logger.info(f"{icon} {action}")


def log_success(logger: logging.Logger, message: str, icon: str = "✅"):
    """Log a success message"""
    logger.info(f"{icon} {message}")


def log_status(logger: logging.Logger, status: str, value: Any, icon: str = "ℹ️"):
    """Log a status update"""
    logger.info(f"{icon} {status}: {value}")
