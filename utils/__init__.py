#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils Package - Utility functions and helpers

- logging: console logging setup and pretty logging helpers
- validation: parameter validation for the decoder
"""

# Lazy imports for modules that depend on config (to avoid circular imports)
# These will be imported on first access via __getattr__
def __getattr__(name):
    """Lazy import for modules that may have circular dependencies"""
    if name in {
        'get_logger', 'setup_logging', 'log_section', 'log_success',
        'log_status', 'get_log_mode', 'log_event', 'log_action'
    }:
        from utils.logging import (
            get_logger, setup_logging, log_section, log_success,
            log_status, get_log_mode, log_event, log_action
        )
        return locals()[name]

    if name in {'validate_positive_int', 'validate_non_negative_int'}:
        from utils.validation import validate_positive_int, validate_non_negative_int
        return locals()[name]

    raise AttributeError(f"module 'utils' has no attribute '{name}'")

__all__ = [
    # Logging (lazy)
    'get_logger', 'setup_logging', 'log_section', 'log_success',
    'log_status', 'get_log_mode', 'log_event', 'log_action',
    # Validation (lazy)
    'validate_positive_int', 'validate_non_negative_int',
]
