#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup subpackage
"""

from .arguments import build_parser, setup_arguments
from .initialization import resolve_log_mode, setup_logging_from_args

__all__ = [
    'build_parser',
    'setup_arguments',
    'resolve_log_mode',
    'setup_logging_from_args',
]
