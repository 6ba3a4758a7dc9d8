#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Input validation utilities
Provides functions for validating decoder parameters
"""

# Standard library imports
from typing import Any


def validate_positive_int(value: Any, name: str = "value") -> None:
    """
    Validate that a value is a positive integer

    Args:
        value: Value to validate
        name: Name of the parameter for error messages

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is not positive
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative_int(value: Any, name: str = "value") -> None:
    """
    Validate that a value is a non-negative integer

    Args:
        value: Value to validate
        name: Name of the parameter for error messages

    Raises:
        TypeError: If value is not an integer
        ValueError: If value is negative
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
