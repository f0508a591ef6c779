"""
Utilities package for Thumbnail Matcher.

Provides:
- formatters: Human-readable formatting for numbers and durations
- validators: Input validation for matching runs
"""

from __future__ import annotations

# Import submodules for convenient access
from . import formatters
from . import validators

# Export commonly used functions
from .formatters import format_number, format_time_estimate
from .validators import (
    validate_directory,
    validate_threshold,
    validate_workers,
    validate_match_params,
)

__all__ = [
    # Submodules
    'formatters',
    'validators',
    # Formatters
    'format_number',
    'format_time_estimate',
    # Validators
    'validate_directory',
    'validate_threshold',
    'validate_workers',
    'validate_match_params',
]
