"""
Utility Functions Module

This module provides angle normalisation helpers and the warning machinery
used when a formula receives a degenerate input.

Main functions:
- normalize_degrees: Fold an angle into [0, 360)
- normalize_radians: Fold an angle into [0, 2π)
- report_degenerate: Warn (or raise in strict mode) about a degenerate input
"""

from .angles import (
    FULL_TURN_DEGREES,
    FULL_TURN_RADIANS,
    normalize_degrees,
    normalize_radians,
)
from .errors import (
    DegenerateInputWarning,
    report_degenerate,
)

__all__ = [
    'FULL_TURN_DEGREES',
    'FULL_TURN_RADIANS',
    'normalize_degrees',
    'normalize_radians',
    'DegenerateInputWarning',
    'report_degenerate',
]
