"""
Harmonic Oscillation Module

This module provides closed-form parameters of simple harmonic motion.

Main functions:
- spring_harmonic_motion: Amplitude, period and equation of an ideal spring
- format_harmonic_equation: Text rendering of A * cos(ω t - φ)
"""

from .spring import (
    spring_harmonic_motion,
    format_harmonic_equation,
)

__all__ = [
    'spring_harmonic_motion',
    'format_harmonic_equation',
]
